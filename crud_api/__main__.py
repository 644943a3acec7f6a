"""Run the Users API with uvicorn: `python -m crud_api` or `crud-api`."""

import uvicorn

from crud_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "crud_api.main:app", host=settings.host, port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
