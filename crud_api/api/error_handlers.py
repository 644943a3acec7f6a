"""Error Handlers — global exception handlers for the Users API.

Invariants:
    - CrudApiError → exc.http_status with exc.to_response() ({"error"} or {"errors"})
    - RequestValidationError → 400 {"errors": [...]}, same shape as rule-table failures
    - Routing HTTPException (unknown path 404, wrong method 405) → {"error": detail},
      response headers such as Allow kept
    - Exception (catch-all) → 500 {"error": ...}, never leaks internal details

Design Decisions:
    - Layered handlers: domain (CrudApiError), routing (HTTPException),
      shape (Pydantic), catch-all (Exception)
    - Extracted from main.py: create_app stays a list of registrations
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from crud_api.core.errors import CrudApiError, ErrorSeverity

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred."


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_crud_api_error_handler(app)
    _register_http_exception_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_crud_api_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(CrudApiError)
    async def crud_api_error_handler(request: Request, exc: CrudApiError):
        """Handle all domain errors raised by routes."""
        log = logger.warning if exc.severity != ErrorSeverity.INFO else logger.info
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "user_id": exc.context.user_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_exception_handler(app: FastAPI) -> None:
    """Register routing error handler (404 unknown path, 405 wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Reshape Starlette's {"detail"} body into {"error"}."""
        logger.info(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed bodies and path parameters."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "error_code": "VALIDATION_FAILED"},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": format_validation_errors(exc)},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "error_code": "INTERNAL_ERROR"},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )


def format_validation_errors(exc: RequestValidationError) -> list[str]:
    """One "<field>: <message>" line per Pydantic error; location prefix dropped."""
    messages = []
    for e in exc.errors():
        loc = [str(part) for part in e["loc"]]
        field = ".".join(loc[1:]) or ".".join(loc)
        messages.append(f"{field}: {e['msg']}")
    return messages
