"""HTTP Middleware — request logging and static API-key authentication.

Invariants:
    - Chain order is fixed: log_requests wraps the API-key guard, so rejected
      requests are logged with timing too
    - log_requests never short-circuits; on an unhandled exception it logs a 500
      with timing and re-raises for the global handler
    - The guard lets bypass paths through untouched, otherwise answers 401
      without calling downstream when the header is missing or wrong

Design Decisions:
    - Function middleware via app.middleware("http"): Starlette wraps each newly
      registered middleware around the previous ones, so register_middleware
      adds the guard first, CORS second and the logger last
    - CORS between logging and the guard: preflights are logged but never
      need the key
    - Guard returns the 401 itself: exception handlers sit inside the middleware
      stack and would never see an error raised here
    - secrets.compare_digest for the key: comparison time independent of content
"""

import logging
import secrets
import time
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from crud_api.config import Settings
from crud_api.core.errors import UnauthorizedError

logger = logging.getLogger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]
HttpMiddleware = Callable[[Request, CallNext], Awaitable[Response]]


def register_middleware(app: FastAPI, settings: Settings) -> None:
    """Install the chain: log_requests → CORS → API-key guard → routes."""
    app.middleware("http")(api_key_guard(settings))
    # Preflights are answered here, after logging and before the key check
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)


async def log_requests(request: Request, call_next: CallNext) -> Response:
    """Log method+path on the way in, status and elapsed time on the way out."""
    method, path = request.method, request.url.path
    logger.info(f"--> {method} {path}", extra={"method": method, "path": path})
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        _log_completion(method, path, status.HTTP_500_INTERNAL_SERVER_ERROR, started)
        raise
    _log_completion(method, path, response.status_code, started)
    return response


def _log_completion(method: str, path: str, status_code: int, started: float) -> None:
    elapsed_ms = round((time.perf_counter() - started) * 1000)
    logger.info(
        f"<-- {status_code} ({elapsed_ms}ms) {method} {path}",
        extra={
            "method": method, "path": path,
            "status_code": status_code, "elapsed_ms": elapsed_ms,
        },
    )


def api_key_guard(settings: Settings) -> HttpMiddleware:
    """Build the auth middleware for the configured header, key and bypass list."""
    header_name = settings.api_key_header
    expected = settings.api_key.encode()
    bypass = tuple(settings.auth_bypass_prefixes)

    async def guard(request: Request, call_next: CallNext) -> Response:
        if is_bypassed(request.url.path, bypass):
            return await call_next(request)
        provided = request.headers.get(header_name)
        if provided is None or not secrets.compare_digest(provided.encode(), expected):
            error = UnauthorizedError(header_name)
            logger.warning(
                error.message,
                extra={"path": request.url.path, "error_code": error.code},
            )
            return JSONResponse(
                status_code=error.http_status, content=error.to_response(),
            )
        return await call_next(request)

    return guard


def is_bypassed(path: str, prefixes: tuple[str, ...]) -> bool:
    """Segment-aware prefix match: '/docs' matches '/docs' and '/docs/x', not '/docsx'."""
    for prefix in prefixes:
        if path == prefix or path.startswith(prefix.rstrip("/") + "/"):
            return True
    return False
