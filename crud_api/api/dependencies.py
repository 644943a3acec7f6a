"""API Dependencies — store access for route handlers.

Invariants:
    - The store lives on app.state, set once by create_app()
    - Handlers receive it per request via Depends(get_user_store) and never
      keep it beyond the request

Design Decisions:
    - app.state over a module-level global: each app (and each test) owns its
      own store, no ambient state shared between instances
"""

from fastapi import Request

from crud_api.core.repository_protocols import UserRepository


def get_user_store(request: Request) -> UserRepository:
    """FastAPI dependency returning the app's user store."""
    return request.app.state.user_store
