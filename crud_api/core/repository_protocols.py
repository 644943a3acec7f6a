"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - The store is reached only through UserRepository
    - Absence is signalled with None / False, never with an exception;
      duplicate emails raise EmailConflictError (core/errors.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Request shapes as Protocols: the store accepts the Pydantic schemas
      without core importing them
"""

from typing import Protocol

from crud_api.core.domain_types import User, UserId


class CreateUserLike(Protocol):
    """Structural contract for the body of a create request."""
    first_name: str
    last_name: str
    email: str


class UpdateUserLike(Protocol):
    """Structural contract for the body of an update request."""
    first_name: str
    last_name: str
    email: str
    is_active: bool


class UserRepository(Protocol):
    """Contract for user storage — implemented by infrastructure/user_store.py."""
    def list(self) -> list[User]: ...
    def get_by_id(self, user_id: UserId) -> User | None: ...
    def create(self, request: CreateUserLike) -> User: ...
    def update(self, user_id: UserId, request: UpdateUserLike) -> User | None: ...
    def delete(self, user_id: UserId) -> bool: ...
    def count(self) -> int: ...
