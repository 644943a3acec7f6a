"""User Store — in-memory user collection with id assignment and email uniqueness.

Invariants:
    - Every public method runs under one lock: id assignment and the uniqueness
      check cannot interleave with another writer
    - Ids are sequential from 1 and never reused, even after delete
    - Emails are unique case-insensitively (casefold of the trimmed value)
    - Update replaces in place: list order stays insertion order
    - The raw container never leaves the store; list() returns a copy

Design Decisions:
    - dict keyed by id: O(1) lookup, insertion-ordered iteration for list()
    - threading.Lock over asyncio.Lock: methods are sync and may be called from
      the event loop or the thread pool alike
    - Store-level conflict raises EmailConflictError; absence returns None/False
"""

import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable

from crud_api.core.domain_types import User, UserId
from crud_api.core.errors import EmailConflictError
from crud_api.core.repository_protocols import CreateUserLike, UpdateUserLike

logger = logging.getLogger(__name__)

SEED_USERS: tuple[tuple[str, str, str], ...] = (
    ("Kevin", "Rangel", "kevin@example.com"),
    ("Jane", "Doe", "jane@example.com"),
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UserStore:
    """Owns every User instance for the lifetime of the app."""

    def __init__(self, clock: Callable[[], datetime] = _utc_now):
        self._users: dict[UserId, User] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        self._clock = clock

    @classmethod
    def with_seed_data(cls, clock: Callable[[], datetime] = _utc_now) -> "UserStore":
        """Store pre-populated with the two demo users (ids 1 and 2)."""
        store = cls(clock=clock)
        for first_name, last_name, email in SEED_USERS:
            with store._lock:
                store._insert(first_name, last_name, email)
        logger.info(f"User store seeded with {len(SEED_USERS)} users")
        return store

    def list(self) -> list[User]:
        with self._lock:
            return list(self._users.values())

    def get_by_id(self, user_id: UserId) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def create(self, request: CreateUserLike) -> User:
        """Append a new active user. Raises EmailConflictError on duplicate email."""
        email = request.email.strip()
        with self._lock:
            self._ensure_email_free(email)
            user = self._insert(request.first_name, request.last_name, email)
        logger.info("User created", extra={"user_id": user.id})
        return user

    def update(self, user_id: UserId, request: UpdateUserLike) -> User | None:
        """Replace names, email and active flag. None when the id is unknown."""
        email = request.email.strip()
        with self._lock:
            existing = self._users.get(user_id)
            if existing is None:
                return None
            self._ensure_email_free(email, exclude_id=user_id)
            updated = replace(
                existing,
                first_name=request.first_name.strip(),
                last_name=request.last_name.strip(),
                email=email,
                is_active=request.is_active,
            )
            # Reassigning an existing key keeps its position
            self._users[user_id] = updated
        logger.info("User updated", extra={"user_id": user_id})
        return updated

    def delete(self, user_id: UserId) -> bool:
        with self._lock:
            if self._users.pop(user_id, None) is None:
                return False
        logger.info("User deleted", extra={"user_id": user_id})
        return True

    # ─── Lock held by caller ────────────────────────────────────

    def _insert(self, first_name: str, last_name: str, email: str) -> User:
        user = User(
            id=UserId(self._next_id),
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            email=email.strip(),
            is_active=True,
            created_on_utc=self._clock(),
        )
        self._next_id += 1
        self._users[user.id] = user
        return user

    def _ensure_email_free(self, email: str, exclude_id: UserId | None = None) -> None:
        wanted = email.casefold()
        for user in self._users.values():
            if user.id != exclude_id and user.email.casefold() == wanted:
                logger.warning(
                    "Email already in use",
                    extra={"user_id": user.id, "error_code": "EMAIL_CONFLICT"},
                )
                raise EmailConflictError(email)
