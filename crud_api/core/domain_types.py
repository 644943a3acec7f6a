"""Domain Types — the User record and the vocabulary around it.

Invariants:
    - UserId wraps int — ids are positive, sequential from 1, never reused
    - User is frozen: only the store produces new versions (dataclasses.replace)
    - created_on_utc is timezone-aware UTC and never changes after creation
    - All rule kinds encoded as Enums — no raw string matching

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class User:
    """A stored user. Owned by the store; handlers only read it."""
    id: UserId
    first_name: str
    last_name: str
    email: str
    is_active: bool
    created_on_utc: datetime


# ─── Enums ───────────────────────────────────────────────────────

class RuleKind(str, Enum):
    """Field constraint kinds understood by the validation rule table."""
    REQUIRED = "required"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    EMAIL = "email"


# ─── Field limits ────────────────────────────────────────────────

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 120
