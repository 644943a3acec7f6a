"""User Schemas — Pydantic models for the /users request and response bodies.

Invariants:
    - Wire names are camelCase (firstName, isActive, createdOnUtc); Python
      attributes are snake_case; both spellings accepted on input
    - Request string fields are optional here: missing/blank values must reach
      the rule table in core/validate_user.py so they are reported in order
    - Wrong JSON types (e.g. a number for firstName) fail here → 400

Design Decisions:
    - Constraints NOT declared with Field(min_length=...): the rule table owns
      them and produces the {"errors": [...]} messages
    - StrictBool for isActive: "yes" or 1 are rejected, only JSON booleans pass
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr
from pydantic.alias_generators import to_camel

from crud_api.core.domain_types import User


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateUserRequest(_CamelModel):
    """POST /users body."""
    first_name: StrictStr | None = None
    last_name: StrictStr | None = None
    email: StrictStr | None = None


class UpdateUserRequest(_CamelModel):
    """PUT /users/{id} body. isActive defaults to false when omitted."""
    first_name: StrictStr | None = None
    last_name: StrictStr | None = None
    email: StrictStr | None = None
    is_active: StrictBool = False


class UserResponse(_CamelModel):
    """Public-facing user data."""
    id: int
    first_name: str
    last_name: str
    email: str
    is_active: bool
    created_on_utc: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            is_active=user.is_active,
            created_on_utc=user.created_on_utc,
        )


class ErrorBody(BaseModel):
    """Single error — 401, 404, 409, 500."""
    error: str


class ValidationErrorBody(BaseModel):
    """Validation failure — 400."""
    errors: list[str]
