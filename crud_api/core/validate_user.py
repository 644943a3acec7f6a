"""User Validation — rule table applied to create/update request bodies.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - Fields checked in declaration order, rules in table order
    - One message per violated rule; empty list means valid
    - A failed REQUIRED rule skips the remaining rules of that field
    - Lengths are measured on the trimmed value, the same one the store keeps

Design Decisions:
    - Rule table over per-field if-chains: the constraints read as data and
      stay in one place for create and update
    - Return message lists (not exceptions): the route decides how to surface
      them, keeping this module free of HTTP concerns
    - email-validator for syntax, deliverability off: no DNS lookups on a request path
"""

from dataclasses import dataclass
from typing import Any

from email_validator import EmailNotValidError, validate_email

from crud_api.core.domain_types import (
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    RuleKind,
)


@dataclass(frozen=True)
class FieldRule:
    """One constraint on one field. `limit` is used by the length rules."""
    kind: RuleKind
    limit: int | None = None


# (attribute name, wire name, rules)
FieldSpec = tuple[str, str, tuple[FieldRule, ...]]

_NAME_RULES = (
    FieldRule(RuleKind.REQUIRED),
    FieldRule(RuleKind.MIN_LENGTH, NAME_MIN_LENGTH),
    FieldRule(RuleKind.MAX_LENGTH, NAME_MAX_LENGTH),
)

_EMAIL_RULES = (
    FieldRule(RuleKind.REQUIRED),
    FieldRule(RuleKind.EMAIL),
    FieldRule(RuleKind.MAX_LENGTH, EMAIL_MAX_LENGTH),
)

CREATE_USER_RULES: tuple[FieldSpec, ...] = (
    ("first_name", "firstName", _NAME_RULES),
    ("last_name", "lastName", _NAME_RULES),
    ("email", "email", _EMAIL_RULES),
)

# isActive is a plain boolean: shape is enforced by the schema, no rules here
UPDATE_USER_RULES: tuple[FieldSpec, ...] = CREATE_USER_RULES


def validate_create(request: Any) -> list[str]:
    """Validate a create body. Returns violation messages in field order."""
    return validate_fields(request, CREATE_USER_RULES)


def validate_update(request: Any) -> list[str]:
    """Validate an update body. Returns violation messages in field order."""
    return validate_fields(request, UPDATE_USER_RULES)


def validate_fields(request: Any, table: tuple[FieldSpec, ...]) -> list[str]:
    """Apply a rule table to any object exposing the table's attributes."""
    errors: list[str] = []
    for attr, label, rules in table:
        value = getattr(request, attr, None)
        for rule in rules:
            message = check_rule(rule, label, value)
            if message is None:
                continue
            errors.append(message)
            if rule.kind == RuleKind.REQUIRED:
                break
    return errors


def check_rule(rule: FieldRule, label: str, value: Any) -> str | None:
    """Return the violation message for one rule, or None when it holds.

    Non-REQUIRED rules pass on a missing value; REQUIRED reports it.
    """
    if rule.kind == RuleKind.REQUIRED:
        if value is None or (isinstance(value, str) and not value.strip()):
            return f"The {label} field is required."
        return None
    if value is None:
        return None
    if rule.kind == RuleKind.MIN_LENGTH:
        if len(value.strip()) < rule.limit:
            return (
                f"The field {label} must be a string with a minimum "
                f"length of {rule.limit}."
            )
        return None
    if rule.kind == RuleKind.MAX_LENGTH:
        if len(value.strip()) > rule.limit:
            return (
                f"The field {label} must be a string with a maximum "
                f"length of {rule.limit}."
            )
        return None
    if rule.kind == RuleKind.EMAIL:
        if not is_valid_email(value):
            return f"The {label} field is not a valid e-mail address."
        return None
    raise ValueError(f"Unknown rule kind: {rule.kind}")


def is_valid_email(value: str) -> bool:
    """Syntax-only email check."""
    try:
        validate_email(value.strip(), check_deliverability=False)
    except EmailNotValidError:
        return False
    return True
