"""Error Hierarchy — verifies codes, statuses and response bodies.

Tests:
    - Each error maps to its HTTP status and code
    - Single errors render {"error": ...}; validation renders {"errors": [...]}
    - Context carries user_id for not-found errors
"""

from crud_api.core.errors import (
    CrudApiError,
    EmailConflictError,
    ErrorCategory,
    UnauthorizedError,
    UserNotFoundError,
    ValidationFailedError,
)


def test_user_not_found_is_404_with_fixed_message():
    err = UserNotFoundError(7)
    assert err.http_status == 404
    assert err.code == "USER_NOT_FOUND"
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert err.to_response() == {"error": "User not found."}
    assert err.context.user_id == 7


def test_email_conflict_is_409():
    err = EmailConflictError("a@x.com")
    assert err.http_status == 409
    assert err.category == ErrorCategory.CONFLICT
    assert err.to_response() == {"error": "Email already exists."}


def test_unauthorized_names_the_header():
    err = UnauthorizedError("X-API-KEY")
    assert err.http_status == 401
    assert err.to_response() == {"error": "Missing or invalid X-API-KEY."}


def test_validation_failed_renders_error_list():
    err = ValidationFailedError(["a", "b"])
    assert err.http_status == 400
    assert err.to_response() == {"errors": ["a", "b"]}


def test_all_errors_share_the_base_class():
    for err in (
        UserNotFoundError(1), EmailConflictError("e"),
        UnauthorizedError("h"), ValidationFailedError([]),
    ):
        assert isinstance(err, CrudApiError)
