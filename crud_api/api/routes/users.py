"""User Routes — list/get/create/update/delete over the in-memory store.

Invariants:
    - Validation runs before the store; a failing body never reaches it
    - Store absence (None/False) → UserNotFoundError → 404 {"error": "User not found."}
    - EmailConflictError from the store propagates to the global handler → 409
    - POST answers 201 with Location: /users/{id}; DELETE answers 204, no body

Design Decisions:
    - Thin adapters: validate → delegate → map result; no business rules here
    - Errors raised, not returned: the global handlers own the body shapes
"""

from fastapi import APIRouter, Depends, Response, status

from crud_api.api.dependencies import get_user_store
from crud_api.core.domain_types import UserId
from crud_api.core.errors import UserNotFoundError, ValidationFailedError
from crud_api.core.repository_protocols import UserRepository
from crud_api.core.validate_user import validate_create, validate_update
from crud_api.schemas.user import (
    CreateUserRequest,
    ErrorBody,
    UpdateUserRequest,
    UserResponse,
    ValidationErrorBody,
)

router = APIRouter(prefix="/users", tags=["users"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorBody}}
_INVALID = {status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorBody}}
_CONFLICT = {status.HTTP_409_CONFLICT: {"model": ErrorBody}}


@router.get("", response_model=list[UserResponse], name="get_users")
async def list_users(store: UserRepository = Depends(get_user_store)):
    """All users in insertion order."""
    return [UserResponse.from_user(u) for u in store.list()]


@router.get(
    "/{user_id}", response_model=UserResponse,
    name="get_user_by_id", responses=_NOT_FOUND,
)
async def get_user(user_id: int, store: UserRepository = Depends(get_user_store)):
    user = store.get_by_id(UserId(user_id))
    if user is None:
        raise UserNotFoundError(user_id)
    return UserResponse.from_user(user)


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    name="create_user", responses={**_INVALID, **_CONFLICT},
)
async def create_user(
    body: CreateUserRequest,
    response: Response,
    store: UserRepository = Depends(get_user_store),
):
    """Create an active user; Location header points at the new resource."""
    errors = validate_create(body)
    if errors:
        raise ValidationFailedError(errors)
    user = store.create(body)
    response.headers["Location"] = f"/users/{user.id}"
    return UserResponse.from_user(user)


@router.put(
    "/{user_id}", response_model=UserResponse,
    name="update_user", responses={**_INVALID, **_NOT_FOUND, **_CONFLICT},
)
async def update_user(
    user_id: int,
    body: UpdateUserRequest,
    store: UserRepository = Depends(get_user_store),
):
    """Replace names, email and active flag; id and createdOnUtc are kept."""
    errors = validate_update(body)
    if errors:
        raise ValidationFailedError(errors)
    user = store.update(UserId(user_id), body)
    if user is None:
        raise UserNotFoundError(user_id)
    return UserResponse.from_user(user)


@router.delete(
    "/{user_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response, name="delete_user", responses=_NOT_FOUND,
)
async def delete_user(user_id: int, store: UserRepository = Depends(get_user_store)):
    if not store.delete(UserId(user_id)):
        raise UserNotFoundError(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
