"""Users Routes — CRUD over the in-memory user registry.

Invariants:
    - Every handler runs inside _failure_boundary: domain errors pass through,
      anything else becomes UnexpectedFaultError (500 "something went wrong")
    - Missing ids short-circuit before any mutation (get/patch 404, delete 400)
    - Duplicate names short-circuit before insert (400)
    - All routes share one per-client rate limit (users_limit)

Design Decisions:
    - PATCH body is optional: an empty request is an empty merge, so the id check decides
    - GET /users/{id} keeps the {"users": [...]} envelope but holds only the match
    - request/response parameters are required by slowapi for header injection
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import APIRouter, Depends, Request, Response, status

from users_api.api.dependencies import get_registry
from users_api.api.rate_limit import users_limit
from users_api.core.domain_types import UserMessage
from users_api.core.errors import (
    UsersApiError, UserNotFoundError, UnexpectedFaultError,
)
from users_api.core.user_registry import UserRegistry
from users_api.schemas.user import (
    MessageResponse, UserCreate, UserCreatedResponse, UserResponse,
    UserUpdate, UsersResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["Users"])

_NOT_FOUND_RESPONSE = {"model": MessageResponse, "description": "The user was not found"}


@contextmanager
def _failure_boundary(operation: str) -> Iterator[None]:
    try:
        yield
    except UsersApiError:
        raise
    except Exception as e:
        logger.error(
            f"Failed to {operation}: {e}",
            exc_info=True, extra={"operation": operation},
        )
        raise UnexpectedFaultError(operation) from e


@router.get(
    "", response_model=UsersResponse,
    summary="Returns the list of all users",
)
@users_limit
async def list_users(
    request: Request,
    response: Response,
    registry: UserRegistry = Depends(get_registry),
):
    with _failure_boundary("list users"):
        return {"users": [UserResponse.from_user(u) for u in registry.all()]}


@router.get(
    "/{user_id}", response_model=UsersResponse,
    summary="Returns the user specified by id",
    responses={status.HTTP_404_NOT_FOUND: _NOT_FOUND_RESPONSE},
)
@users_limit
async def get_user(
    user_id: str,
    request: Request,
    response: Response,
    registry: UserRegistry = Depends(get_registry),
):
    with _failure_boundary("get user"):
        user = registry.get(user_id)
        if user is None:
            raise UserNotFoundError(
                user_id, message=UserMessage.DOES_NOT_EXIST.value,
            )
        return {"users": [UserResponse.from_user(user)]}


@router.post(
    "", response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create new user",
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "model": MessageResponse, "description": "User already exists",
        },
    },
)
@users_limit
async def create_user(
    body: UserCreate,
    request: Request,
    response: Response,
    registry: UserRegistry = Depends(get_registry),
):
    with _failure_boundary("create user"):
        user = registry.insert(body.name, body.age)
        logger.info(f"User {user.name!r} created", extra={"user_id": user.id})
        return {"message": UserMessage.CREATED.value, "id": user.id}


@router.delete(
    "/{user_id}", response_model=MessageResponse,
    summary="Removes user from the list",
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "model": MessageResponse, "description": "The user was not found",
        },
    },
)
@users_limit
async def delete_user(
    user_id: str,
    request: Request,
    response: Response,
    registry: UserRegistry = Depends(get_registry),
):
    with _failure_boundary("delete user"):
        if not registry.remove(user_id):
            raise UserNotFoundError(
                user_id, http_status=status.HTTP_400_BAD_REQUEST,
            )
        logger.info("User deleted", extra={"user_id": user_id})
        return {"message": UserMessage.DELETED.value}


@router.patch(
    "/{user_id}", response_model=MessageResponse,
    summary="Update the user by the id",
    responses={status.HTTP_404_NOT_FOUND: _NOT_FOUND_RESPONSE},
)
@users_limit
async def update_user(
    user_id: str,
    request: Request,
    response: Response,
    body: UserUpdate | None = None,
    registry: UserRegistry = Depends(get_registry),
):
    with _failure_boundary("update user"):
        sent = body.model_dump(exclude_unset=True) if body is not None else {}
        changes = {k: v for k, v in sent.items() if v is not None}
        if registry.update(user_id, changes) is None:
            raise UserNotFoundError(user_id)
        logger.info(
            f"User updated ({', '.join(sorted(changes)) or 'no fields'})",
            extra={"user_id": user_id},
        )
        return {"message": UserMessage.UPDATED.value}

