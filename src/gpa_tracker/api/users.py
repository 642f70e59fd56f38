"""User record endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from gpa_tracker.api.models import UserCreate, UserOut, UserUpdate
from gpa_tracker.domain.errors import StoreError

if TYPE_CHECKING:
    from gpa_tracker.containers import AppContainer

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


@router.get("", response_model=list[UserOut])
def list_users(request: Request) -> list[UserOut]:
    """Return all users."""
    container: AppContainer = request.app.state.container
    return [UserOut.from_record(user) for user in container.user_service.list_users()]


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, request: Request) -> UserOut | JSONResponse:
    """Create a user."""
    container: AppContainer = request.app.state.container
    try:
        user = container.user_service.create_user(
            name=payload.name, email=payload.email, age=payload.age
        )
    except StoreError:
        logger.exception("Failed to create user")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Could not create user."},
        )
    return UserOut.from_record(user)


@router.put("/{user_id}", response_model=UserOut)
def update_user(user_id: UUID, payload: UserUpdate, request: Request) -> UserOut:
    """Update the provided fields of a user."""
    container: AppContainer = request.app.state.container
    user = container.user_service.update_user(user_id, payload.changes())
    return UserOut.from_record(user)


@router.delete("/{user_id}")
def delete_user(user_id: UUID, request: Request) -> dict[str, str]:
    """Delete a user."""
    container: AppContainer = request.app.state.container
    container.user_service.delete_user(user_id)
    return {"message": "User deleted successfully"}
