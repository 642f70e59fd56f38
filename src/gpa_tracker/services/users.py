"""User record management."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from gpa_tracker.domain.errors import RecordNotFoundError
from gpa_tracker.domain.models import UserRecord

USER_FIELDS = ("name", "email", "age")

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        """Create and return a new user record."""

    def list_users(self) -> list[UserRecord]:
        """Return all users."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def update_user(self, user_id: UUID, payload: dict[str, object]) -> UserRecord:
        """Replace the given fields and return the updated user."""

    def delete_user(self, user_id: UUID) -> None:
        """Delete the user with the given id."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def create_user(self, name: str, email: str, age: int) -> UserRecord:
        """Store a new user and return it with its assigned id."""
        user = self.repository.create_user({"name": name, "email": email, "age": age})
        logger.info("Created user", extra={"user_id": str(user.id)})
        return user

    def list_users(self) -> list[UserRecord]:
        """Return every stored user."""
        return self.repository.list_users()

    def update_user(self, user_id: UUID, changes: dict[str, object]) -> UserRecord:
        """Update the provided user fields; unknown keys are ignored."""
        payload = {key: changes[key] for key in USER_FIELDS if key in changes}
        if not payload:
            existing = self.repository.get_user(user_id)
            if existing is None:
                raise RecordNotFoundError("user", user_id)
            return existing
        return self.repository.update_user(user_id, payload)

    def delete_user(self, user_id: UUID) -> None:
        """Delete a user by id."""
        self.repository.delete_user(user_id)
        logger.info("Deleted user", extra={"user_id": str(user_id)})
