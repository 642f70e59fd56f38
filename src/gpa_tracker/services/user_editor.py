"""Client-side state for the user management form."""

import logging
from dataclasses import dataclass, field
from uuid import UUID

import httpx

from gpa_tracker.adapters.records_client import RecordsClient
from gpa_tracker.domain.models import UserRecord

logger = logging.getLogger(__name__)


@dataclass
class UserEditor:
    """Tracks the user list and which user, if any, is being edited."""

    client: RecordsClient
    users: list[UserRecord] = field(default_factory=list)
    editing_id: UUID | None = None
    error: str | None = None

    async def refresh(self) -> list[UserRecord]:
        """Reload the user list."""
        try:
            self.users = await self.client.list_users()
        except httpx.HTTPError:
            logger.exception("Failed to fetch users")
            self.error = "Could not load users."
        return self.users

    def start_edit(self, user: UserRecord) -> None:
        """Select a user for editing."""
        self.editing_id = user.id

    def cancel_edit(self) -> None:
        """Leave edit mode so the next submit creates a user."""
        self.editing_id = None

    async def submit(self, name: str, email: str, age: int) -> UserRecord | None:
        """Create a user, or update the one being edited."""
        self.error = None
        try:
            if self.editing_id is not None:
                user = await self.client.update_user(
                    self.editing_id, {"name": name, "email": email, "age": age}
                )
            else:
                user = await self.client.create_user(name, email, age)
        except httpx.HTTPError:
            logger.exception("Failed to save user")
            self.error = "Could not save user."
            return None
        self.editing_id = None
        await self.refresh()
        return user

    async def delete(self, user_id: UUID) -> bool:
        """Delete a user and reload the list."""
        self.error = None
        try:
            await self.client.delete_user(user_id)
        except httpx.HTTPError:
            logger.exception("Failed to delete user")
            self.error = "Could not delete user."
            return False
        if self.editing_id == user_id:
            self.editing_id = None
        await self.refresh()
        return True
