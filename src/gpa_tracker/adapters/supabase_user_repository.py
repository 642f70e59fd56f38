"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from gpa_tracker.adapters.supabase_query import execute
from gpa_tracker.domain.errors import RecordNotFoundError, StoreError
from gpa_tracker.domain.models import UserRecord
from gpa_tracker.services.users import UserRepository

_COLUMNS = "id, name, email, age"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client
    table_name: str = "users"

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        """Create a new user row and return it."""
        rows = execute(
            self.client.table(self.table_name).insert(payload), "create user"
        )
        if not rows:
            raise StoreError("Failed to create user in Supabase")
        return _parse_user(rows[0])

    def list_users(self) -> list[UserRecord]:
        """Return all users."""
        rows = execute(
            self.client.table(self.table_name).select(_COLUMNS), "list users"
        )
        return [_parse_user(row) for row in rows]

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id, if present."""
        rows = execute(
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("id", str(user_id))
            .limit(1),
            "fetch user",
        )
        if not rows:
            return None
        return _parse_user(rows[0])

    def update_user(self, user_id: UUID, payload: dict[str, object]) -> UserRecord:
        """Update a user row and return it."""
        rows = execute(
            self.client.table(self.table_name).update(payload).eq("id", str(user_id)),
            "update user",
        )
        if not rows:
            raise RecordNotFoundError("user", user_id)
        return _parse_user(rows[0])

    def delete_user(self, user_id: UUID) -> None:
        """Delete a user row."""
        rows = execute(
            self.client.table(self.table_name).delete().eq("id", str(user_id)),
            "delete user",
        )
        if not rows:
            raise RecordNotFoundError("user", user_id)


def _parse_user(row: dict[str, object]) -> UserRecord:
    """Parse a user row into a domain model."""
    return UserRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name") or ""),
        email=str(row.get("email") or ""),
        age=int(row.get("age") or 0),
    )
