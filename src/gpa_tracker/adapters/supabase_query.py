"""Shared execution helper for Supabase queries."""

from typing import Any, Protocol

import httpx
from postgrest.exceptions import APIError

from gpa_tracker.domain.errors import StoreError


class ExecutableQuery(Protocol):
    """A built PostgREST query that can be executed."""

    def execute(self) -> Any:
        """Run the query and return the API response."""


def execute(query: ExecutableQuery, action: str) -> list[dict[str, Any]]:
    """Execute a query and return its rows, translating store failures."""
    try:
        response = query.execute()
    except APIError as exc:
        raise StoreError(f"Failed to {action}: {exc.message}") from exc
    except httpx.HTTPError as exc:
        raise StoreError(f"Failed to {action}: {exc}") from exc
    return response.data or []
