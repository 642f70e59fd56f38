"""HTTP client for the GPA tracker REST API."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

import httpx

from gpa_tracker.api.models import ResultOut, UserOut
from gpa_tracker.domain.models import UserRecord
from gpa_tracker.domain.results import ResultCard, ResultCardDraft


class RecordsClient(Protocol):
    """Interface for the records REST API."""

    async def list_users(self) -> list[UserRecord]:
        """Return all users."""

    async def create_user(self, name: str, email: str, age: int) -> UserRecord:
        """Create a user and return it."""

    async def update_user(
        self, user_id: UUID, changes: dict[str, object]
    ) -> UserRecord:
        """Update a user and return it."""

    async def delete_user(self, user_id: UUID) -> None:
        """Delete a user."""

    async def create_result(self, draft: ResultCardDraft) -> ResultCard:
        """Store a computed result card and return it."""

    async def list_results(self) -> list[ResultCard]:
        """Return stored result cards, newest first."""


@dataclass
class HttpxRecordsClient(RecordsClient):
    """Records API client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10

    @classmethod
    def create(cls, base_url: str) -> "HttpxRecordsClient":
        """Create a records client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def list_users(self) -> list[UserRecord]:
        """Fetch all users."""
        response = await self.http_client.get(
            f"{self.base_url}/users", timeout=self.timeout
        )
        response.raise_for_status()
        return [_parse_user(item) for item in response.json()]

    async def create_user(self, name: str, email: str, age: int) -> UserRecord:
        """Create a user."""
        response = await self.http_client.post(
            f"{self.base_url}/users",
            json={"name": name, "email": email, "age": age},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return _parse_user(response.json())

    async def update_user(
        self, user_id: UUID, changes: dict[str, object]
    ) -> UserRecord:
        """Update a user."""
        response = await self.http_client.put(
            f"{self.base_url}/users/{user_id}", json=changes, timeout=self.timeout
        )
        response.raise_for_status()
        return _parse_user(response.json())

    async def delete_user(self, user_id: UUID) -> None:
        """Delete a user."""
        response = await self.http_client.delete(
            f"{self.base_url}/users/{user_id}", timeout=self.timeout
        )
        response.raise_for_status()

    async def create_result(self, draft: ResultCardDraft) -> ResultCard:
        """Post a computed result card."""
        payload = {
            "studentName": draft.student_name,
            "universityName": draft.university_name,
            "departmentName": draft.department_name,
            "semester": draft.semester,
            "totalSubjects": draft.total_subjects,
            "subjects": [
                {
                    "name": subject.name,
                    "creditHours": subject.credit_hours,
                    "gpa": subject.score,
                }
                for subject in draft.subjects
            ],
            "cgpa": draft.cgpa,
        }
        response = await self.http_client.post(
            f"{self.base_url}/results", json=payload, timeout=self.timeout
        )
        response.raise_for_status()
        return _parse_result(response.json())

    async def list_results(self) -> list[ResultCard]:
        """Fetch stored result cards."""
        response = await self.http_client.get(
            f"{self.base_url}/results", timeout=self.timeout
        )
        response.raise_for_status()
        return [_parse_result(item) for item in response.json()]

    async def download_result_card(self, result_id: UUID) -> bytes:
        """Download the rendered PDF for a stored result card."""
        response = await self.http_client.get(
            f"{self.base_url}/results/{result_id}/card.pdf", timeout=30
        )
        response.raise_for_status()
        return response.content

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()


def _parse_user(payload: dict[str, object]) -> UserRecord:
    return UserOut.model_validate(payload).to_record()


def _parse_result(payload: dict[str, object]) -> ResultCard:
    return ResultOut.model_validate(payload).to_record()
