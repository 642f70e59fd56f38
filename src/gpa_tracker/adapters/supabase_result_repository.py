"""Supabase-backed result card repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from gpa_tracker.adapters.supabase_query import execute
from gpa_tracker.domain.errors import StoreError
from gpa_tracker.domain.results import ResultCard, ResultCardDraft, SubjectEntry
from gpa_tracker.services.results import ResultRepository


@dataclass
class SupabaseResultRepository(ResultRepository):
    """Supabase implementation for result cards.

    Subjects are kept in a ``subjects`` JSON column on the card row.
    """

    client: Client
    table_name: str = "result_cards"

    def create_result(self, draft: ResultCardDraft) -> ResultCard:
        """Insert a result card row and return it."""
        payload = {
            "university_name": draft.university_name,
            "department_name": draft.department_name,
            "semester": draft.semester,
            "student_name": draft.student_name,
            "total_subjects": draft.total_subjects,
            "subjects": [
                {
                    "name": subject.name,
                    "credit_hours": subject.credit_hours,
                    "gpa": subject.score,
                }
                for subject in draft.subjects
            ],
            "cgpa": draft.cgpa,
            "created_at": datetime.now(tz=UTC).isoformat(),
        }
        rows = execute(
            self.client.table(self.table_name).insert(payload), "create result"
        )
        if not rows:
            raise StoreError("Failed to create result card in Supabase")
        return _parse_result(rows[0])

    def list_results(self) -> list[ResultCard]:
        """Return result cards ordered by creation time, newest first."""
        rows = execute(
            self.client.table(self.table_name)
            .select("*")
            .order("created_at", desc=True),
            "list results",
        )
        return [_parse_result(row) for row in rows]

    def get_result(self, result_id: UUID) -> ResultCard | None:
        """Return a result card by id, if present."""
        rows = execute(
            self.client.table(self.table_name)
            .select("*")
            .eq("id", str(result_id))
            .limit(1),
            "fetch result",
        )
        if not rows:
            return None
        return _parse_result(rows[0])


def _parse_result(row: dict[str, object]) -> ResultCard:
    """Parse a result card row into a domain model."""
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else datetime.now(tz=UTC)
    )
    raw_subjects = row.get("subjects")
    subjects = [
        SubjectEntry(
            name=str(item.get("name", "")),
            credit_hours=float(item.get("credit_hours", 0.0)),
            score=float(item.get("gpa", 0.0)),
        )
        for item in (raw_subjects if isinstance(raw_subjects, list) else [])
    ]
    return ResultCard(
        id=UUID(str(row["id"])),
        university_name=str(row.get("university_name") or ""),
        department_name=str(row.get("department_name") or ""),
        semester=str(row.get("semester") or ""),
        student_name=str(row.get("student_name") or ""),
        total_subjects=int(row.get("total_subjects") or len(subjects)),
        cgpa=float(row.get("cgpa") or 0.0),
        created_at=created_at,
        subjects=subjects,
    )
