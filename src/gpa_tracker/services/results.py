"""Grade-point result cards: computation, persistence and rendering."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol
from uuid import UUID

from gpa_tracker.domain.errors import RecordNotFoundError, ResultMismatchError
from gpa_tracker.domain.grades import weighted_average
from gpa_tracker.domain.results import ResultCard, ResultCardDraft, SubjectEntry

# Largest gap between a submitted average and the recomputed one; clients that
# round the binary float can land one cent away from the decimal half-up value.
CGPA_TOLERANCE = Decimal("0.01")

logger = logging.getLogger(__name__)


class ResultRepository(Protocol):
    """Persistence interface for result cards."""

    def create_result(self, draft: ResultCardDraft) -> ResultCard:
        """Store a result card and return it."""

    def list_results(self) -> list[ResultCard]:
        """Return all result cards, newest first."""

    def get_result(self, result_id: UUID) -> ResultCard | None:
        """Return a result card by id, if present."""


class ResultCardRenderer(Protocol):
    """Renders a result card into a downloadable document."""

    def render(self, card: ResultCard | ResultCardDraft) -> bytes:
        """Return the rendered document bytes."""


@dataclass
class ResultService:
    """Service that computes, stores and renders result cards."""

    repository: ResultRepository
    renderer: ResultCardRenderer

    def build_draft(  # noqa: PLR0913
        self,
        *,
        university_name: str,
        department_name: str,
        semester: str,
        subjects: list[SubjectEntry],
        student_name: str = "",
        submitted_cgpa: float | None = None,
    ) -> ResultCardDraft:
        """Recompute the average and check it against the submitted one."""
        cgpa = weighted_average(subjects)
        if submitted_cgpa is not None and _differs(submitted_cgpa, cgpa):
            raise ResultMismatchError(
                f"Submitted CGPA {submitted_cgpa} does not match computed {cgpa:.2f}"
            )
        return ResultCardDraft(
            university_name=university_name,
            department_name=department_name,
            semester=semester,
            student_name=student_name,
            subjects=subjects,
            cgpa=cgpa,
        )

    def save_result(self, draft: ResultCardDraft) -> ResultCard:
        """Persist a computed result card."""
        card = self.repository.create_result(draft)
        logger.info(
            "Saved result card",
            extra={"result_id": str(card.id), "cgpa": card.cgpa},
        )
        return card

    def list_results(self) -> list[ResultCard]:
        """Return stored result cards, newest first."""
        return self.repository.list_results()

    def render_result(self, result_id: UUID) -> bytes:
        """Render a stored result card."""
        card = self.repository.get_result(result_id)
        if card is None:
            raise RecordNotFoundError("result", result_id)
        return self.renderer.render(card)


def _differs(submitted: float, computed: float) -> bool:
    gap = abs(Decimal(str(submitted)) - Decimal(str(computed)))
    return gap > CGPA_TOLERANCE
