"""Client-side state for the grade-point calculator form."""

import logging
from dataclasses import dataclass, field

import httpx

from gpa_tracker.adapters.records_client import RecordsClient
from gpa_tracker.domain.errors import InvalidSubjectError
from gpa_tracker.domain.grades import calculate_cgpa
from gpa_tracker.domain.results import ResultCard, ResultCardDraft

SUBJECT_FIELDS = ("name", "creditHours", "gpa")

logger = logging.getLogger(__name__)


@dataclass
class CalculatorForm:
    """Context fields entered before the subject rows."""

    student_name: str = ""
    university_name: str = ""
    department_name: str = ""
    semester: str = ""


@dataclass(frozen=True)
class CalculationOutcome:
    """Result of a calculation attempt."""

    draft: ResultCardDraft
    saved: ResultCard | None = None
    message: str | None = None


@dataclass
class CalculatorSession:
    """Holds form values for one calculator user and drives the save flow."""

    client: RecordsClient
    form: CalculatorForm = field(default_factory=CalculatorForm)
    rows: list[dict[str, object]] = field(default_factory=list)
    result: ResultCardDraft | None = None

    def start(self, form: CalculatorForm, total_subjects: int) -> None:
        """Reset the subject rows to ``total_subjects`` blank entries."""
        if total_subjects < 1:
            raise InvalidSubjectError("Enter at least one subject")
        self.form = form
        self.rows = [dict.fromkeys(SUBJECT_FIELDS, "") for _ in range(total_subjects)]
        self.result = None

    def set_subject_field(self, index: int, field_name: str, value: object) -> None:
        """Update one cell of the subject table."""
        if field_name not in SUBJECT_FIELDS:
            raise KeyError(field_name)
        self.rows[index][field_name] = value

    def calculate(self) -> ResultCardDraft:
        """Validate the rows locally and compute the average."""
        subjects, cgpa = calculate_cgpa(self.rows)
        self.result = ResultCardDraft(
            university_name=self.form.university_name,
            department_name=self.form.department_name,
            semester=self.form.semester,
            student_name=self.form.student_name,
            subjects=subjects,
            cgpa=cgpa,
        )
        return self.result

    async def calculate_and_save(self) -> CalculationOutcome:
        """Compute the average, then store it.

        Invalid rows raise before any request is made. A failed save keeps the
        computed result and reports it in ``message``.
        """
        draft = self.calculate()
        try:
            saved = await self.client.create_result(draft)
        except httpx.HTTPError:
            logger.exception("Failed to save result card")
            return CalculationOutcome(
                draft=draft,
                message="Calculated but failed to save to database.",
            )
        return CalculationOutcome(draft=draft, saved=saved)
