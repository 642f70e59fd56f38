"""Domain models for grade-point result cards."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class SubjectEntry:
    """A single subject with its credit weight and score."""

    name: str
    credit_hours: float
    score: float


@dataclass(frozen=True)
class ResultCardDraft:
    """A computed result card that has not been stored yet."""

    university_name: str
    department_name: str
    semester: str
    subjects: list[SubjectEntry]
    cgpa: float
    student_name: str = ""

    @property
    def total_subjects(self) -> int:
        return len(self.subjects)


@dataclass(frozen=True)
class ResultCard:
    """A stored result card."""

    id: UUID
    university_name: str
    department_name: str
    semester: str
    student_name: str
    total_subjects: int
    cgpa: float
    created_at: datetime
    subjects: list[SubjectEntry] = field(default_factory=list)
