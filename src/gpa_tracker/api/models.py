"""Pydantic models for the REST payloads.

Field names are camelCase on the wire to match the browser client.
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    StrictFloat,
    StrictInt,
    StringConstraints,
    computed_field,
    model_validator,
)
from pydantic.alias_generators import to_camel

from gpa_tracker.domain.grades import parse_subject
from gpa_tracker.domain.models import UserRecord
from gpa_tracker.domain.results import ResultCard, SubjectEntry

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
# Form cells arrive as JSON numbers or text; booleans must not coerce to 1.0.
FormNumber = StrictFloat | StrictInt | str | None


class ApiModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreate(ApiModel):
    """Payload for creating a user."""

    name: RequiredText
    email: RequiredText
    age: int = Field(ge=0)


class UserUpdate(ApiModel):
    """Payload for updating a user; omitted fields are left unchanged."""

    name: RequiredText | None = None
    email: RequiredText | None = None
    age: int | None = Field(default=None, ge=0)

    def changes(self) -> dict[str, object]:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class UserOut(ApiModel):
    """User response payload."""

    id: UUID
    name: str
    email: str
    age: int

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserOut":
        return cls(id=user.id, name=user.name, email=user.email, age=user.age)

    def to_record(self) -> UserRecord:
        return UserRecord(id=self.id, name=self.name, email=self.email, age=self.age)


class SubjectIn(ApiModel):
    """Raw subject row as entered in the calculator form."""

    name: str | None = None
    credit_hours: FormNumber = None
    score: FormNumber = Field(
        default=None, validation_alias=AliasChoices("score", "gpa")
    )


class ResultCreate(ApiModel):
    """Payload for storing a result card."""

    university_name: RequiredText
    department_name: RequiredText
    semester: RequiredText
    student_name: str = ""
    total_subjects: int | None = None
    subjects: list[SubjectIn]
    cgpa: float | None = Field(
        default=None,
        allow_inf_nan=False,
        validation_alias=AliasChoices("cgpa", "sgpa"),
    )

    _entries: list[SubjectEntry] = PrivateAttr(default_factory=list)

    @model_validator(mode="after")
    def check_subjects(self) -> "ResultCreate":
        self._entries = [
            parse_subject(index, row.name, row.credit_hours, row.score)
            for index, row in enumerate(self.subjects)
        ]
        if self.total_subjects is not None and self.total_subjects != len(
            self._entries
        ):
            raise ValueError(
                f"totalSubjects is {self.total_subjects} "
                f"but {len(self._entries)} subjects were sent"
            )
        return self

    def subject_entries(self) -> list[SubjectEntry]:
        return list(self._entries)


class SubjectOut(ApiModel):
    """Subject entry in a stored result card."""

    name: str
    credit_hours: float
    score: float

    @computed_field  # type: ignore[prop-decorator]
    @property
    def gpa(self) -> float:
        return self.score


class ResultOut(ApiModel):
    """Result card response payload."""

    id: UUID
    university_name: str
    department_name: str
    semester: str
    student_name: str
    total_subjects: int
    subjects: list[SubjectOut]
    cgpa: float
    created_at: datetime

    @classmethod
    def from_record(cls, card: ResultCard) -> "ResultOut":
        return cls(
            id=card.id,
            university_name=card.university_name,
            department_name=card.department_name,
            semester=card.semester,
            student_name=card.student_name,
            total_subjects=card.total_subjects,
            subjects=[
                SubjectOut(
                    name=subject.name,
                    credit_hours=subject.credit_hours,
                    score=subject.score,
                )
                for subject in card.subjects
            ],
            cgpa=card.cgpa,
            created_at=card.created_at,
        )

    def to_record(self) -> ResultCard:
        """Map a response payload back to the domain record."""
        return ResultCard(
            id=self.id,
            university_name=self.university_name,
            department_name=self.department_name,
            semester=self.semester,
            student_name=self.student_name,
            total_subjects=self.total_subjects,
            cgpa=self.cgpa,
            created_at=self.created_at,
            subjects=[
                SubjectEntry(
                    name=subject.name,
                    credit_hours=subject.credit_hours,
                    score=subject.score,
                )
                for subject in self.subjects
            ],
        )
