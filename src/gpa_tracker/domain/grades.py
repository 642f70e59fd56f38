"""Weighted grade-point average computation.

The average is ``sum(credit_hours * score) / sum(credit_hours)`` rounded to two
decimal places. Arithmetic runs on :class:`~decimal.Decimal` built from the
decimal text of each number, so ``round`` sees what the user typed rather than
the nearest binary float.
"""

import math
from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal, localcontext

from gpa_tracker.domain.errors import InvalidSubjectError
from gpa_tracker.domain.results import SubjectEntry

_TWO_PLACES = Decimal("0.01")
# Enough digits to quantize any finite float average to two places.
_PRECISION = 400


def parse_number(value: object) -> float | None:
    """Return ``value`` as a finite float, or None when it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        cleaned = value.strip()
        if not cleaned:
            return None
        try:
            number = float(cleaned)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_subject(
    index: int, name: object, credit_hours: object, score: object
) -> SubjectEntry:
    """Validate one raw subject entry."""
    cleaned_name = name.strip() if isinstance(name, str) else ""
    if not cleaned_name:
        raise InvalidSubjectError(f"Subject {index + 1} needs a name", index)
    weight = parse_number(credit_hours)
    if weight is None:
        raise InvalidSubjectError(
            f"Subject {index + 1} credit hours must be a number", index
        )
    if weight <= 0:
        raise InvalidSubjectError(
            f"Subject {index + 1} credit hours must be greater than 0", index
        )
    parsed_score = parse_number(score)
    if parsed_score is None:
        raise InvalidSubjectError(f"Subject {index + 1} score must be a number", index)
    return SubjectEntry(name=cleaned_name, credit_hours=weight, score=parsed_score)


def parse_subjects(rows: Iterable[Mapping[str, object]]) -> list[SubjectEntry]:
    """Validate raw subject rows as entered in the calculator form.

    Rows use the form's keys: ``name``, ``creditHours`` and ``gpa`` (``score``
    is accepted too). The first invalid row rejects the whole list.
    """
    entries = []
    for index, row in enumerate(rows):
        score = row.get("score", row.get("gpa"))
        entries.append(
            parse_subject(
                index,
                row.get("name"),
                row.get("creditHours", row.get("credit_hours")),
                score,
            )
        )
    return entries


def weighted_average(subjects: Iterable[SubjectEntry]) -> float:
    """Return the credit-weighted average score rounded to two decimals."""
    with localcontext() as context:
        context.prec = _PRECISION
        total_points = Decimal(0)
        total_weight = Decimal(0)
        for subject in subjects:
            weight = Decimal(str(subject.credit_hours))
            total_points += weight * Decimal(str(subject.score))
            total_weight += weight
        if total_weight == 0:
            raise InvalidSubjectError(
                "At least one subject with credit hours is required"
            )
        average = (total_points / total_weight).quantize(_TWO_PLACES, ROUND_HALF_UP)
    return float(average)


def calculate_cgpa(
    rows: Iterable[Mapping[str, object]],
) -> tuple[list[SubjectEntry], float]:
    """Validate raw subject rows and return them with their weighted average."""
    subjects = parse_subjects(rows)
    return subjects, weighted_average(subjects)
