"""Tests for PDF rendering of result cards."""

import re
from datetime import UTC, datetime
from uuid import uuid4

from gpa_tracker.adapters.reportlab_result_card_renderer import (
    ReportlabResultCardRenderer,
)
from gpa_tracker.domain.results import ResultCard, ResultCardDraft, SubjectEntry


def test_render_returns_pdf_bytes() -> None:
    card = ResultCard(
        id=uuid4(),
        university_name="State University",
        department_name="Physics",
        semester="Fall 2024",
        student_name="Ada",
        total_subjects=2,
        cgpa=3.79,
        created_at=datetime.now(tz=UTC),
        subjects=[SubjectEntry("Maths", 3, 3.5), SubjectEntry("Physics", 4, 4.0)],
    )

    content = ReportlabResultCardRenderer().render(card)

    assert content.startswith(b"%PDF")
    assert content.rstrip().endswith(b"%%EOF")


def test_render_long_subject_list_spans_pages() -> None:
    subjects = [SubjectEntry(f"Subject {i}", 3, 3.0) for i in range(60)]
    draft = ResultCardDraft(
        university_name="State University",
        department_name="Physics",
        semester="Fall 2024",
        subjects=subjects,
        cgpa=3.0,
    )

    content = ReportlabResultCardRenderer().render(draft)

    page_counts = [int(count) for count in re.findall(rb"/Count (\d+)", content)]
    assert max(page_counts) >= 2
