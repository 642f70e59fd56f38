"""Tests for the calculator and user editor form state."""

import asyncio

import httpx
import pytest

from gpa_tracker.domain.errors import InvalidSubjectError
from gpa_tracker.services.calculator import CalculatorForm, CalculatorSession
from gpa_tracker.services.user_editor import UserEditor
from tests.conftest import FakeRecordsClient

FORM = CalculatorForm(
    student_name="Ada",
    university_name="State University",
    department_name="Physics",
    semester="Fall 2024",
)


def _filled_session(client: FakeRecordsClient) -> CalculatorSession:
    session = CalculatorSession(client=client)
    session.start(FORM, total_subjects=2)
    for index, (name, credits, gpa) in enumerate(
        [("Maths", "3", "3.5"), ("Physics", "4", "4.0")]
    ):
        session.set_subject_field(index, "name", name)
        session.set_subject_field(index, "creditHours", credits)
        session.set_subject_field(index, "gpa", gpa)
    return session


def test_start_builds_blank_rows() -> None:
    session = CalculatorSession(client=FakeRecordsClient())

    session.start(FORM, total_subjects=3)

    assert session.rows == [{"name": "", "creditHours": "", "gpa": ""}] * 3
    assert session.result is None


def test_start_requires_a_subject() -> None:
    session = CalculatorSession(client=FakeRecordsClient())

    with pytest.raises(InvalidSubjectError):
        session.start(FORM, total_subjects=0)


def test_set_subject_field_rejects_unknown_field() -> None:
    session = CalculatorSession(client=FakeRecordsClient())
    session.start(FORM, total_subjects=1)

    with pytest.raises(KeyError):
        session.set_subject_field(0, "teacher", "x")


def test_calculate_and_save_posts_result() -> None:
    client = FakeRecordsClient()
    session = _filled_session(client)

    outcome = asyncio.run(session.calculate_and_save())

    assert outcome.draft.cgpa == 3.79
    assert outcome.saved is not None
    assert outcome.message is None
    assert client.calls == ["create_result"]


def test_invalid_rows_never_reach_the_network() -> None:
    client = FakeRecordsClient()
    session = _filled_session(client)
    session.set_subject_field(1, "gpa", "")

    with pytest.raises(InvalidSubjectError):
        asyncio.run(session.calculate_and_save())

    assert client.calls == []
    assert session.result is None


def test_failed_save_keeps_computed_result() -> None:
    client = FakeRecordsClient(error=httpx.ConnectError("offline"))
    session = _filled_session(client)

    outcome = asyncio.run(session.calculate_and_save())

    assert outcome.saved is None
    assert outcome.message == "Calculated but failed to save to database."
    assert session.result is not None
    assert session.result.cgpa == 3.79


def test_user_editor_create_edit_delete() -> None:
    client = FakeRecordsClient()
    editor = UserEditor(client=client)

    created = asyncio.run(editor.submit("Ada", "ada@example.com", 36))
    assert created is not None
    editor.start_edit(created)
    updated = asyncio.run(editor.submit("Ada L.", "ada@example.com", 37))

    assert updated is not None
    assert updated.id == created.id
    assert editor.editing_id is None
    assert [user.name for user in editor.users] == ["Ada L."]

    assert asyncio.run(editor.delete(created.id)) is True
    assert editor.users == []


def test_user_editor_reports_failures() -> None:
    client = FakeRecordsClient(error=httpx.ConnectError("offline"))
    editor = UserEditor(client=client)

    assert asyncio.run(editor.submit("Ada", "ada@example.com", 36)) is None
    assert editor.error == "Could not save user."
    assert asyncio.run(editor.refresh()) == []
    assert editor.error == "Could not load users."
