"""Result card endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from gpa_tracker.api.models import ResultCreate, ResultOut
from gpa_tracker.domain.errors import StoreError

if TYPE_CHECKING:
    from gpa_tracker.containers import AppContainer

router = APIRouter(prefix="/results", tags=["results"])
logger = logging.getLogger(__name__)


@router.post("", response_model=ResultOut, status_code=status.HTTP_201_CREATED)
def create_result(
    payload: ResultCreate, request: Request
) -> ResultOut | JSONResponse:
    """Recompute the submitted average and store the result card."""
    container: AppContainer = request.app.state.container
    draft = container.result_service.build_draft(
        university_name=payload.university_name,
        department_name=payload.department_name,
        semester=payload.semester,
        student_name=payload.student_name,
        subjects=payload.subject_entries(),
        submitted_cgpa=payload.cgpa,
    )
    try:
        card = container.result_service.save_result(draft)
    except StoreError:
        logger.exception("Failed to save result card")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Could not save result."},
        )
    return ResultOut.from_record(card)


@router.get("", response_model=list[ResultOut])
def list_results(request: Request) -> list[ResultOut]:
    """Return stored result cards, newest first."""
    container: AppContainer = request.app.state.container
    return [
        ResultOut.from_record(card)
        for card in container.result_service.list_results()
    ]


@router.get("/{result_id}/card.pdf")
def download_result_card(result_id: UUID, request: Request) -> Response:
    """Render a stored result card as a PDF download."""
    container: AppContainer = request.app.state.container
    content = container.result_service.render_result(result_id)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="result_card.pdf"'},
    )
