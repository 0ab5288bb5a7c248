"""Resume record and PDF export routes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi import Path as PathParam

from resume_layout.api.dependencies import get_resume_repository
from resume_layout.api.schemas.resumes import (
    ResumeCreatedResponse,
    ResumeExportRequest,
    ResumeRecordResponse,
    ResumeRecordSchema,
    ResumeRenderRequest,
)
from resume_layout.layout.errors import ResumeLayoutError, ValidationError
from resume_layout.services.resume_export import export_resume
from resume_layout.services.resume_repository import ResumeRepository
from resume_layout.templates import get_template

if TYPE_CHECKING:
    from resume_layout.services.resume_data import ResumeRecord

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resumes", tags=["resumes"])

GENERIC_EXPORT_FAILURE = "Failed to generate document, please retry."

Repository = Annotated[ResumeRepository, Depends(get_resume_repository)]


def _record_or_404(repository: ResumeRepository, record_id: int) -> ResumeRecord:
    record = repository.get(record_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Resume {record_id} not found",
        )
    return record


def _pdf_response(record: ResumeRecord, template_id: str) -> Response:
    """Export *record* and wrap the PDF in a download response.

    Raises:
        HTTPException: 404 for an unknown template, 422 for an invalid
            record, 500 for any other render failure.
    """
    try:
        get_template(template_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from None

    try:
        exported = export_resume(record, template_id)
    except ValidationError as exc:
        logger.warning("Rejected resume export: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from None
    except (ResumeLayoutError, ValueError):
        # ValueError covers invalid RESUME_BREAK_BEFORE_* settings
        logger.exception("Resume export failed for template %s", template_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=GENERIC_EXPORT_FAILURE,
        ) from None

    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": f'attachment; filename="{exported.file_name}"'},
    )


# --- /render MUST come before /{record_id} to avoid path conflicts ---


@router.post(
    "/render",
    responses={200: {"content": {"application/pdf": {}}}},
)
def render_resume(data: ResumeRenderRequest) -> Response:
    """Render an unsaved resume record to PDF."""
    return _pdf_response(data.record.model_dump(), data.template_id)


@router.post(
    "",
    response_model=ResumeCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_resume(data: ResumeRecordSchema, repository: Repository) -> ResumeCreatedResponse:
    """Store a new resume record."""
    record_id = repository.create(data.model_dump())
    return ResumeCreatedResponse(id=record_id)


@router.get("/{record_id}", response_model=ResumeRecordResponse)
def get_resume(
    record_id: Annotated[int, PathParam(description="Resume record ID")],
    repository: Repository,
) -> ResumeRecordResponse:
    """Get a stored resume record."""
    record = _record_or_404(repository, record_id)
    return ResumeRecordResponse(id=record_id, **record)


@router.put("/{record_id}", response_model=ResumeRecordResponse)
def update_resume(
    record_id: Annotated[int, PathParam(description="Resume record ID")],
    data: ResumeRecordSchema,
    repository: Repository,
) -> ResumeRecordResponse:
    """Replace a stored resume record."""
    if not repository.update(record_id, data.model_dump()):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Resume {record_id} not found",
        )
    return ResumeRecordResponse(id=record_id, **data.model_dump())


@router.post(
    "/{record_id}/export",
    responses={200: {"content": {"application/pdf": {}}}},
)
def export_stored_resume(
    record_id: Annotated[int, PathParam(description="Resume record ID")],
    data: ResumeExportRequest,
    repository: Repository,
) -> Response:
    """Export a stored resume record as a PDF download."""
    record = _record_or_404(repository, record_id)
    return _pdf_response(record, data.template_id)
