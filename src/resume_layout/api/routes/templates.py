"""Template catalog routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, HTTPException, status
from fastapi import Path as PathParam

from resume_layout.api.schemas.templates import TemplateResponse
from resume_layout.templates import all_templates, get_template

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=list[TemplateResponse])
def list_templates() -> list[TemplateResponse]:
    """List every resume template in catalog order."""
    return [TemplateResponse.model_validate(t) for t in all_templates()]


@router.get("/{template_id}", response_model=TemplateResponse)
def get_template_by_id(
    template_id: Annotated[str, PathParam(description="Template identifier")],
) -> TemplateResponse:
    """Get a single template by id."""
    try:
        template = get_template(template_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Template '{template_id}' not found",
        ) from None
    return TemplateResponse.model_validate(template)
