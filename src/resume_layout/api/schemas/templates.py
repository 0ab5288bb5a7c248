"""Pydantic schemas for template catalog endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TemplateResponse(BaseModel):
    """Public description of a resume template."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    category: str
    is_ats: bool
