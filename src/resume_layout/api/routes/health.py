"""Liveness route."""

from __future__ import annotations

from fastapi import APIRouter

from resume_layout import __version__
from resume_layout.templates import list_templates

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict[str, str | int]:
    """Report liveness, the package version and how many templates are loaded."""
    return {"status": "healthy", "version": __version__, "templates": len(list_templates())}
