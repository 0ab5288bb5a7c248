"""Shared dependencies for API routes."""

from __future__ import annotations

from resume_layout.services.resume_repository import ResumeRepository, SqlResumeRepository


def get_resume_repository() -> ResumeRepository:
    """Return the repository used by the resume routes.

    Tests override this dependency to inject a different implementation.
    """
    return SqlResumeRepository()
