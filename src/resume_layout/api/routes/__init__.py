"""Route handlers for the API."""

from resume_layout.api.routes import health, resumes, templates

__all__ = [
    "health",
    "resumes",
    "templates",
]
