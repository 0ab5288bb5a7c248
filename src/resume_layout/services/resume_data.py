"""Template-agnostic data contracts for resume rendering.

These TypedDicts define the shape of the record that flows from the
data-access layer (or an API request) into the layout engine. The engine
depends ONLY on these contracts, never on ORM models, so storage can
evolve independently.

Every key is optional except ``profile.full_name``; missing, ``None`` and
blank values are all treated as absent.
"""

from __future__ import annotations

from typing import TypedDict

__all__ = [
    "ResumeEducationEntry",
    "ResumeExperienceEntry",
    "ResumeProfile",
    "ResumeProjectEntry",
    "ResumeRecord",
]


class ResumeProfile(TypedDict, total=False):
    """Name, contact links, summary and skills shown at the top of the resume."""

    full_name: str
    email: str | None
    phone: str | None
    location: str | None
    linkedin: str | None
    github: str | None
    website: str | None
    summary: str | None
    skills: list[str]


class ResumeExperienceEntry(TypedDict, total=False):
    """A single work-experience record."""

    company: str | None
    position: str | None
    start_date: str | None  # free-form, rendered as given
    end_date: str | None
    is_current: bool
    description: str | None
    achievements: list[str]


class ResumeEducationEntry(TypedDict, total=False):
    """A single education record."""

    institution: str | None
    degree: str | None
    field: str | None
    start_date: str | None
    end_date: str | None
    gpa: str | None
    description: str | None


class ResumeProjectEntry(TypedDict, total=False):
    """A single project record."""

    name: str | None
    description: str | None
    technologies: list[str]
    github_url: str | None
    live_url: str | None
    start_date: str | None
    end_date: str | None


class ResumeRecord(TypedDict, total=False):
    """Top-level bundle handed to the layout pipeline for one render."""

    profile: ResumeProfile
    experience: list[ResumeExperienceEntry]
    education: list[ResumeEducationEntry]
    projects: list[ResumeProjectEntry]
