"""Resume record repository.

The export pipeline never talks to storage directly; callers fetch a
:class:`ResumeRecord` through a :class:`ResumeRepository` and hand it over.
:class:`SqlResumeRepository` is the SQLAlchemy-backed implementation.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

from sqlalchemy.orm import Session

from resume_layout.data.db import get_session
from resume_layout.data.models import EducationEntry, ExperienceEntry, ProjectEntry, ResumeProfile
from resume_layout.services.resume_data import (
    ResumeEducationEntry,
    ResumeExperienceEntry,
    ResumeProfile as ResumeProfileData,
    ResumeProjectEntry,
    ResumeRecord,
)

logger = logging.getLogger(__name__)

__all__ = ["ResumeRepository", "SqlResumeRepository"]

_PROFILE_FIELDS = (
    "full_name",
    "email",
    "phone",
    "location",
    "linkedin",
    "github",
    "website",
    "summary",
)
_EXPERIENCE_FIELDS = ("company", "position", "start_date", "end_date", "description")
_EDUCATION_FIELDS = (
    "institution",
    "degree",
    "field",
    "start_date",
    "end_date",
    "gpa",
    "description",
)
_PROJECT_FIELDS = ("name", "description", "github_url", "live_url", "start_date", "end_date")


class ResumeRepository(Protocol):
    """Data-access interface for stored resume records."""

    def get(self, record_id: int) -> ResumeRecord | None: ...

    def create(self, record: ResumeRecord) -> int: ...

    def update(self, record_id: int, record: ResumeRecord) -> bool: ...


def _dump_list(values: list[str] | None) -> str | None:
    if not values:
        return None
    return json.dumps([str(v) for v in values])


def _load_list(raw: str | None) -> list[str]:
    """Decode a JSON array column; a non-JSON value is kept as a single item."""
    if not raw:
        return []
    try:
        parsed = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        return [raw]
    if isinstance(parsed, list):
        return [str(item) for item in parsed]
    return [str(parsed)]


def _optional_fields(row: Any, fields: tuple[str, ...]) -> dict[str, Any]:
    return {name: getattr(row, name) for name in fields if getattr(row, name) is not None}


def _apply_profile(profile: ResumeProfile, data: ResumeProfileData) -> None:
    for name in _PROFILE_FIELDS:
        setattr(profile, name, data.get(name))
    profile.skills = _dump_list(data.get("skills"))


def _replace_entries(profile: ResumeProfile, record: ResumeRecord) -> None:
    """Replace all child entries of *profile* with those of *record*."""
    profile.experience_entries = [
        ExperienceEntry(
            **{name: entry.get(name) for name in _EXPERIENCE_FIELDS},
            is_current=bool(entry.get("is_current")),
            achievements=_dump_list(entry.get("achievements")),
            rank=rank,
        )
        for rank, entry in enumerate(record.get("experience") or [])
    ]
    profile.education_entries = [
        EducationEntry(**{name: entry.get(name) for name in _EDUCATION_FIELDS}, rank=rank)
        for rank, entry in enumerate(record.get("education") or [])
    ]
    profile.project_entries = [
        ProjectEntry(
            **{name: entry.get(name) for name in _PROJECT_FIELDS},
            technologies=_dump_list(entry.get("technologies")),
            rank=rank,
        )
        for rank, entry in enumerate(record.get("projects") or [])
    ]


def _to_record(profile: ResumeProfile) -> ResumeRecord:
    profile_data: ResumeProfileData = {
        **_optional_fields(profile, _PROFILE_FIELDS),
        "skills": _load_list(profile.skills),
    }

    experience: list[ResumeExperienceEntry] = [
        {
            **_optional_fields(row, _EXPERIENCE_FIELDS),
            "is_current": row.is_current,
            "achievements": _load_list(row.achievements),
        }
        for row in profile.experience_entries
    ]
    education: list[ResumeEducationEntry] = [
        _optional_fields(row, _EDUCATION_FIELDS) for row in profile.education_entries
    ]
    projects: list[ResumeProjectEntry] = [
        {
            **_optional_fields(row, _PROJECT_FIELDS),
            "technologies": _load_list(row.technologies),
        }
        for row in profile.project_entries
    ]

    return {
        "profile": profile_data,
        "experience": experience,
        "education": education,
        "projects": projects,
    }


def _get_profile(session: Session, record_id: int) -> ResumeProfile | None:
    return session.get(ResumeProfile, record_id)


class SqlResumeRepository:
    """SQLAlchemy-backed :class:`ResumeRepository`."""

    def get(self, record_id: int) -> ResumeRecord | None:
        """Return the stored record, or None if it does not exist."""
        try:
            with get_session() as session:
                profile = _get_profile(session, record_id)
                if profile is None:
                    return None
                return _to_record(profile)
        except Exception:
            logger.exception("Failed to get resume record %d", record_id)
            raise

    def create(self, record: ResumeRecord) -> int:
        """Store *record* and return its new id."""
        try:
            with get_session() as session:
                profile = ResumeProfile()
                _apply_profile(profile, record.get("profile") or {})
                _replace_entries(profile, record)
                session.add(profile)
                session.flush()
                return profile.id
        except Exception:
            logger.exception("Failed to create resume record")
            raise

    def update(self, record_id: int, record: ResumeRecord) -> bool:
        """Overwrite the stored record; returns False if it does not exist."""
        try:
            with get_session() as session:
                profile = _get_profile(session, record_id)
                if profile is None:
                    return False
                _apply_profile(profile, record.get("profile") or {})
                _replace_entries(profile, record)
                return True
        except Exception:
            logger.exception("Failed to update resume record %d", record_id)
            raise
