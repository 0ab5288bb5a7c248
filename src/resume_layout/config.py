"""Runtime configuration read from environment variables.

Section break thresholds can be tuned per deployment without code changes:

- ``RESUME_BREAK_BEFORE_EXPERIENCE``
- ``RESUME_BREAK_BEFORE_EDUCATION``
- ``RESUME_BREAK_BEFORE_PROJECTS``

Each value is a fraction of the page height in ``(0, 1]``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from resume_layout.constants.layout_constants import (
    EDUCATION_BREAK_FRACTION,
    EXPERIENCE_BREAK_FRACTION,
    PROJECTS_BREAK_FRACTION,
    Section,
)

__all__ = ["SectionBreakThresholds", "load_break_thresholds"]


@dataclass(frozen=True)
class SectionBreakThresholds:
    """Cursor fractions past which a section title starts a new page."""

    experience: float = EXPERIENCE_BREAK_FRACTION
    education: float = EDUCATION_BREAK_FRACTION
    projects: float = PROJECTS_BREAK_FRACTION

    def for_section(self, section: Section | None) -> float | None:
        """Return the threshold for *section*, or None if it has no pre-emptive break."""
        if section == Section.EXPERIENCE:
            return self.experience
        if section == Section.EDUCATION:
            return self.education
        if section == Section.PROJECTS:
            return self.projects
        return None


def _read_fraction(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        msg = f"{name} must be a number, got {raw!r}"
        raise ValueError(msg) from None
    if not 0.0 < value <= 1.0:
        msg = f"{name} must be within (0, 1], got {value}"
        raise ValueError(msg)
    return value


def load_break_thresholds() -> SectionBreakThresholds:
    """Build thresholds from the environment, falling back to the defaults."""
    return SectionBreakThresholds(
        experience=_read_fraction("RESUME_BREAK_BEFORE_EXPERIENCE", EXPERIENCE_BREAK_FRACTION),
        education=_read_fraction("RESUME_BREAK_BEFORE_EDUCATION", EDUCATION_BREAK_FRACTION),
        projects=_read_fraction("RESUME_BREAK_BEFORE_PROJECTS", PROJECTS_BREAK_FRACTION),
    )
