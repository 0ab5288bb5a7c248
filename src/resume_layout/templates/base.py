"""Resume template descriptor shared by the catalog and the API."""

from __future__ import annotations

from dataclasses import dataclass, field

from resume_layout.layout.styles import StyleTable

__all__ = ["ResumeTemplate"]


@dataclass(frozen=True)
class ResumeTemplate:
    """A named visual treatment for the resume.

    Attributes:
        id: Stable identifier used in URLs and download file names.
        name: Human-readable template name shown in the UI.
        description: One-line pitch for the template gallery.
        category: Gallery grouping.
        is_ats: Whether the layout is safe for applicant tracking systems.
        styles: Complete style table used for layout and rendering.
    """

    id: str
    name: str
    description: str
    category: str
    styles: StyleTable = field(repr=False, compare=False)
    is_ats: bool = True
