"""Typographic and pagination constants for the layout engine.

All lengths are in millimetres, font sizes in points. The defaults
reproduce an A4 page with 20 mm margins on every side.
"""

from __future__ import annotations

from enum import StrEnum


class StyleClass(StrEnum):
    """Semantic style classes a content block can carry."""

    TITLE = "title"
    SECTION_HEADER = "section-header"
    ENTRY_HEADING = "entry-heading"
    BODY_TEXT = "body-text"
    META_TEXT = "meta-text"
    LINK_TEXT = "link-text"
    CHIP = "chip"


class Section(StrEnum):
    """Resume sections in the order they appear on the page."""

    HEADER = "header"
    SUMMARY = "summary"
    SKILLS = "skills"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    PROJECTS = "projects"


SECTION_TITLES: dict[Section, str] = {
    Section.SUMMARY: "PROFESSIONAL SUMMARY",
    Section.SKILLS: "TECHNICAL SKILLS",
    Section.EXPERIENCE: "PROFESSIONAL EXPERIENCE",
    Section.EDUCATION: "EDUCATION",
    Section.PROJECTS: "PROJECTS",
}

# Page geometry (A4 portrait)
DEFAULT_PAGE_WIDTH = 210.0
DEFAULT_PAGE_HEIGHT = 297.0
DEFAULT_MARGIN = 20.0

# Height of one text line is font_size * LINE_HEIGHT_FACTOR
LINE_HEIGHT_FACTOR = 0.4

# Trailing gap after a block, by style class
STYLE_GAPS: dict[StyleClass, float] = {
    StyleClass.TITLE: 6.0,
    StyleClass.SECTION_HEADER: 5.0,
    StyleClass.ENTRY_HEADING: 4.0,
    StyleClass.BODY_TEXT: 3.0,
    StyleClass.META_TEXT: 2.5,
    StyleClass.LINK_TEXT: 2.5,
    StyleClass.CHIP: 3.0,
}

DIVIDER_GAP = 8.0
DIVIDER_LINE_WIDTH = 0.4

# Extra space closing an entry and a whole section
ENTRY_SPACING = 4.0
SECTION_SPACING = 3.0

# Chip (tag) metrics
CHIP_PADDING_X = 1.8
CHIP_HEIGHT = 6.0
CHIP_GAP = 2.0
CHIP_ROW_GAP = 2.0

# Pre-emptive break before a section title once the cursor passes this
# fraction of the page height (250/297 and 230/297 on A4).
EXPERIENCE_BREAK_FRACTION = 0.84
EDUCATION_BREAK_FRACTION = 0.77
PROJECTS_BREAK_FRACTION = 0.77

# Fixed PDF creation timestamp so identical input yields identical bytes
PDF_CREATION_DATE = (2000, 1, 1)
