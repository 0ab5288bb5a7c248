from __future__ import annotations

from resume_layout.constants.layout_constants import (
    SECTION_TITLES,
    STYLE_GAPS,
    Section,
    StyleClass,
)

__all__ = [
    "SECTION_TITLES",
    "STYLE_GAPS",
    "Section",
    "StyleClass",
]
