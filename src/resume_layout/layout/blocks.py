"""Abstract content blocks produced by the document model builder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from resume_layout.constants.layout_constants import Section, StyleClass

__all__ = ["BlockKind", "ContentBlock"]


class BlockKind(StrEnum):
    HEADING = "heading"
    SECTION_TITLE = "section-title"
    BODY_TEXT = "body-text"
    META_LINE = "meta-line"
    CHIP_GROUP = "chip-group"
    DIVIDER = "divider"


@dataclass(frozen=True)
class ContentBlock:
    """One semantic unit of document content prior to page placement.

    Attributes:
        kind: Block variant.
        style: Style class resolving to a font in the template's style table.
        text: Text content for text-bearing kinds (unwrapped).
        labels: Chip labels, only used by ``CHIP_GROUP`` blocks.
        section: Resume section this block belongs to.
        keep_with_next: Keep this block on the same page as the following one.
        space_after: Extra trailing space on top of the style gap.
    """

    kind: BlockKind
    style: StyleClass
    text: str = ""
    labels: tuple[str, ...] = ()
    section: Section | None = None
    keep_with_next: bool = False
    space_after: float = 0.0
