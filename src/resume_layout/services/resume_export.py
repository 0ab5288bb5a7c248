"""Resume export service.

Runs a :class:`ResumeRecord` through the full pipeline
(blocks -> pages -> PDF bytes) with a registered template and derives the
download file name. Every call recomputes the layout from scratch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from resume_layout.config import SectionBreakThresholds, load_break_thresholds
from resume_layout.layout.builder import build_blocks, clean_text
from resume_layout.layout.engine import PageCanvas, PageGeometry, layout
from resume_layout.layout.renderer import render, suggest_file_name
from resume_layout.templates import DEFAULT_TEMPLATE_ID, get_template

if TYPE_CHECKING:
    from resume_layout.services.resume_data import ResumeRecord

logger = logging.getLogger(__name__)

__all__ = [
    "PDF_MEDIA_TYPE",
    "ExportedResume",
    "RenderedDocument",
    "export_resume",
    "layout_resume",
]

PDF_MEDIA_TYPE = "application/pdf"


@dataclass(frozen=True)
class RenderedDocument:
    """Paginated layout of one resume plus its suggested file name."""

    pages: list[PageCanvas]
    file_name: str
    template_id: str

    @property
    def page_count(self) -> int:
        return len(self.pages)


@dataclass(frozen=True)
class ExportedResume:
    """Serialised resume ready for delivery (download or HTTP body)."""

    file_name: str
    content: bytes
    page_count: int
    media_type: str = PDF_MEDIA_TYPE


def layout_resume(
    record: ResumeRecord,
    template_id: str = DEFAULT_TEMPLATE_ID,
    *,
    geometry: PageGeometry | None = None,
    thresholds: SectionBreakThresholds | None = None,
) -> RenderedDocument:
    """Lay out *record* with the template registered as *template_id*.

    Args:
        record: Input record; only ``profile.full_name`` is mandatory.
        template_id: Registered template identifier.
        geometry: Page geometry; defaults to A4 with 20 mm margins.
        thresholds: Section break fractions; defaults to the environment.

    Raises:
        ValueError: If the template id is unknown.
        ValidationError: If the record has no full name.
        MeasurementError: If the template's fonts cannot be measured.
    """
    template = get_template(template_id)
    blocks = build_blocks(record)
    pages = layout(
        blocks,
        geometry,
        template.styles,
        thresholds if thresholds is not None else load_break_thresholds(),
    )
    full_name = (record.get("profile") or {}).get("full_name")
    return RenderedDocument(
        pages=pages,
        file_name=suggest_file_name(clean_text(full_name), template.id),
        template_id=template.id,
    )


def export_resume(
    record: ResumeRecord,
    template_id: str = DEFAULT_TEMPLATE_ID,
    *,
    geometry: PageGeometry | None = None,
    thresholds: SectionBreakThresholds | None = None,
) -> ExportedResume:
    """Render *record* to PDF bytes.

    Failures propagate unchanged; a partial document is never returned.

    Returns:
        The PDF bytes, suggested file name and page count.
    """
    document = layout_resume(record, template_id, geometry=geometry, thresholds=thresholds)
    template = get_template(document.template_id)
    full_name = (record.get("profile") or {}).get("full_name")
    content = render(document.pages, template.styles, title=full_name)

    logger.info(
        "Exported resume %s (%d page(s), %d bytes)",
        document.file_name,
        document.page_count,
        len(content),
    )
    return ExportedResume(
        file_name=document.file_name,
        content=content,
        page_count=document.page_count,
    )
