"""Draw laid-out pages with fpdf2 and serialise them to PDF bytes."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime

from fpdf import FPDF
from fpdf.errors import FPDFException

from resume_layout.constants.layout_constants import (
    CHIP_GAP,
    CHIP_HEIGHT,
    CHIP_ROW_GAP,
    DIVIDER_LINE_WIDTH,
    PDF_CREATION_DATE,
    StyleClass,
)
from resume_layout.layout.blocks import BlockKind
from resume_layout.layout.engine import PageCanvas, PlacedBlock, chip_width
from resume_layout.layout.errors import MeasurementError
from resume_layout.layout.styles import FontMetrics, FontSpec

__all__ = ["DEFAULT_FILE_STEM", "render", "suggest_file_name"]

DEFAULT_FILE_STEM = "Resume"

_CHIP_FILL = (243, 244, 246)
_CHIP_BORDER = (209, 213, 219)

_WHITESPACE_RUN = re.compile(r"\s+")
_UNSAFE_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*]')


def suggest_file_name(full_name: str | None, template_id: str, extension: str = "pdf") -> str:
    """Return a download name like ``Jane_Doe_modern.pdf``.

    Whitespace runs collapse to one underscore and characters that are
    invalid in file names are replaced. A missing name falls back to
    ``Resume``.
    """
    stem = _WHITESPACE_RUN.sub("_", (full_name or "").strip())
    stem = _UNSAFE_FILENAME_CHARS.sub("_", stem)
    return f"{stem or DEFAULT_FILE_STEM}_{template_id}.{extension}"


class _PageDrawer:
    """Draws placed blocks onto the current page of an ``FPDF`` document."""

    def __init__(self, pdf: FPDF, styles: Mapping[StyleClass, FontSpec]) -> None:
        self.pdf = pdf
        self.metrics = FontMetrics(styles)

    def _use_style(self, style: StyleClass) -> FontSpec:
        spec = self.metrics.font_for(style)
        try:
            self.pdf.set_font(spec.family, spec.weight, spec.size)
        except FPDFException as exc:
            msg = f"Cannot load font {spec.family!r} for style class {style!s}"
            raise MeasurementError(msg) from exc
        self.pdf.set_text_color(*spec.color)
        return spec

    def draw(self, page: PageCanvas, placed: PlacedBlock) -> None:
        kind = placed.block.kind
        if kind == BlockKind.DIVIDER:
            self._draw_divider(page, placed)
        elif kind == BlockKind.CHIP_GROUP:
            self._draw_chips(page, placed)
        else:
            self._draw_lines(page, placed)

    def _draw_lines(self, page: PageCanvas, placed: PlacedBlock) -> None:
        spec = self._use_style(placed.block.style)
        left = page.geometry.margins.left
        for index, line in enumerate(placed.lines):
            self.pdf.set_xy(left, placed.y + index * spec.line_height)
            self.pdf.cell(w=page.geometry.content_width, h=spec.line_height, text=line)

    def _draw_chips(self, page: PageCanvas, placed: PlacedBlock) -> None:
        self._use_style(StyleClass.CHIP)
        self.pdf.set_fill_color(*_CHIP_FILL)
        self.pdf.set_draw_color(*_CHIP_BORDER)
        self.pdf.set_line_width(0.2)

        for row_index, row in enumerate(placed.rows):
            y = placed.y + row_index * (CHIP_HEIGHT + CHIP_ROW_GAP)
            x = page.geometry.margins.left
            for label in row:
                width = chip_width(label, self.metrics)
                self.pdf.rect(x, y, width, CHIP_HEIGHT, style="DF")
                self.pdf.set_xy(x, y)
                self.pdf.cell(w=width, h=CHIP_HEIGHT, text=label, align="C")
                x += width + CHIP_GAP

    def _draw_divider(self, page: PageCanvas, placed: PlacedBlock) -> None:
        accent = self.metrics.font_for(StyleClass.SECTION_HEADER).color
        margins = page.geometry.margins
        self.pdf.set_draw_color(*accent)
        self.pdf.set_line_width(DIVIDER_LINE_WIDTH)
        self.pdf.line(margins.left, placed.y, page.geometry.width - margins.right, placed.y)


def render(
    pages: Sequence[PageCanvas],
    styles: Mapping[StyleClass, FontSpec],
    *,
    title: str | None = None,
) -> bytes:
    """Serialise laid-out *pages* into a single PDF document.

    Args:
        pages: Output of :func:`resume_layout.layout.engine.layout`.
        styles: The style table the pages were laid out with.
        title: Optional document title stored in the PDF metadata.

    Returns:
        The PDF file contents.

    Raises:
        ValueError: If *pages* is empty.
        MeasurementError: If a style class has no font.
    """
    if not pages:
        msg = "Cannot render a document without pages"
        raise ValueError(msg)

    geometry = pages[0].geometry
    pdf = FPDF(unit="mm", format=(geometry.width, geometry.height))
    pdf.set_auto_page_break(auto=False)
    pdf.set_margins(geometry.margins.left, geometry.margins.top, geometry.margins.right)
    pdf.set_creation_date(datetime(*PDF_CREATION_DATE, tzinfo=UTC))
    if title:
        pdf.set_title(title)

    drawer = _PageDrawer(pdf, styles)
    for page in pages:
        pdf.add_page()
        for placed in page.placed:
            drawer.draw(page, placed)

    return bytes(pdf.output())
