"""Flow and pagination engine.

Given an ordered sequence of :class:`ContentBlock` and a fixed page
geometry, the engine measures every block (wrapping text with real font
metrics), then walks the sequence with a single vertical cursor, assigning
each block to a page and an offset.

Page-break rules, applied before a block is placed:

1. A section title for Experience, Education or Projects starts a new page
   once the cursor has passed the section's threshold fraction of the page
   height. This keeps a heading from being stranded at the bottom of a page.
2. A block that does not fit between the cursor and the bottom margin
   starts a new page. Blocks flagged ``keep_with_next`` count the blocks
   they are chained to as part of their height, as long as the chain fits
   in one content area; the chained blocks then follow onto the same page
   without being tested again.
3. The first block on a page is always placed, even when it is taller than
   the whole content area (it overflows).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from resume_layout.config import SectionBreakThresholds
from resume_layout.constants.layout_constants import (
    CHIP_GAP,
    CHIP_HEIGHT,
    CHIP_PADDING_X,
    CHIP_ROW_GAP,
    DEFAULT_MARGIN,
    DEFAULT_PAGE_HEIGHT,
    DEFAULT_PAGE_WIDTH,
    DIVIDER_GAP,
    STYLE_GAPS,
    StyleClass,
)
from resume_layout.layout.blocks import BlockKind, ContentBlock
from resume_layout.layout.styles import DEFAULT_STYLE_TABLE, FontMetrics, FontSpec
from resume_layout.layout.wrapping import pack_tokens, wrap_text

logger = logging.getLogger(__name__)

__all__ = [
    "Margins",
    "PageCanvas",
    "PageGeometry",
    "PlacedBlock",
    "chip_width",
    "layout",
]


@dataclass(frozen=True)
class Margins:
    top: float = DEFAULT_MARGIN
    right: float = DEFAULT_MARGIN
    bottom: float = DEFAULT_MARGIN
    left: float = DEFAULT_MARGIN


@dataclass(frozen=True)
class PageGeometry:
    """Fixed page size and margins for one layout pass (millimetres)."""

    width: float = DEFAULT_PAGE_WIDTH
    height: float = DEFAULT_PAGE_HEIGHT
    margins: Margins = field(default_factory=Margins)

    @property
    def content_width(self) -> float:
        return self.width - self.margins.left - self.margins.right

    @property
    def content_bottom(self) -> float:
        """Lowest y a block may reach without overflowing."""
        return self.height - self.margins.bottom

    @property
    def content_height(self) -> float:
        return self.content_bottom - self.margins.top


@dataclass(frozen=True)
class PlacedBlock:
    """A block with its page offset and pre-computed line breaks.

    Attributes:
        block: The source block.
        y: Distance of the block's top edge from the top of the page.
        height: Rendered height of the block.
        lines: Wrapped text lines (text-bearing blocks).
        rows: Packed chip rows (chip groups).
    """

    block: ContentBlock
    y: float
    height: float
    lines: tuple[str, ...] = ()
    rows: tuple[tuple[str, ...], ...] = ()

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass
class PageCanvas:
    """One page of output: geometry, running cursor and placed blocks."""

    number: int
    geometry: PageGeometry
    cursor: float
    placed: list[PlacedBlock] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.placed


@dataclass(frozen=True)
class _Measured:
    block: ContentBlock
    height: float
    gap_after: float
    lines: tuple[str, ...] = ()
    rows: tuple[tuple[str, ...], ...] = ()


def chip_width(label: str, metrics: FontMetrics) -> float:
    """Return the boxed width of one chip, label plus horizontal padding."""
    return metrics.width(label, StyleClass.CHIP) + 2 * CHIP_PADDING_X


def _chip_group_height(row_count: int) -> float:
    if row_count == 0:
        return 0.0
    return row_count * CHIP_HEIGHT + (row_count - 1) * CHIP_ROW_GAP


def _measure(block: ContentBlock, metrics: FontMetrics, content_width: float) -> _Measured:
    if block.kind == BlockKind.DIVIDER:
        # Resolve the style anyway so a misconfigured table fails here
        metrics.font_for(block.style)
        return _Measured(block, 0.0, DIVIDER_GAP + block.space_after)

    gap_after = STYLE_GAPS[block.style] + block.space_after

    if block.kind == BlockKind.CHIP_GROUP:
        packed = pack_tokens(
            block.labels,
            lambda label: chip_width(label, metrics),
            content_width,
            CHIP_GAP,
        )
        rows = tuple(tuple(row) for row in packed)
        return _Measured(block, _chip_group_height(len(rows)), gap_after, rows=rows)

    lines = wrap_text(
        block.text,
        lambda word: metrics.width(word, block.style),
        content_width,
        metrics.width(" ", block.style),
    )
    height = len(lines) * metrics.line_height(block.style)
    return _Measured(block, height, gap_after, lines=tuple(lines))


def _keep_chain(measured: Sequence[_Measured], index: int, limit: float) -> tuple[float, int]:
    """Return the height that must fit to place ``measured[index]`` and the chain end.

    Follows the ``keep_with_next`` chain while the combined height still
    fits in one content area; beyond that the chain cannot be honoured.
    """
    required = measured[index].height
    last = index
    while measured[last].block.keep_with_next and last + 1 < len(measured):
        extended = required + measured[last].gap_after + measured[last + 1].height
        if extended > limit:
            break
        required = extended
        last += 1
    return required, last


def layout(
    blocks: Sequence[ContentBlock],
    geometry: PageGeometry | None = None,
    styles: Mapping[StyleClass, FontSpec] | None = None,
    thresholds: SectionBreakThresholds | None = None,
) -> list[PageCanvas]:
    """Flow *blocks* into fixed-size pages.

    Args:
        blocks: Content blocks in display order.
        geometry: Page size and margins; defaults to A4 with 20 mm margins.
        styles: Style table used for font metrics.
        thresholds: Pre-emptive section break fractions.

    Returns:
        Pages in order. At least one page is always returned.

    Raises:
        MeasurementError: If a block's style cannot be resolved to a font.
    """
    geometry = geometry or PageGeometry()
    thresholds = thresholds or SectionBreakThresholds()
    metrics = FontMetrics(styles if styles is not None else DEFAULT_STYLE_TABLE)

    measured = [_measure(block, metrics, geometry.content_width) for block in blocks]

    pages = [PageCanvas(number=1, geometry=geometry, cursor=geometry.margins.top)]
    # Blocks up to this index were already fitted as part of a keep-with-next chain
    kept_until = -1

    for index, item in enumerate(measured):
        page = pages[-1]

        if index > kept_until:
            required, kept_until = _keep_chain(measured, index, geometry.content_height)
            reason = None if page.is_empty else _break_reason(item, required, page, thresholds)
            if reason is not None:
                logger.debug(
                    "Page break before %s block (%s); starting page %d",
                    item.block.kind,
                    reason,
                    page.number + 1,
                )
                page = PageCanvas(
                    number=page.number + 1,
                    geometry=geometry,
                    cursor=geometry.margins.top,
                )
                pages.append(page)

        page.placed.append(
            PlacedBlock(
                block=item.block,
                y=page.cursor,
                height=item.height,
                lines=item.lines,
                rows=item.rows,
            )
        )
        page.cursor += item.height + item.gap_after

    return pages


def _break_reason(
    item: _Measured,
    required: float,
    page: PageCanvas,
    thresholds: SectionBreakThresholds,
) -> str | None:
    geometry = page.geometry
    block = item.block

    if block.kind == BlockKind.SECTION_TITLE:
        fraction = thresholds.for_section(block.section)
        if fraction is not None and page.cursor > fraction * geometry.height:
            return f"{block.section} section threshold"

    if page.cursor + required > geometry.content_bottom:
        return "overflow"
    return None
