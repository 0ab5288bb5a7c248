"""Style table types and font metrics.

A style table is a finite mapping from every :class:`StyleClass` to a
concrete :class:`FontSpec`. Tables are validated once when a template is
registered, so a render never discovers a missing style half-way through.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fpdf import FPDF
from fpdf.errors import FPDFException

from resume_layout.constants.layout_constants import LINE_HEIGHT_FACTOR, StyleClass
from resume_layout.layout.errors import MeasurementError

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = [
    "CORE_FONT_FAMILIES",
    "DEFAULT_STYLE_TABLE",
    "FontMetrics",
    "FontSpec",
    "StyleTable",
    "build_style_table",
    "validate_style_table",
]

# Built-in PDF fonts available without embedding
CORE_FONT_FAMILIES = frozenset({"courier", "helvetica", "times"})
_FONT_WEIGHTS = frozenset({"", "B", "I", "BI"})

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class FontSpec:
    """Font family, weight, size (pt) and colour for one style class."""

    family: str
    weight: str = ""
    size: float = 11.0
    color: RGB = (0, 0, 0)

    @property
    def line_height(self) -> float:
        """Height of one rendered line in millimetres."""
        return self.size * LINE_HEIGHT_FACTOR


StyleTable = dict[StyleClass, FontSpec]


def build_style_table(
    family: str = "helvetica",
    *,
    accent: RGB = (37, 99, 235),
    heading: RGB = (31, 41, 55),
    body: RGB = (55, 65, 81),
    muted: RGB = (107, 114, 128),
    title_size: float = 20.0,
    section_size: float = 14.0,
) -> StyleTable:
    """Return a complete style table for one font family and palette."""
    return {
        StyleClass.TITLE: FontSpec(family, "B", title_size, heading),
        StyleClass.SECTION_HEADER: FontSpec(family, "B", section_size, accent),
        StyleClass.ENTRY_HEADING: FontSpec(family, "B", 12.0, heading),
        StyleClass.BODY_TEXT: FontSpec(family, "", 11.0, body),
        StyleClass.META_TEXT: FontSpec(family, "", 10.0, muted),
        StyleClass.LINK_TEXT: FontSpec(family, "", 10.0, accent),
        StyleClass.CHIP: FontSpec(family, "", 9.0, body),
    }


DEFAULT_STYLE_TABLE: StyleTable = build_style_table()


def validate_style_table(styles: Mapping[StyleClass, FontSpec]) -> None:
    """Check that *styles* covers every style class with a usable font.

    Raises:
        MeasurementError: If a class is missing or its font is invalid.
    """
    missing = [style.value for style in StyleClass if style not in styles]
    if missing:
        msg = f"Style table is missing classes: {', '.join(missing)}"
        raise MeasurementError(msg)

    for style, spec in styles.items():
        if spec.family.lower() not in CORE_FONT_FAMILIES:
            msg = f"Unsupported font family {spec.family!r} for style {style.value!r}"
            raise MeasurementError(msg)
        if spec.weight not in _FONT_WEIGHTS:
            msg = f"Unsupported font weight {spec.weight!r} for style {style.value!r}"
            raise MeasurementError(msg)
        if spec.size <= 0:
            msg = f"Font size must be positive for style {style.value!r}"
            raise MeasurementError(msg)
        if any(not 0 <= channel <= 255 for channel in spec.color):
            msg = f"Colour channels must be within 0-255 for style {style.value!r}"
            raise MeasurementError(msg)


class FontMetrics:
    """Measures rendered text widths using the core-font tables of fpdf2.

    Each instance owns a private, page-less ``FPDF`` document used purely
    for metric lookups, so concurrent renders never share font state.
    """

    def __init__(self, styles: Mapping[StyleClass, FontSpec]) -> None:
        self._styles = styles
        self._pdf = FPDF(unit="mm")
        self._current: StyleClass | None = None

    def font_for(self, style: StyleClass) -> FontSpec:
        try:
            return self._styles[style]
        except KeyError:
            msg = f"No font configured for style class {style!s}"
            raise MeasurementError(msg) from None

    def _select(self, style: StyleClass) -> None:
        if self._current == style:
            return
        spec = self.font_for(style)
        try:
            self._pdf.set_font(spec.family, spec.weight, spec.size)
        except FPDFException as exc:
            msg = f"Cannot load font {spec.family!r} for style class {style!s}"
            raise MeasurementError(msg) from exc
        self._current = style

    def width(self, text: str, style: StyleClass) -> float:
        """Return the width of *text* in millimetres when set in *style*."""
        self._select(style)
        try:
            return self._pdf.get_string_width(text)
        except FPDFException as exc:
            msg = f"Cannot measure text in style class {style!s}"
            raise MeasurementError(msg) from exc

    def line_height(self, style: StyleClass) -> float:
        return self.font_for(style).line_height
