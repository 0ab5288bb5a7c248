"""Resume layout pipeline: block building, pagination and PDF rendering."""

from __future__ import annotations

from resume_layout.layout.blocks import BlockKind, ContentBlock
from resume_layout.layout.builder import build_blocks
from resume_layout.layout.engine import Margins, PageCanvas, PageGeometry, PlacedBlock, layout
from resume_layout.layout.errors import MeasurementError, ResumeLayoutError, ValidationError
from resume_layout.layout.renderer import render, suggest_file_name
from resume_layout.layout.styles import FontSpec, StyleTable, validate_style_table

__all__ = [
    "BlockKind",
    "ContentBlock",
    "FontSpec",
    "Margins",
    "MeasurementError",
    "PageCanvas",
    "PageGeometry",
    "PlacedBlock",
    "ResumeLayoutError",
    "StyleTable",
    "ValidationError",
    "build_blocks",
    "layout",
    "render",
    "suggest_file_name",
    "validate_style_table",
]
