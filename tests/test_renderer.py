"""Tests for PDF rendering and download file names."""

from __future__ import annotations

import io
import re

import pytest
from pypdf import PdfReader

from resume_layout.layout.builder import build_blocks
from resume_layout.layout.engine import layout
from resume_layout.layout.renderer import render, suggest_file_name
from resume_layout.layout.styles import DEFAULT_STYLE_TABLE

_PAGE_OBJECT = re.compile(rb"/Type\s*/Page\b")


def _render(record: dict) -> tuple[bytes, int]:
    pages = layout(build_blocks(record))
    return render(pages, DEFAULT_STYLE_TABLE, title="Jane Doe"), len(pages)


class TestRender:
    def test_produces_pdf(self, full_record):
        content, _ = _render(full_record)

        assert isinstance(content, bytes)
        assert content.startswith(b"%PDF")
        assert content.rstrip().endswith(b"%%EOF")

    def test_source_text_reaches_pdf(self, full_record):
        content, _ = _render(full_record)

        text = "\n".join(page.extract_text() for page in PdfReader(io.BytesIO(content)).pages)
        for expected in (
            "Jane Doe",
            "Acme Corp",
            "Cut latency by 30%",
            "GPA: 3.8",
            "fpdf2",
            "PROFESSIONAL EXPERIENCE",
        ):
            assert expected in text

    def test_one_pdf_page_per_laid_out_page(self):
        record = {
            "profile": {"full_name": "Jane Doe"},
            "experience": [
                {"company": f"Company {i}", "description": "A\nB\nC\nD"} for i in range(25)
            ],
        }
        content, page_count = _render(record)

        assert page_count > 1
        assert len(_PAGE_OBJECT.findall(content)) == page_count

    def test_output_is_deterministic(self, full_record):
        first, _ = _render(full_record)
        second, _ = _render(full_record)
        assert first == second

    def test_empty_pages_rejected(self):
        with pytest.raises(ValueError):
            render([], DEFAULT_STYLE_TABLE)


class TestSuggestFileName:
    @pytest.mark.parametrize(
        ("name", "template_id", "expected"),
        [
            ("Jane Doe", "modern", "Jane_Doe_modern.pdf"),
            ("  Jane   Q  Doe ", "classic", "Jane_Q_Doe_classic.pdf"),
            ('A/B:C"D', "tech", "A_B_C_D_tech.pdf"),
            ("", "modern", "Resume_modern.pdf"),
            (None, "minimal", "Resume_minimal.pdf"),
        ],
    )
    def test_names(self, name, template_id, expected):
        assert suggest_file_name(name, template_id) == expected

    def test_custom_extension(self):
        assert suggest_file_name("Jane", "modern", extension="txt") == "Jane_modern.txt"
