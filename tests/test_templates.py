"""Tests for the template registry and style table validation."""

from __future__ import annotations

from dataclasses import replace

import pytest

from resume_layout.constants import StyleClass
from resume_layout.layout.errors import MeasurementError
from resume_layout.layout.styles import DEFAULT_STYLE_TABLE, build_style_table, validate_style_table
from resume_layout.templates import (
    DEFAULT_TEMPLATE_ID,
    all_templates,
    get_template,
    list_templates,
)


class TestRegistry:
    def test_list_templates_sorted(self):
        ids = list_templates()
        assert ids == sorted(ids)
        assert {"modern", "classic", "tech"} <= set(ids)

    def test_default_registered(self):
        assert get_template(DEFAULT_TEMPLATE_ID).id == DEFAULT_TEMPLATE_ID

    def test_unknown_template(self):
        with pytest.raises(ValueError, match="Unknown template"):
            get_template("nope")

    def test_ids_unique(self):
        ids = [t.id for t in all_templates()]
        assert len(ids) == len(set(ids)) == len(list_templates())

    @pytest.mark.parametrize("template_id", list_templates())
    def test_every_template_covers_all_styles(self, template_id):
        styles = get_template(template_id).styles
        assert set(styles) == set(StyleClass)


class TestValidateStyleTable:
    def test_default_table_valid(self):
        validate_style_table(DEFAULT_STYLE_TABLE)

    def test_missing_class(self):
        styles = {k: v for k, v in DEFAULT_STYLE_TABLE.items() if k != StyleClass.META_TEXT}
        with pytest.raises(MeasurementError, match="meta-text"):
            validate_style_table(styles)

    def test_unknown_family(self):
        with pytest.raises(MeasurementError, match="font family"):
            validate_style_table(build_style_table("comic sans"))

    @pytest.mark.parametrize(
        "changes",
        [{"weight": "X"}, {"size": 0}, {"color": (0, 0, 300)}],
    )
    def test_invalid_font_spec(self, changes):
        styles = dict(DEFAULT_STYLE_TABLE)
        styles[StyleClass.BODY_TEXT] = replace(styles[StyleClass.BODY_TEXT], **changes)
        with pytest.raises(MeasurementError):
            validate_style_table(styles)
