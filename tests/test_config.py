"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from resume_layout.config import SectionBreakThresholds, load_break_thresholds
from resume_layout.constants import Section


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for name in (
        "RESUME_BREAK_BEFORE_EXPERIENCE",
        "RESUME_BREAK_BEFORE_EDUCATION",
        "RESUME_BREAK_BEFORE_PROJECTS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    assert load_break_thresholds() == SectionBreakThresholds()
    assert SectionBreakThresholds().experience == pytest.approx(0.84)
    assert SectionBreakThresholds().education == pytest.approx(0.77)


def test_env_override(monkeypatch):
    monkeypatch.setenv("RESUME_BREAK_BEFORE_PROJECTS", "0.5")
    assert load_break_thresholds().projects == pytest.approx(0.5)


def test_blank_env_uses_default(monkeypatch):
    monkeypatch.setenv("RESUME_BREAK_BEFORE_EDUCATION", "  ")
    assert load_break_thresholds().education == pytest.approx(0.77)


@pytest.mark.parametrize("raw", ["abc", "0", "1.5", "-0.2"])
def test_invalid_env_rejected(monkeypatch, raw):
    monkeypatch.setenv("RESUME_BREAK_BEFORE_EXPERIENCE", raw)
    with pytest.raises(ValueError, match="RESUME_BREAK_BEFORE_EXPERIENCE"):
        load_break_thresholds()


def test_for_section():
    thresholds = SectionBreakThresholds(experience=0.1, education=0.2, projects=0.3)

    assert thresholds.for_section(Section.EXPERIENCE) == 0.1
    assert thresholds.for_section(Section.EDUCATION) == 0.2
    assert thresholds.for_section(Section.PROJECTS) == 0.3
    assert thresholds.for_section(Section.SKILLS) is None
    assert thresholds.for_section(None) is None
