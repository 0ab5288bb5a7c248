"""Map a :class:`ResumeRecord` to an ordered sequence of content blocks.

The builder is pure: it performs no I/O, never mutates the record, and
never pre-wraps text (wrapping needs font metrics and belongs to the
engine). Absent optional fields are skipped rather than emitted empty, and
a section with nothing to show contributes no blocks at all, title included.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from resume_layout.constants.layout_constants import (
    ENTRY_SPACING,
    SECTION_SPACING,
    SECTION_TITLES,
    Section,
    StyleClass,
)
from resume_layout.layout.blocks import BlockKind, ContentBlock
from resume_layout.layout.errors import ValidationError

if TYPE_CHECKING:
    from resume_layout.services.resume_data import (
        ResumeEducationEntry,
        ResumeExperienceEntry,
        ResumeProfile,
        ResumeProjectEntry,
        ResumeRecord,
    )

__all__ = ["build_blocks", "clean_text", "format_date_range"]

# Typographic characters the core PDF fonts cannot encode
_ASCII_REPLACEMENTS = {
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
    "\u2013": "-",
    "\u2014": "-",
    "\u2022": "-",
    "\u2026": "...",
}


def clean_text(value: Any) -> str:
    """Return *value* as stripped text encodable by the built-in PDF fonts.

    ``None`` becomes the empty string. Common typographic characters map to
    ASCII; anything else outside Latin-1 is replaced with ``?``.
    """
    if value is None:
        return ""
    text = str(value).strip()
    for char, replacement in _ASCII_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text.encode("latin-1", errors="replace").decode("latin-1")


def _clean_list(values: Iterable[Any] | None) -> tuple[str, ...]:
    if not values:
        return ()
    cleaned = (clean_text(value) for value in values)
    return tuple(value for value in cleaned if value)


def format_date_range(start: Any, end: Any, is_current: bool = False) -> str:
    """Return ``start - end`` (``Present`` when current) or whichever side exists."""
    start_str = clean_text(start)
    end_str = "Present" if is_current else clean_text(end)
    if start_str and end_str:
        return f"{start_str} - {end_str}"
    return start_str or end_str


def _join_present(parts: Iterable[str], separator: str = " | ") -> str:
    return separator.join(part for part in parts if part)


def _labelled(label: str, value: Any) -> str:
    text = clean_text(value)
    return f"{label}: {text}" if text else ""


def _section(section: Section, body: list[ContentBlock]) -> list[ContentBlock]:
    """Prefix *body* with its section title and close it with section spacing."""
    if not body:
        return []
    title = ContentBlock(
        BlockKind.SECTION_TITLE,
        StyleClass.SECTION_HEADER,
        text=SECTION_TITLES[section],
        section=section,
        keep_with_next=True,
    )
    body[-1] = replace(body[-1], space_after=body[-1].space_after + SECTION_SPACING)
    return [title, *body]


class _EntryBlocks:
    """Collects the blocks of one section entry."""

    def __init__(self, section: Section) -> None:
        self.section = section
        self.blocks: list[ContentBlock] = []

    def heading(self, text: str) -> None:
        if text:
            self.blocks.append(
                ContentBlock(
                    BlockKind.HEADING,
                    StyleClass.ENTRY_HEADING,
                    text=text,
                    section=self.section,
                    keep_with_next=True,
                )
            )

    def meta(self, text: str, style: StyleClass = StyleClass.META_TEXT) -> None:
        if text:
            self.blocks.append(
                ContentBlock(BlockKind.META_LINE, style, text=text, section=self.section)
            )

    def body(self, text: str) -> None:
        if text:
            self.blocks.append(
                ContentBlock(
                    BlockKind.BODY_TEXT, StyleClass.BODY_TEXT, text=text, section=self.section
                )
            )

    def chips(self, labels: tuple[str, ...]) -> None:
        if labels:
            self.blocks.append(
                ContentBlock(
                    BlockKind.CHIP_GROUP, StyleClass.CHIP, labels=labels, section=self.section
                )
            )

    def finish(self) -> list[ContentBlock]:
        """Return the entry's blocks with entry spacing after the last one.

        A trailing heading no longer has anything to keep with.
        """
        if not self.blocks:
            return []
        last = self.blocks[-1]
        self.blocks[-1] = replace(
            last, keep_with_next=False, space_after=last.space_after + ENTRY_SPACING
        )
        return self.blocks


def _header_blocks(profile: ResumeProfile, full_name: str) -> list[ContentBlock]:
    blocks = [
        ContentBlock(BlockKind.HEADING, StyleClass.TITLE, text=full_name, section=Section.HEADER)
    ]
    contact = _join_present(
        [
            _labelled("Email", profile.get("email")),
            _labelled("Phone", profile.get("phone")),
            _labelled("Location", profile.get("location")),
            _labelled("LinkedIn", profile.get("linkedin")),
            _labelled("GitHub", profile.get("github")),
            _labelled("Website", profile.get("website")),
        ]
    )
    if contact:
        blocks.append(
            ContentBlock(
                BlockKind.META_LINE, StyleClass.META_TEXT, text=contact, section=Section.HEADER
            )
        )
    blocks.append(
        ContentBlock(BlockKind.DIVIDER, StyleClass.SECTION_HEADER, section=Section.HEADER)
    )
    return blocks


def _summary_blocks(profile: ResumeProfile) -> list[ContentBlock]:
    summary = clean_text(profile.get("summary"))
    if not summary:
        return []
    body = [
        ContentBlock(
            BlockKind.BODY_TEXT, StyleClass.BODY_TEXT, text=summary, section=Section.SUMMARY
        )
    ]
    return _section(Section.SUMMARY, body)


def _skills_blocks(profile: ResumeProfile) -> list[ContentBlock]:
    skills = _clean_list(profile.get("skills"))
    if not skills:
        return []
    body = [
        ContentBlock(BlockKind.CHIP_GROUP, StyleClass.CHIP, labels=skills, section=Section.SKILLS)
    ]
    return _section(Section.SKILLS, body)


def _experience_heading(entry: ResumeExperienceEntry) -> str:
    position = clean_text(entry.get("position"))
    company = clean_text(entry.get("company"))
    if position and company:
        return f"{position} at {company}"
    return position or company


def _experience_blocks(entries: Iterable[ResumeExperienceEntry]) -> list[ContentBlock]:
    body: list[ContentBlock] = []
    for entry in entries:
        item = _EntryBlocks(Section.EXPERIENCE)
        item.heading(_experience_heading(entry))
        item.meta(
            format_date_range(
                entry.get("start_date"),
                entry.get("end_date"),
                bool(entry.get("is_current")),
            )
        )
        item.body(clean_text(entry.get("description")))
        item.chips(_clean_list(entry.get("achievements")))
        body.extend(item.finish())
    return _section(Section.EXPERIENCE, body)


def _education_heading(entry: ResumeEducationEntry) -> str:
    degree = clean_text(entry.get("degree"))
    field = clean_text(entry.get("field"))
    if degree and field:
        return f"{degree} in {field}"
    return degree or field or clean_text(entry.get("institution"))


def _education_blocks(entries: Iterable[ResumeEducationEntry]) -> list[ContentBlock]:
    body: list[ContentBlock] = []
    for entry in entries:
        item = _EntryBlocks(Section.EDUCATION)
        heading = _education_heading(entry)
        item.heading(heading)

        institution = clean_text(entry.get("institution"))
        item.meta(
            _join_present(
                [
                    institution if institution != heading else "",
                    format_date_range(entry.get("start_date"), entry.get("end_date")),
                    _labelled("GPA", entry.get("gpa")),
                ]
            )
        )
        item.body(clean_text(entry.get("description")))
        body.extend(item.finish())
    return _section(Section.EDUCATION, body)


def _project_blocks(entries: Iterable[ResumeProjectEntry]) -> list[ContentBlock]:
    body: list[ContentBlock] = []
    for entry in entries:
        item = _EntryBlocks(Section.PROJECTS)
        item.heading(clean_text(entry.get("name")))
        item.meta(format_date_range(entry.get("start_date"), entry.get("end_date")))
        item.body(clean_text(entry.get("description")))
        item.chips(_clean_list(entry.get("technologies")))
        item.meta(
            _join_present(
                [
                    _labelled("GitHub", entry.get("github_url")),
                    _labelled("Live", entry.get("live_url")),
                ]
            ),
            style=StyleClass.LINK_TEXT,
        )
        body.extend(item.finish())
    return _section(Section.PROJECTS, body)


def build_blocks(record: ResumeRecord | Mapping[str, Any]) -> list[ContentBlock]:
    """Build the ordered content blocks for *record*.

    Order: header, summary, skills, experience, education, projects.
    Entries keep their input order.

    Raises:
        ValidationError: If ``profile.full_name`` is missing or blank.
    """
    profile = record.get("profile") or {}
    full_name = clean_text(profile.get("full_name"))
    if not full_name:
        msg = "Resume record requires profile.full_name"
        raise ValidationError(msg)

    return [
        *_header_blocks(profile, full_name),
        *_summary_blocks(profile),
        *_skills_blocks(profile),
        *_experience_blocks(record.get("experience") or []),
        *_education_blocks(record.get("education") or []),
        *_project_blocks(record.get("projects") or []),
    ]
