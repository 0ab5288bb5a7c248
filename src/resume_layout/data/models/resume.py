"""ORM models backing the resume repository.

A :class:`ResumeProfile` owns ordered experience, education and project
entries (1:many). List-valued fields are stored as JSON arrays in text
columns; ``rank`` preserves display order.
"""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resume_layout.data.db import Base


class ResumeProfile(Base):
    """Profile fields of one stored resume record.

    Attributes:
        id: Auto-incrementing primary key; the repository's record id.
        full_name: Display name (mandatory for rendering).
        skills: JSON array of skill labels.
        updated_at: UTC timestamp when the record was last updated.
    """

    __tablename__ = "ResumeProfile"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    linkedin: Mapped[str | None] = mapped_column(String(255), nullable=True)
    github: Mapped[str | None] = mapped_column(String(255), nullable=True)
    website: Mapped[str | None] = mapped_column(String(255), nullable=True)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    skills: Mapped[str | None] = mapped_column(Text, nullable=True)  # JSON array

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    experience_entries: Mapped[list[ExperienceEntry]] = relationship(
        "ExperienceEntry",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="ExperienceEntry.rank",
    )
    education_entries: Mapped[list[EducationEntry]] = relationship(
        "EducationEntry",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="EducationEntry.rank",
    )
    project_entries: Mapped[list[ProjectEntry]] = relationship(
        "ProjectEntry",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="ProjectEntry.rank",
    )


class ExperienceEntry(Base):
    """Work experience entry of a stored resume."""

    __tablename__ = "ExperienceEntry"
    __table_args__ = (CheckConstraint("rank >= 0", name="ck_experienceentry_rank_positive"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    profile_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("ResumeProfile.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    position: Mapped[str | None] = mapped_column(String(255), nullable=True)
    start_date: Mapped[str | None] = mapped_column(String(64), nullable=True)
    end_date: Mapped[str | None] = mapped_column(String(64), nullable=True)
    is_current: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    achievements: Mapped[str | None] = mapped_column(Text, nullable=True)  # JSON array
    rank: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    profile: Mapped[ResumeProfile] = relationship(
        "ResumeProfile", back_populates="experience_entries"
    )


class EducationEntry(Base):
    """Education entry of a stored resume."""

    __tablename__ = "EducationEntry"
    __table_args__ = (CheckConstraint("rank >= 0", name="ck_educationentry_rank_positive"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    profile_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("ResumeProfile.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    institution: Mapped[str | None] = mapped_column(String(255), nullable=True)
    degree: Mapped[str | None] = mapped_column(String(255), nullable=True)
    field: Mapped[str | None] = mapped_column(String(255), nullable=True)
    start_date: Mapped[str | None] = mapped_column(String(64), nullable=True)
    end_date: Mapped[str | None] = mapped_column(String(64), nullable=True)
    gpa: Mapped[str | None] = mapped_column(String(32), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    rank: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    profile: Mapped[ResumeProfile] = relationship(
        "ResumeProfile", back_populates="education_entries"
    )


class ProjectEntry(Base):
    """Project entry of a stored resume."""

    __tablename__ = "ProjectEntry"
    __table_args__ = (CheckConstraint("rank >= 0", name="ck_projectentry_rank_positive"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    profile_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("ResumeProfile.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    technologies: Mapped[str | None] = mapped_column(Text, nullable=True)  # JSON array
    github_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    live_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    start_date: Mapped[str | None] = mapped_column(String(64), nullable=True)
    end_date: Mapped[str | None] = mapped_column(String(64), nullable=True)
    rank: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    profile: Mapped[ResumeProfile] = relationship("ResumeProfile", back_populates="project_entries")
