"""Pydantic schemas for resume API endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from resume_layout.templates import DEFAULT_TEMPLATE_ID


class ProfileSchema(BaseModel):
    """Profile, contact links, summary and skills."""

    full_name: str = Field(..., min_length=1, description="Full name (mandatory)")
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    github: str | None = None
    website: str | None = None
    summary: str | None = None
    skills: list[str] = Field(default_factory=list)


class ExperienceSchema(BaseModel):
    company: str | None = None
    position: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    is_current: bool = False
    description: str | None = None
    achievements: list[str] = Field(default_factory=list)


class EducationSchema(BaseModel):
    institution: str | None = None
    degree: str | None = None
    field: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    gpa: str | None = None
    description: str | None = None


class ProjectSchema(BaseModel):
    name: str | None = None
    description: str | None = None
    technologies: list[str] = Field(default_factory=list)
    github_url: str | None = None
    live_url: str | None = None
    start_date: str | None = None
    end_date: str | None = None


class ResumeRecordSchema(BaseModel):
    """A complete resume record: profile plus ordered entry lists."""

    profile: ProfileSchema
    experience: list[ExperienceSchema] = Field(default_factory=list)
    education: list[EducationSchema] = Field(default_factory=list)
    projects: list[ProjectSchema] = Field(default_factory=list)


class ResumeRecordResponse(ResumeRecordSchema):
    """A stored resume record with its id."""

    id: int


class ResumeCreatedResponse(BaseModel):
    id: int


class ResumeExportRequest(BaseModel):
    """Request schema for exporting a stored resume to PDF."""

    template_id: str = Field(DEFAULT_TEMPLATE_ID, description="Template identifier")


class ResumeRenderRequest(BaseModel):
    """Request schema for rendering an unsaved record to PDF."""

    record: ResumeRecordSchema
    template_id: str = Field(DEFAULT_TEMPLATE_ID, description="Template identifier")
