"""ORM models package for database tables.

- ResumeProfile: Profile fields of a stored resume record
- ExperienceEntry / EducationEntry / ProjectEntry: Ordered child entries

All models inherit from the shared Base declarative class defined in data.db.
"""

from resume_layout.data.db import Base
from resume_layout.data.models.resume import (
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeProfile,
)

__all__ = ["Base", "EducationEntry", "ExperienceEntry", "ProjectEntry", "ResumeProfile"]
