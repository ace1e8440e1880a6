"""ORM models for persisted resumes."""

from resume_builder.data.db import Base
from resume_builder.data.models.resume import ResumeRecord

__all__ = ["Base", "ResumeRecord"]
