"""Pydantic schemas for resume API endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from resume_builder.services.resume_data import (
    CertificateItem,
    EducationItem,
    ExperienceItem,
    LanguageItem,
    PersonalDetails,
    ProjectItem,
    ResumeData,
    SkillItem,
)


class ResumeResponse(ResumeData):
    """Response schema for a stored resume, serialized with camelCase keys."""

    id: str
    created_at: datetime
    updated_at: datetime


class ResumeUpdateRequest(BaseModel):
    """Request schema for replacing some sections of a stored resume.

    All fields are optional; only sections present in the request body are
    written, the others keep their stored value.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    personal_details: PersonalDetails | None = None
    experience: list[ExperienceItem] | None = None
    education: list[EducationItem] | None = None
    skills: list[SkillItem] | None = None
    projects: list[ProjectItem] | None = None
    languages: list[LanguageItem] | None = None
    certificates: list[CertificateItem] | None = None
