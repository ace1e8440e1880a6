"""Data contracts consumed by the resume layout engine.

These models describe one resume snapshot. The engine only reads them; the
storage layer and API own their lifecycle. Field names are snake_case but
the camelCase keys used by the web client (``jobTitle``, ``dateIssued``...)
are accepted and produced through aliases.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from resume_builder.constants.layout_constants import PLACEHOLDER_NAME

__all__ = [
    "CertificateItem",
    "EducationItem",
    "ExperienceItem",
    "LanguageItem",
    "PersonalDetails",
    "ProjectItem",
    "ResumeData",
    "SkillItem",
    "SkillLevel",
    "LanguageProficiency",
]

SkillLevel = Literal["beginner", "intermediate", "advanced", "expert"]
LanguageProficiency = Literal["basic", "conversational", "fluent", "native"]


class _ResumeModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class PersonalDetails(_ResumeModel):
    """Identity, contact links and summary shown in the resume header."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    location: str | None = None
    summary: str | None = None
    linked_in: str | None = None
    github: str | None = None
    portfolio: str | None = None
    photo_url: str | None = None


class ExperienceItem(_ResumeModel):
    id: str | None = None
    job_title: str = ""
    company: str = ""
    location: str | None = None
    start_date: str = ""
    end_date: str | None = None
    current: bool = False
    description: str = ""

    @property
    def bullets(self) -> list[str]:
        """Description lines, one bullet per non-blank line."""
        return [line.strip() for line in self.description.splitlines() if line.strip()]


class EducationItem(_ResumeModel):
    id: str | None = None
    degree: str = ""
    institution: str = ""
    location: str | None = None
    start_date: str = ""
    end_date: str | None = None
    current: bool = False
    gpa: str | None = None
    description: str | None = None


class SkillItem(_ResumeModel):
    id: str | None = None
    name: str = ""
    level: SkillLevel = "intermediate"
    category: str = ""


class ProjectItem(_ResumeModel):
    id: str | None = None
    name: str = ""
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    url: str | None = None
    start_date: str | None = None
    end_date: str | None = None


class LanguageItem(_ResumeModel):
    id: str | None = None
    name: str = ""
    proficiency: LanguageProficiency = "conversational"


class CertificateItem(_ResumeModel):
    id: str | None = None
    name: str = ""
    issuer: str = ""
    date_issued: str = ""
    expiry_date: str | None = None
    credential_url: str | None = None


class ResumeData(_ResumeModel):
    """Everything needed to lay out one resume."""

    personal_details: PersonalDetails = Field(default_factory=PersonalDetails)
    experience: list[ExperienceItem] = Field(default_factory=list)
    education: list[EducationItem] = Field(default_factory=list)
    skills: list[SkillItem] = Field(default_factory=list)
    projects: list[ProjectItem] = Field(default_factory=list)
    languages: list[LanguageItem] = Field(default_factory=list)
    certificates: list[CertificateItem] = Field(default_factory=list)

    @property
    def full_name(self) -> str:
        details = self.personal_details
        name = f"{details.first_name or ''} {details.last_name or ''}".strip()
        return name or PLACEHOLDER_NAME
