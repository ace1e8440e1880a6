"""AI writing suggestions for resume content.

Four kinds of request are supported, modelled as a tagged union on the
``kind`` field. Each kind has a fixed prompt and yields a list of text
suggestions the caller may merge into a resume before rendering it.
"""

from __future__ import annotations

import json
import re
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from resume_builder.services.llm_providers import LLMError
from resume_builder.services.llm_service import LLMService

__all__ = [
    "AIContentRequest",
    "ExperienceRequest",
    "ProjectRequest",
    "SkillsRequest",
    "SummaryRequest",
    "build_prompt",
    "generate_suggestions",
    "parse_suggestions",
]


class _AIRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SummaryRequest(_AIRequest):
    kind: Literal["summary"] = "summary"
    job_title: str = Field(..., min_length=1)
    years_experience: str = Field(..., min_length=1)
    skills: list[str] = Field(default_factory=list)
    industry: str = "Technology"


class ExperienceRequest(_AIRequest):
    kind: Literal["experience"] = "experience"
    job_title: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    responsibilities: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)


class SkillsRequest(_AIRequest):
    kind: Literal["skills"] = "skills"
    job_title: str = Field(..., min_length=1)
    industry: str = "Technology"


class ProjectRequest(_AIRequest):
    kind: Literal["project"] = "project"
    project_name: str = Field(..., min_length=1)
    technologies: list[str] = Field(..., min_length=1)
    current_description: str | None = None


AIContentRequest = Annotated[
    SummaryRequest | ExperienceRequest | SkillsRequest | ProjectRequest,
    Field(discriminator="kind"),
]

_RESPONSE_FORMAT = 'Respond with JSON in this format: {"suggestions": ["...", "..."]}'

_SYSTEM_PROMPTS = {
    "summary": (
        "You are a professional resume writer. Generate 3 different professional summary "
        "variations for a resume. Each should be 2-3 sentences, professional, and "
        "ATS-friendly."
    ),
    "experience": (
        "You are a professional resume writer. Generate 3-5 bullet points for a job "
        "experience that are achievement-focused, quantifiable when possible, and "
        "ATS-friendly. Start each bullet with an action verb."
    ),
    "skills": (
        "You are a career advisor. Suggest 10-15 relevant skills for a specific job title "
        "and industry. Include both technical and soft skills."
    ),
    "project": (
        "You are a technical writer. Generate 2-3 enhanced project descriptions that "
        "highlight technical skills, impact, and achievements. Make them professional and "
        "suitable for a resume."
    ),
}

_CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


def _user_content(request: AIContentRequest) -> str:
    if isinstance(request, SummaryRequest):
        return (
            "Generate professional summaries for:\n"
            f"Job Title: {request.job_title}\n"
            f"Years of Experience: {request.years_experience}\n"
            f"Key Skills: {', '.join(request.skills)}\n"
            f"Industry: {request.industry}"
        )
    if isinstance(request, ExperienceRequest):
        achievements = ", ".join(request.achievements) or "General professional achievements"
        return (
            "Generate experience bullet points for:\n"
            f"Job Title: {request.job_title}\n"
            f"Company: {request.company}\n"
            f"Responsibilities: {', '.join(request.responsibilities)}\n"
            f"Achievements: {achievements}"
        )
    if isinstance(request, SkillsRequest):
        return (
            "Suggest relevant skills for:\n"
            f"Job Title: {request.job_title}\n"
            f"Industry: {request.industry}"
        )
    description = (
        request.current_description or "A technical project showcasing development skills"
    )
    return (
        "Enhance project description for:\n"
        f"Project Name: {request.project_name}\n"
        f"Technologies Used: {', '.join(request.technologies)}\n"
        f"Current Description: {description}"
    )


def build_prompt(request: AIContentRequest) -> tuple[str, str]:
    """Return ``(system_instructions, user_content)`` for *request*."""
    system = f"{_SYSTEM_PROMPTS[request.kind]} {_RESPONSE_FORMAT}"
    return system, _user_content(request)


def _normalize_lines(text: str) -> list[str]:
    out: list[str] = []
    for ln in (line.strip() for line in text.splitlines()):
        if not ln:
            continue
        for prefix in ("- ", "• ", "* ", "•", "-"):
            if ln.startswith(prefix):
                ln = ln[len(prefix) :].strip()
                break
        if ln:
            out.append(ln)
    return out


def parse_suggestions(text: str) -> list[str]:
    """Extract suggestion strings from a model response.

    Accepts ``{"suggestions": [...]}``, any object holding a single list, a
    bare JSON list, or plain text with one suggestion per line.

    Raises:
        LLMError: If the response is JSON but holds no list of suggestions.
    """
    cleaned = _CODE_FENCE.sub("", text.strip())
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError:
        return _normalize_lines(cleaned)

    items = payload
    if isinstance(payload, dict):
        items = payload.get("suggestions")
        if items is None:
            items = next((value for value in payload.values() if isinstance(value, list)), None)
    if not isinstance(items, list):
        raise LLMError("LLM response did not contain a list of suggestions")
    return [str(item).strip() for item in items if str(item).strip()]


def generate_suggestions(
    request: AIContentRequest,
    service: LLMService | None = None,
) -> list[str]:
    """Ask the LLM for suggestions matching *request*.

    Raises:
        LLMError: If the service cannot be initialized, the call fails or
            the response cannot be parsed.
    """
    if service is None:
        try:
            service = LLMService()
        except LLMError:
            raise
        except Exception as e:
            raise LLMError(f"Failed to initialize LLM service: {e}") from e

    system_instructions, user_content = build_prompt(request)
    try:
        text = service.generate_llm_response(
            system_instructions=system_instructions,
            user_content=user_content,
            temperature=0.7,
            json_output=True,
        )
    except LLMError:
        raise
    except Exception as e:
        raise LLMError(f"LLM API call failed: {e}") from e

    return parse_suggestions(text)
