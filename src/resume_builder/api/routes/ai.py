"""AI writing-suggestion routes for the API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from resume_builder.api.schemas.ai import (
    BulletsResponse,
    DescriptionsResponse,
    SkillsResponse,
    SummariesResponse,
)
from resume_builder.services.ai_content import (
    AIContentRequest,
    ExperienceRequest,
    ProjectRequest,
    SkillsRequest,
    SummaryRequest,
    generate_suggestions,
)
from resume_builder.services.llm_providers import LLMError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["ai"])


def _suggest(request: AIContentRequest) -> list[str]:
    try:
        return generate_suggestions(request)
    except LLMError as exc:
        logger.warning("AI %s suggestions failed: %s", request.kind, exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exc),
        ) from None


@router.post("/generate-summary", response_model=SummariesResponse)
def generate_summary(data: SummaryRequest) -> SummariesResponse:
    """Suggest professional summary variations."""
    return SummariesResponse(summaries=_suggest(data))


@router.post("/generate-experience", response_model=BulletsResponse)
def generate_experience(data: ExperienceRequest) -> BulletsResponse:
    """Suggest achievement bullets for one job."""
    return BulletsResponse(bullets=_suggest(data))


@router.post("/suggest-skills", response_model=SkillsResponse)
def suggest_skills(data: SkillsRequest) -> SkillsResponse:
    """Suggest skills for a job title and industry."""
    return SkillsResponse(skills=_suggest(data))


@router.post("/enhance-project", response_model=DescriptionsResponse)
def enhance_project(data: ProjectRequest) -> DescriptionsResponse:
    """Suggest improved descriptions for a project."""
    return DescriptionsResponse(descriptions=_suggest(data))
