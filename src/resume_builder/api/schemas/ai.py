"""Pydantic schemas for AI suggestion endpoints."""

from __future__ import annotations

from pydantic import BaseModel


class SummariesResponse(BaseModel):
    summaries: list[str]


class BulletsResponse(BaseModel):
    bullets: list[str]


class SkillsResponse(BaseModel):
    skills: list[str]


class DescriptionsResponse(BaseModel):
    descriptions: list[str]
