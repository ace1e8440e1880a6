"""Tests for AI writing suggestions."""

from __future__ import annotations

import json

import pytest
from pydantic import TypeAdapter, ValidationError

from resume_builder.services.ai_content import (
    AIContentRequest,
    ExperienceRequest,
    ProjectRequest,
    SkillsRequest,
    SummaryRequest,
    build_prompt,
    generate_suggestions,
    parse_suggestions,
)
from resume_builder.services.llm_providers import LLMError, LLMProvider
from resume_builder.services.llm_service import LLMService


class MockProvider(LLMProvider):
    """Provider returning a canned response and recording the request."""

    def __init__(self, response: str = "") -> None:
        self.response = response
        self.last_prompt: str | None = None
        self.last_config: dict | None = None

    def send_prompt(self, prompt: str, config: dict) -> str:
        self.last_prompt = prompt
        self.last_config = config
        return self.response


class FailingProvider(LLMProvider):
    def send_prompt(self, prompt: str, config: dict) -> str:
        raise RuntimeError("connection reset")


def _service(response: str) -> tuple[LLMService, MockProvider]:
    provider = MockProvider(response)
    return LLMService(provider=provider), provider


def test_request_union_dispatches_on_kind() -> None:
    adapter = TypeAdapter(AIContentRequest)

    request = adapter.validate_python({"kind": "skills", "jobTitle": "Designer"})

    assert isinstance(request, SkillsRequest)
    assert request.industry == "Technology"


def test_request_union_rejects_unknown_kind() -> None:
    with pytest.raises(ValidationError):
        TypeAdapter(AIContentRequest).validate_python({"kind": "cover-letter"})


def test_project_request_needs_technologies() -> None:
    with pytest.raises(ValidationError):
        ProjectRequest(project_name="Planner", technologies=[])


def test_summary_prompt_lists_inputs() -> None:
    request = SummaryRequest(
        job_title="Data Engineer", years_experience="5", skills=["SQL", "Spark"]
    )

    system, user = build_prompt(request)

    assert "professional summary" in system
    assert '{"suggestions"' in system
    assert "Job Title: Data Engineer" in user
    assert "Key Skills: SQL, Spark" in user
    assert "Industry: Technology" in user


def test_experience_prompt_defaults_achievements() -> None:
    _, user = build_prompt(ExperienceRequest(job_title="Engineer", company="Acme"))

    assert "Company: Acme" in user
    assert "Achievements: General professional achievements" in user


def test_project_prompt_defaults_description() -> None:
    _, user = build_prompt(ProjectRequest(project_name="Planner", technologies=["React"]))

    assert "Technologies Used: React" in user
    assert "A technical project showcasing development skills" in user


def test_generate_suggestions_parses_json() -> None:
    service, provider = _service(json.dumps({"suggestions": ["Python", " SQL ", ""]}))

    result = generate_suggestions(SkillsRequest(job_title="Data Engineer"), service=service)

    assert result == ["Python", "SQL"]
    assert provider.last_config == {"temperature": 0.7, "json_output": True}
    assert provider.last_prompt is not None
    assert "Job Title: Data Engineer" in provider.last_prompt


def test_generate_suggestions_wraps_provider_errors() -> None:
    service = LLMService(provider=FailingProvider())

    with pytest.raises(LLMError, match="LLM API call failed: connection reset"):
        generate_suggestions(SkillsRequest(job_title="Designer"), service=service)


def test_generate_suggestions_reports_missing_configuration(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("LLM_PROVIDER", "gemini")
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    with pytest.raises(LLMError, match="GEMINI_API_KEY"):
        generate_suggestions(SkillsRequest(job_title="Designer"))


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ('{"suggestions": ["a", "b"]}', ["a", "b"]),
        ('```json\n{"suggestions": ["a"]}\n```', ["a"]),
        ('{"skills": ["Figma", "Sketch"]}', ["Figma", "Sketch"]),
        ('["x", "y"]', ["x", "y"]),
        (
            "- First idea\n• Second idea\n\n* Third idea",
            ["First idea", "Second idea", "Third idea"],
        ),
        ("", []),
    ],
)
def test_parse_suggestions(text: str, expected: list[str]) -> None:
    assert parse_suggestions(text) == expected


def test_parse_suggestions_rejects_json_without_list() -> None:
    with pytest.raises(LLMError, match="list of suggestions"):
        parse_suggestions('{"answer": 42}')
