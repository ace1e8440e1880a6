"""End-to-end tests for resume PDF generation."""

from __future__ import annotations

import asyncio
import io
from pathlib import Path

import pytest
from pypdf import PdfReader

import resume_builder.services.resume_generator as resume_generator
from conftest import RecordingCanvas
from resume_builder.services.resume_data import ResumeData
from resume_builder.services.resume_generator import (
    GENERATION_FAILED_MESSAGE,
    ResumeGenerationError,
    build_resume_pdf,
    generate_resume,
    render_resume,
    resume_filename,
    save_resume_document,
)

ADA = {
    "personalDetails": {"firstName": "Ada", "lastName": "Lovelace"},
    "skills": [
        {"name": "Python", "level": "expert", "category": "Programming"},
        {"name": "C++", "level": "advanced", "category": "programming"},
    ],
}


def _long_resume() -> ResumeData:
    bullet = (
        "Led a cross-functional team delivering a customer-facing analytics platform, "
        "coordinating design, engineering and operations across three time zones"
    )
    return ResumeData.model_validate(
        {
            "personalDetails": {
                "firstName": "Grace",
                "lastName": "Hopper",
                "email": "grace@example.com",
                "phone": "+1 555 0100",
                "summary": "Computer scientist and naval officer.",
            },
            "experience": [
                {
                    "jobTitle": f"Engineer {i}",
                    "company": "Navy",
                    "startDate": "1944-01",
                    "endDate": "1946-01",
                    "description": "\n".join([bullet] * 6),
                }
                for i in range(5)
            ],
        }
    )


async def _no_photo(url: str | None) -> None:
    return None


def _text(content: bytes) -> str:
    reader = PdfReader(io.BytesIO(content))
    return "\n".join(page.extract_text() for page in reader.pages)


@pytest.fixture
def recording(monkeypatch: pytest.MonkeyPatch) -> list[RecordingCanvas]:
    RecordingCanvas.instances.clear()
    monkeypatch.setattr(resume_generator, "Canvas", RecordingCanvas)
    return RecordingCanvas.instances


def test_minimal_resume_renders_name_and_skills() -> None:
    document = asyncio.run(
        generate_resume(ResumeData.model_validate(ADA), photo_loader=_no_photo)
    )

    assert document.filename == "Ada_Lovelace_Resume.pdf"
    assert document.page_count == 1
    assert document.content.startswith(b"%PDF")

    text = _text(document.content)
    assert "Ada Lovelace" in text
    assert "TECHNICAL SKILLS" in text
    assert "Programming:" in text
    assert "Python, C++" in text
    for absent in ("SUMMARY", "EXPERIENCE", "EDUCATION", "PROJECTS", "ADDITIONAL"):
        assert absent not in text


def test_sections_follow_fixed_order(recording: list[RecordingCanvas]) -> None:
    resume = ResumeData.model_validate(
        {
            **ADA,
            "personalDetails": {"firstName": "Ada", "summary": "Analyst."},
            "certificates": [{"name": "Cert", "issuer": "Org"}],
            "education": [{"degree": "BSc", "institution": "UCL"}],
            "experience": [{"jobTitle": "Analyst", "company": "Engines"}],
            "projects": [{"name": "Engine", "description": "Notes"}],
        }
    )

    render_resume(resume)

    texts = recording[0].texts()
    headers = [t for t in texts if t.isupper() and len(t) > 3]
    assert headers == [
        "PROFESSIONAL SUMMARY",
        "PROFESSIONAL EXPERIENCE",
        "EDUCATION",
        "TECHNICAL SKILLS",
        "NOTABLE PROJECTS",
        "ADDITIONAL",
    ]


def test_long_resume_spans_pages(recording: list[RecordingCanvas]) -> None:
    rendered = render_resume(_long_resume())

    assert rendered.page_count >= 2
    assert len(PdfReader(io.BytesIO(rendered.content)).pages) == rendered.page_count

    strings = recording[0].strings
    assert all(item.y <= 282 for item in strings)
    assert {item.page for item in strings} == set(range(1, rendered.page_count + 1))
    header = recording[0].find("Grace Hopper")
    assert (header.page, header.y) == (1, pytest.approx(20))


def test_contact_links_are_annotated() -> None:
    content = build_resume_pdf(_long_resume())

    page = PdfReader(io.BytesIO(content)).pages[0]
    uris = [annot.get_object()["/A"]["/URI"] for annot in page["/Annots"]]
    assert "mailto:grace@example.com" in uris
    assert "tel:+15550100" in uris


def test_empty_resume_uses_placeholder_name() -> None:
    document = asyncio.run(generate_resume(ResumeData(), photo_loader=_no_photo))

    assert document.filename == "Your_Name_Resume.pdf"
    assert "Your Name" in _text(document.content)


def test_photo_loader_result_is_drawn(recording: list[RecordingCanvas]) -> None:
    from PIL import Image
    from reportlab.lib.utils import ImageReader

    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), "red").save(buffer, format="PNG")
    requested: list[str | None] = []

    async def loader(url: str | None) -> ImageReader:
        requested.append(url)
        return ImageReader(io.BytesIO(buffer.getvalue()))

    resume = ResumeData.model_validate(
        {"personalDetails": {"firstName": "Ada", "photoUrl": "https://img.example/ada.png"}}
    )
    asyncio.run(generate_resume(resume, photo_loader=loader))

    assert requested == ["https://img.example/ada.png"]
    assert len(recording[0].images) == 1


def test_layout_failure_is_wrapped(monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom(resume: ResumeData, *, photo: object = None) -> None:
        raise RuntimeError("font missing")

    monkeypatch.setattr(resume_generator, "render_resume", _boom)

    with pytest.raises(ResumeGenerationError, match=GENERATION_FAILED_MESSAGE) as excinfo:
        asyncio.run(generate_resume(ResumeData(), photo_loader=_no_photo))
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_failing_photo_loader_renders_without_photo(
    recording: list[RecordingCanvas], caplog: pytest.LogCaptureFixture
) -> None:
    async def loader(url: str | None) -> None:
        raise ConnectionError("image host unreachable")

    resume = ResumeData.model_validate(
        {"personalDetails": {"firstName": "Ada", "photoUrl": "https://img.example/ada.png"}}
    )
    with caplog.at_level("WARNING", logger=resume_generator.__name__):
        document = asyncio.run(generate_resume(resume, photo_loader=loader))

    assert document.content.startswith(b"%PDF")
    assert recording[0].images == []
    assert "image host unreachable" in caplog.text


def test_unparseable_long_start_date_still_renders() -> None:
    resume = ResumeData.model_validate(
        {
            "experience": [
                {
                    "jobTitle": "Intern",
                    "company": "X",
                    "startDate": "Summer term of my second year at university " * 3,
                }
            ]
        }
    )

    document = asyncio.run(generate_resume(resume, photo_loader=_no_photo))

    text = _text(document.content)
    assert "Intern" in text
    assert "Summer term of my second year" in text


def test_generations_do_not_share_state() -> None:
    async def _both() -> tuple:
        return await asyncio.gather(
            generate_resume(_long_resume(), photo_loader=_no_photo),
            generate_resume(ResumeData.model_validate(ADA), photo_loader=_no_photo),
        )

    long_doc, short_doc = asyncio.run(_both())

    assert long_doc.page_count >= 2
    assert short_doc.page_count == 1


@pytest.mark.parametrize(
    ("override", "expected"),
    [
        (None, "Ada_Lovelace_Resume.pdf"),
        ("", "Ada_Lovelace_Resume.pdf"),
        ("cv", "cv.pdf"),
        ("My CV.PDF", "My CV.PDF"),
        ("../../etc/cv.pdf", "cv.pdf"),
    ],
)
def test_resume_filename(override: str | None, expected: str) -> None:
    assert resume_filename(ResumeData.model_validate(ADA), override) == expected


def test_resume_filename_collapses_whitespace() -> None:
    resume = ResumeData.model_validate(
        {"personalDetails": {"firstName": "Mary  Jane", "lastName": "Watson"}}
    )

    assert resume_filename(resume) == "Mary_Jane_Watson_Resume.pdf"


def test_save_resume_document(tmp_path: Path) -> None:
    document = asyncio.run(
        generate_resume(ResumeData.model_validate(ADA), photo_loader=_no_photo)
    )

    path = save_resume_document(document, tmp_path / "out")

    assert path == tmp_path / "out" / "Ada_Lovelace_Resume.pdf"
    assert path.read_bytes() == document.content
