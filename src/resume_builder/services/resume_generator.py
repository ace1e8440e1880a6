"""Resume PDF assembly.

Runs the section renderers over one :class:`ResumeData` snapshot in a fixed
order and packages the result. Each call builds its own canvas, cursor and
painter, so concurrent generations never share layout state.
"""

from __future__ import annotations

import io
import logging
import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from reportlab.lib.units import mm
from reportlab.pdfgen.canvas import Canvas

from resume_builder.constants.layout_constants import HEADER_TOP, PAGE_HEIGHT, PAGE_WIDTH
from resume_builder.layout.cursor import PageCursor
from resume_builder.layout.metrics import TextMetrics
from resume_builder.layout.painter import PdfPainter
from resume_builder.layout.sections import (
    render_additional,
    render_education,
    render_experience,
    render_header,
    render_projects,
    render_skills,
    render_summary,
)
from resume_builder.services.photo import fetch_photo

if TYPE_CHECKING:
    from reportlab.lib.utils import ImageReader

    from resume_builder.services.resume_data import ResumeData

logger = logging.getLogger(__name__)

__all__ = [
    "GENERATION_FAILED_MESSAGE",
    "RenderedResume",
    "ResumeDocument",
    "ResumeGenerationError",
    "build_resume_pdf",
    "generate_resume",
    "render_resume",
    "resume_filename",
    "save_resume_document",
]

GENERATION_FAILED_MESSAGE = "Failed to generate PDF. Please try again."

PhotoLoader = Callable[[str | None], Awaitable["ImageReader | None"]]


class ResumeGenerationError(RuntimeError):
    """Raised when a resume document could not be produced."""


@dataclass(frozen=True)
class RenderedResume:
    content: bytes
    page_count: int


@dataclass(frozen=True)
class ResumeDocument:
    """A finished resume PDF ready to be saved or sent."""

    filename: str
    content: bytes
    page_count: int


def resume_filename(resume: ResumeData, override: str | None = None) -> str:
    """Return the download name for *resume*.

    Defaults to ``<Full_Name>_Resume.pdf``. An *override* is used as given
    (directory parts dropped) with ``.pdf`` appended when missing.
    """
    if override and override.strip():
        name = Path(override.strip()).name
        return name if name.lower().endswith(".pdf") else f"{name}.pdf"
    stem = re.sub(r"\s+", "_", resume.full_name)
    return f"{stem}_Resume.pdf"


def render_resume(resume: ResumeData, *, photo: ImageReader | None = None) -> RenderedResume:
    """Lay out *resume* in a single pass and return the PDF bytes."""
    buffer = io.BytesIO()
    canvas = Canvas(buffer, pagesize=(PAGE_WIDTH * mm, PAGE_HEIGHT * mm), invariant=True)
    canvas.setTitle(f"{resume.full_name} - Resume")
    canvas.setAuthor(resume.full_name)

    cursor = PageCursor(HEADER_TOP, on_new_page=canvas.showPage)
    painter = PdfPainter(canvas, cursor, TextMetrics())
    details = resume.personal_details

    render_header(painter, details, resume.full_name, photo)
    render_summary(painter, details.summary)
    render_experience(painter, resume.experience)
    render_education(painter, resume.education)
    render_skills(painter, resume.skills)
    render_projects(painter, resume.projects)
    render_additional(painter, resume.languages, resume.certificates)

    canvas.showPage()
    canvas.save()
    return RenderedResume(content=buffer.getvalue(), page_count=cursor.page)


def build_resume_pdf(resume: ResumeData, *, photo: ImageReader | None = None) -> bytes:
    return render_resume(resume, photo=photo).content


async def generate_resume(
    resume: ResumeData,
    *,
    filename: str | None = None,
    photo_loader: PhotoLoader = fetch_photo,
) -> ResumeDocument:
    """Fetch the optional photo, then build the resume PDF.

    Args:
        resume: Snapshot to render.
        filename: Optional download name override.
        photo_loader: Coroutine returning the decoded photo or ``None``. A
            loader that raises is treated as returning ``None``.

    Returns:
        The finished :class:`ResumeDocument`.

    Raises:
        ResumeGenerationError: If layout fails for any reason.
    """
    try:
        photo = await photo_loader(resume.personal_details.photo_url)
    except Exception as exc:
        logger.warning("Photo could not be loaded, rendering without it: %s", exc)
        photo = None

    try:
        rendered = render_resume(resume, photo=photo)
    except Exception as exc:
        logger.exception("Resume generation failed")
        raise ResumeGenerationError(GENERATION_FAILED_MESSAGE) from exc

    document = ResumeDocument(
        filename=resume_filename(resume, filename),
        content=rendered.content,
        page_count=rendered.page_count,
    )
    logger.info("Generated %s (%d page(s))", document.filename, document.page_count)
    return document


def save_resume_document(document: ResumeDocument, output_dir: Path) -> Path:
    """Write *document* into *output_dir* and return the file path."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / document.filename
    path.write_bytes(document.content)
    return path
