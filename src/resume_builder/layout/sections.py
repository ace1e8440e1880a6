"""Section renderers for the resume PDF.

Every renderer takes the painter for the document being built plus its
slice of resume data and returns the cursor position it leaves behind. A
renderer whose data is empty draws nothing and leaves the cursor alone;
otherwise it reserves the standard gap, draws its header and emits entries
in input order, each followed by the inter-block gap.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from resume_builder.constants.layout_constants import (
    ACCENT_RGB,
    BLOCK_GAP,
    BUCKET_GAP,
    BUCKET_LEAD_GAP,
    COLUMN_GUTTER,
    CONTENT_WIDTH,
    GAP_BEFORE_SECTION,
    HEADER_LINE_GAP,
    INLINE_LABEL_GAP,
    MARGIN,
    MAX_CERTIFICATES,
    MAX_PROJECTS,
    PAGE_WIDTH,
    PHOTO_SIZE,
    PROJECT_NAME_GAP,
    SECTION_HEADER_PADDING,
    SEPARATOR,
    SUBLINE_GAP,
    TEXT_RGB,
    Align,
    FontSize,
    SectionTitle,
    SubHeading,
)
from resume_builder.layout.formatting import (
    format_date,
    format_date_range,
    strip_protocol,
    tel_href,
)
from resume_builder.layout.skill_groups import group_skills

if TYPE_CHECKING:
    from reportlab.lib.utils import ImageReader

    from resume_builder.layout.painter import InlineItem, PdfPainter
    from resume_builder.services.resume_data import (
        CertificateItem,
        EducationItem,
        ExperienceItem,
        LanguageItem,
        PersonalDetails,
        ProjectItem,
        SkillItem,
    )

__all__ = [
    "render_additional",
    "render_education",
    "render_experience",
    "render_header",
    "render_projects",
    "render_skills",
    "render_summary",
]

# Narrowest title column _title_row() keeps beside the date range.
_MIN_TITLE_WIDTH = 60.0


# ---------------------------------------------------------------------------
# Shared rows


def _open_section(painter: PdfPainter, title: str) -> None:
    painter.cursor.add_top_spacing(GAP_BEFORE_SECTION)
    painter.section_header(title)


def _title_row(painter: PdfPainter, title: str, dates: str) -> None:
    """Bold subheading on the left, date range flush right on its first line.

    A date range too wide to leave room for the title goes on its own
    right-aligned lines below the title instead.
    """
    metrics = painter.metrics
    cursor = painter.cursor
    line_height = metrics.line_height(FontSize.SUBHEADING)

    available = CONTENT_WIDTH
    if dates:
        available -= metrics.width(dates, FontSize.META) + INLINE_LABEL_GAP
    beside = available >= _MIN_TITLE_WIDTH
    if not beside:
        available = CONTENT_WIDTH
    lines = metrics.wrap(title, FontSize.SUBHEADING, available, bold=True) or [""]

    for index, line in enumerate(lines):
        cursor.ensure_space(line_height)
        painter.text(line, MARGIN, cursor.y, size=FontSize.SUBHEADING, bold=True)
        if index == 0 and dates and beside:
            painter.text(
                dates,
                MARGIN + CONTENT_WIDTH,
                cursor.y,
                size=FontSize.META,
                align=Align.RIGHT,
            )
        cursor.advance(line_height)

    if dates and not beside:
        meta_height = metrics.line_height(FontSize.META)
        for line in metrics.wrap(dates, FontSize.META, CONTENT_WIDTH):
            cursor.ensure_space(meta_height)
            painter.text(
                line,
                MARGIN + CONTENT_WIDTH,
                cursor.y,
                size=FontSize.META,
                align=Align.RIGHT,
            )
            cursor.advance(meta_height)


def _subtitle_row(painter: PdfPainter, name: str, location: str | None) -> None:
    """Accent-coloured organisation name with its location flush right."""
    metrics = painter.metrics
    cursor = painter.cursor
    line_height = metrics.line_height(FontSize.BODY)
    location = (location or "").strip()

    cursor.advance(SUBLINE_GAP)
    cursor.ensure_space(line_height)
    painter.text(name, MARGIN, cursor.y, color=ACCENT_RGB)
    if location:
        painter.text(
            location,
            MARGIN + CONTENT_WIDTH,
            cursor.y,
            size=FontSize.META,
            align=Align.RIGHT,
        )
    cursor.advance(line_height + SUBLINE_GAP)


def _entry_head_height(painter: PdfPainter) -> float:
    """Height of a title row plus subtitle row and one body line."""
    metrics = painter.metrics
    return (
        metrics.line_height(FontSize.SUBHEADING)
        + 2 * SUBLINE_GAP
        + 2 * metrics.line_height(FontSize.BODY)
    )


# ---------------------------------------------------------------------------
# Header


def _contact_items(details: PersonalDetails) -> list[InlineItem]:
    items: list[InlineItem] = []
    email = (details.email or "").strip()
    if email:
        items.append((email, f"mailto:{email}"))
    phone = (details.phone or "").strip()
    if phone:
        items.append((phone, tel_href(phone)))
    location = (details.location or "").strip()
    if location:
        items.append((location, None))
    return items


def _profile_links(details: PersonalDetails) -> list[InlineItem]:
    candidates = (
        ("LinkedIn", details.linked_in),
        ("GitHub", details.github),
        ("Portfolio", details.portfolio),
    )
    return [(label, url.strip()) for label, url in candidates if url and url.strip()]


def render_header(
    painter: PdfPainter,
    details: PersonalDetails,
    full_name: str,
    photo: ImageReader | None = None,
) -> float:
    """Centered name, contact line and profile links, plus an optional photo."""
    metrics = painter.metrics
    cursor = painter.cursor

    if photo is not None:
        painter.image(photo, PAGE_WIDTH - MARGIN - PHOTO_SIZE, MARGIN, PHOTO_SIZE, PHOTO_SIZE)

    painter.text(
        full_name,
        PAGE_WIDTH / 2,
        cursor.y,
        size=FontSize.NAME,
        bold=True,
        align=Align.CENTER,
    )
    cursor.advance(metrics.line_height(FontSize.NAME))

    for items in (_contact_items(details), _profile_links(details)):
        if items:
            lines = painter.inline_list(items, cursor.y)
            cursor.advance(lines * (metrics.line_height(FontSize.BODY) + HEADER_LINE_GAP))
    return cursor.y


# ---------------------------------------------------------------------------
# Summary, experience, education


def render_summary(painter: PdfPainter, summary: str | None) -> float:
    if not summary or not summary.strip():
        return painter.cursor.y

    _open_section(painter, SectionTitle.SUMMARY)
    painter.paragraph(summary)
    return painter.cursor.advance(BLOCK_GAP)


def render_experience(painter: PdfPainter, items: Sequence[ExperienceItem]) -> float:
    if not items:
        return painter.cursor.y

    _open_section(painter, SectionTitle.EXPERIENCE)
    for item in items:
        painter.cursor.ensure_space(_entry_head_height(painter))
        dates = format_date_range(item.start_date, item.end_date, item.current)
        _title_row(painter, item.job_title.strip() or "Job Title", dates)
        _subtitle_row(painter, item.company.strip() or "Company Name", item.location)
        painter.bullet_list(item.bullets)
        painter.cursor.advance(BLOCK_GAP)
    return painter.cursor.y


def render_education(painter: PdfPainter, items: Sequence[EducationItem]) -> float:
    if not items:
        return painter.cursor.y

    metrics = painter.metrics
    cursor = painter.cursor
    body_height = metrics.line_height(FontSize.BODY)

    _open_section(painter, SectionTitle.EDUCATION)
    for item in items:
        cursor.ensure_space(_entry_head_height(painter))
        dates = format_date_range(item.start_date, item.end_date, item.current)
        _title_row(painter, item.degree.strip() or "Degree", dates)
        _subtitle_row(painter, item.institution.strip() or "Institution", item.location)

        gpa = (item.gpa or "").strip()
        if gpa:
            cursor.ensure_space(body_height)
            painter.text(f"GPA: {gpa}", MARGIN, cursor.y)
            cursor.advance(body_height)
        if item.description and item.description.strip():
            painter.paragraph(item.description)
        cursor.advance(BLOCK_GAP)
    return cursor.y


# ---------------------------------------------------------------------------
# Skills and projects


def render_skills(painter: PdfPainter, skills: Sequence[SkillItem]) -> float:
    if not skills:
        return painter.cursor.y

    cursor = painter.cursor
    _open_section(painter, SectionTitle.SKILLS)
    for index, bucket in enumerate(group_skills(skills)):
        if index > 0:
            cursor.advance(BUCKET_LEAD_GAP)
        names = ", ".join(name.strip() for name in bucket.names if name.strip())
        painter.label_value(bucket.label, names)
        cursor.advance(BUCKET_GAP)
    return cursor.advance(BLOCK_GAP)


def render_projects(painter: PdfPainter, projects: Sequence[ProjectItem]) -> float:
    """Render at most the first four projects."""
    if not projects:
        return painter.cursor.y

    metrics = painter.metrics
    cursor = painter.cursor
    meta_height = metrics.line_height(FontSize.META)

    _open_section(painter, SectionTitle.PROJECTS)
    for project in projects[:MAX_PROJECTS]:
        cursor.ensure_space(
            metrics.line_height(FontSize.SUBHEADING)
            + PROJECT_NAME_GAP
            + metrics.line_height(FontSize.BODY)
        )
        dates = ""
        if project.start_date or project.end_date:
            dates = format_date_range(project.start_date, project.end_date)
        _title_row(painter, project.name.strip() or "Project Name", dates)
        cursor.advance(PROJECT_NAME_GAP)

        url = (project.url or "").strip()
        if url:
            cursor.ensure_space(meta_height)
            painter.link(strip_protocol(url), MARGIN, cursor.y, url, size=FontSize.META)
            cursor.advance(meta_height)
        if project.description.strip():
            painter.paragraph(project.description)

        technologies = [tech.strip() for tech in project.technologies if tech.strip()]
        if technologies:
            painter.label_value("Technologies", ", ".join(technologies))
        cursor.advance(BLOCK_GAP)
    return cursor.y


# ---------------------------------------------------------------------------
# Languages & certificates


@dataclass(frozen=True)
class _Row:
    """One pre-wrapped line of the additional section."""

    text: str
    size: float
    bold: bool = False
    url: str | None = None
    gap_after: float = 0.0


def _language_rows(
    painter: PdfPainter, languages: Sequence[LanguageItem], width: float
) -> list[_Row]:
    rows = [_Row(SubHeading.LANGUAGES, FontSize.SUBHEADING, bold=True, gap_after=SUBLINE_GAP)]
    for language in languages:
        text = f"{language.name.strip()} - {language.proficiency}"
        for line in painter.metrics.wrap(text, FontSize.BODY, width):
            rows.append(_Row(line, FontSize.BODY))
    return rows


def _certificate_rows(
    painter: PdfPainter, certificates: Sequence[CertificateItem], width: float
) -> list[_Row]:
    metrics = painter.metrics
    rows = [_Row(SubHeading.CERTIFICATES, FontSize.SUBHEADING, bold=True, gap_after=SUBLINE_GAP)]
    for certificate in certificates:
        url = (certificate.credential_url or "").strip() or None
        name = certificate.name.strip() or "Certificate"
        for line in metrics.wrap(name, FontSize.BODY, width, bold=True):
            rows.append(_Row(line, FontSize.BODY, bold=True, url=url))

        meta = [certificate.issuer.strip(), format_date(certificate.date_issued)]
        expiry = format_date(certificate.expiry_date)
        if expiry:
            meta.append(f"Expires {expiry}")
        meta_text = SEPARATOR.join(part for part in meta if part)
        for line in metrics.wrap(meta_text, FontSize.META, width):
            rows.append(_Row(line, FontSize.META))

        rows[-1] = replace(rows[-1], gap_after=SUBLINE_GAP)
    return rows


def _rows_height(painter: PdfPainter, rows: Sequence[_Row]) -> float:
    return sum(painter.metrics.line_height(row.size) + row.gap_after for row in rows)


def _draw_row(painter: PdfPainter, row: _Row, x: float, y: float) -> None:
    if row.url:
        painter.link(row.text, x, y, row.url, size=row.size, bold=row.bold)
    else:
        painter.text(row.text, x, y, size=row.size, bold=row.bold, color=TEXT_RGB)


def _draw_column(painter: PdfPainter, rows: Sequence[_Row], x: float, top: float) -> None:
    y = top
    for row in rows:
        _draw_row(painter, row, x, y)
        y += painter.metrics.line_height(row.size) + row.gap_after


def _draw_flowing(painter: PdfPainter, rows: Sequence[_Row]) -> None:
    cursor = painter.cursor
    for row in rows:
        line_height = painter.metrics.line_height(row.size)
        cursor.ensure_space(line_height)
        _draw_row(painter, row, MARGIN, cursor.y)
        cursor.advance(line_height + row.gap_after)


def render_additional(
    painter: PdfPainter,
    languages: Sequence[LanguageItem],
    certificates: Sequence[CertificateItem],
) -> float:
    """Languages and certificates under one ``Additional`` header.

    With both lists present the two blocks sit side by side, on the same
    page as the header, when the header and the taller block fit on one
    page; otherwise they are stacked, languages first. At most ten
    certificates are shown.
    """
    certificates = certificates[:MAX_CERTIFICATES]
    if not languages and not certificates:
        return painter.cursor.y

    cursor = painter.cursor
    if languages and certificates:
        column_width = (CONTENT_WIDTH - COLUMN_GUTTER) / 2
        left = _language_rows(painter, languages, column_width)
        right = _certificate_rows(painter, certificates, column_width)
        height = max(_rows_height(painter, left), _rows_height(painter, right))
        header_height = (
            painter.metrics.line_height(FontSize.SECTION_TITLE) + SECTION_HEADER_PADDING
        )
        if header_height + height <= cursor.limit - cursor.top_margin:
            cursor.add_top_spacing(GAP_BEFORE_SECTION)
            # Header and both columns move to the next page together.
            cursor.ensure_space(header_height + height)
            painter.section_header(SectionTitle.ADDITIONAL)
            _draw_column(painter, left, MARGIN, cursor.y)
            _draw_column(painter, right, MARGIN + column_width + COLUMN_GUTTER, cursor.y)
            cursor.advance(height)
            return cursor.advance(BLOCK_GAP)

    _open_section(painter, SectionTitle.ADDITIONAL)
    if languages:
        _draw_flowing(painter, _language_rows(painter, languages, CONTENT_WIDTH))
        if certificates:
            cursor.advance(BLOCK_GAP)
    if certificates:
        _draw_flowing(painter, _certificate_rows(painter, certificates, CONTENT_WIDTH))
    return cursor.advance(BLOCK_GAP)
