"""Drawing primitives for the resume layout.

Positions handed to :class:`PdfPainter` are millimetres from the top-left
corner with ``y`` on the text baseline. The painter converts them to
reportlab's bottom-left point coordinates when it touches the canvas.

Primitives that take an explicit position (``text``, ``link``, ``rule``,
``inline_list``) never move the cursor. Flowing blocks (``section_header``,
``paragraph``, ``bullet_list``, ``label_value``) start at the cursor, break
pages line by line and return the cursor position they leave behind.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import getAscentDescent

from resume_builder.constants.layout_constants import (
    ACCENT_RGB,
    BULLET_GAP,
    BULLET_GLYPH,
    BULLET_INDENT,
    CONTENT_WIDTH,
    HEADER_LINE_GAP,
    INLINE_LABEL_GAP,
    MARGIN,
    PAGE_HEIGHT,
    PAGE_WIDTH,
    SECTION_HEADER_PADDING,
    SECTION_RULE_OFFSET,
    SEPARATOR,
    TEXT_RGB,
    Align,
    FontSize,
)
from resume_builder.layout.formatting import normalize_url

if TYPE_CHECKING:
    from reportlab.lib.utils import ImageReader
    from reportlab.pdfgen.canvas import Canvas

    from resume_builder.layout.cursor import PageCursor
    from resume_builder.layout.metrics import TextMetrics

__all__ = ["InlineItem", "PdfPainter"]

# (label, url or None)
InlineItem = tuple[str, str | None]
# (label, url or None, width in mm)
_PlacedItem = tuple[str, str | None, float]

# Narrowest value column label_value() will wrap into beside its label.
_MIN_VALUE_WIDTH = 30.0
_RULE_WIDTH_PT = 0.5


def _rgb(color: tuple[int, int, int]) -> tuple[float, float, float]:
    r, g, b = color
    return r / 255, g / 255, b / 255


class PdfPainter:
    """Place text, rules, images and link regions on a reportlab canvas."""

    def __init__(self, canvas: Canvas, cursor: PageCursor, metrics: TextMetrics) -> None:
        self.canvas = canvas
        self.cursor = cursor
        self.metrics = metrics

    # ------------------------------------------------------------------
    # Positioned primitives
    # ------------------------------------------------------------------

    def text(
        self,
        text: str,
        x: float,
        y: float,
        *,
        size: float = FontSize.BODY,
        bold: bool = False,
        color: tuple[int, int, int] = TEXT_RGB,
        align: Align = Align.LEFT,
    ) -> float:
        """Draw one run of *text* anchored at *x* and return its left edge."""
        width = self.metrics.width(text, size, bold)
        if align == Align.CENTER:
            left = x - width / 2
        elif align == Align.RIGHT:
            left = x - width
        else:
            left = x
        if text:
            self.canvas.setFont(self.metrics.font_name(bold), size)
            self.canvas.setFillColorRGB(*_rgb(color))
            self.canvas.drawString(left * mm, (PAGE_HEIGHT - y) * mm, text)
        return left

    def link(
        self,
        text: str,
        x: float,
        y: float,
        url: str,
        *,
        size: float = FontSize.BODY,
        bold: bool = False,
        color: tuple[int, int, int] = ACCENT_RGB,
        align: Align = Align.LEFT,
    ) -> float:
        """Draw *text* and make its bounding box open *url* when clicked."""
        left = self.text(text, x, y, size=size, bold=bold, color=color, align=align)
        target = normalize_url(url)
        if text and target:
            font = self.metrics.font_name(bold)
            ascent, descent = getAscentDescent(font, size)
            baseline = (PAGE_HEIGHT - y) * mm
            right = left + self.metrics.width(text, size, bold)
            self.canvas.linkURL(
                target,
                (left * mm, baseline + descent, right * mm, baseline + ascent),
                relative=0,
                thickness=0,
            )
        return left

    def rule(
        self,
        x1: float,
        x2: float,
        y: float,
        *,
        color: tuple[int, int, int] = ACCENT_RGB,
    ) -> None:
        self.canvas.setStrokeColorRGB(*_rgb(color))
        self.canvas.setLineWidth(_RULE_WIDTH_PT)
        pdf_y = (PAGE_HEIGHT - y) * mm
        self.canvas.line(x1 * mm, pdf_y, x2 * mm, pdf_y)

    def image(self, image: ImageReader, x: float, top: float, width: float, height: float) -> None:
        """Draw *image* scaled into the box whose top-left corner is (*x*, *top*)."""
        self.canvas.drawImage(
            image,
            x * mm,
            (PAGE_HEIGHT - top - height) * mm,
            width * mm,
            height * mm,
            preserveAspectRatio=True,
            anchor="c",
            mask="auto",
        )

    def inline_list(
        self,
        items: Sequence[InlineItem],
        y: float,
        *,
        size: float = FontSize.BODY,
    ) -> int:
        """Center *items* on the page joined by the separator glyph.

        Items with a url are drawn as links, the rest as plain text. A run
        wider than the content area continues on further centered lines,
        each ``HEADER_LINE_GAP`` below the previous one; an item wider than
        the content area on its own starts at the left margin.

        Returns:
            Number of lines drawn.
        """
        items = [(label, url) for label, url in items if label]
        if not items:
            return 0

        separator_width = self.metrics.width(SEPARATOR, size)
        line_step = self.metrics.line_height(size) + HEADER_LINE_GAP
        lines = self._inline_lines(items, size, separator_width)
        for number, (line, total) in enumerate(lines):
            line_y = y + number * line_step
            x = max(MARGIN, (PAGE_WIDTH - total) / 2)
            for index, (label, url, width) in enumerate(line):
                if index > 0:
                    self.text(SEPARATOR, x, line_y, size=size)
                    x += separator_width
                if url:
                    self.link(label, x, line_y, url, size=size)
                else:
                    self.text(label, x, line_y, size=size)
                x += width
        return len(lines)

    def _inline_lines(
        self,
        items: Sequence[InlineItem],
        size: float,
        separator_width: float,
    ) -> list[tuple[list[_PlacedItem], float]]:
        lines: list[tuple[list[_PlacedItem], float]] = []
        current: list[_PlacedItem] = []
        total = 0.0
        for label, url in items:
            width = self.metrics.width(label, size)
            if current and total + separator_width + width > CONTENT_WIDTH:
                lines.append((current, total))
                current, total = [], 0.0
            total += width + (separator_width if current else 0.0)
            current.append((label, url, width))
        lines.append((current, total))
        return lines

    # ------------------------------------------------------------------
    # Flowing blocks
    # ------------------------------------------------------------------

    def section_header(self, title: str) -> float:
        """Draw an uppercase title with an accent rule spanning the content width."""
        title_height = self.metrics.line_height(FontSize.SECTION_TITLE)
        # Keep the header on the same page as the first line below it.
        self.cursor.ensure_space(
            title_height + SECTION_HEADER_PADDING + self.metrics.line_height(FontSize.BODY)
        )
        y = self.cursor.y
        self.text(title.upper(), MARGIN, y, size=FontSize.SECTION_TITLE, bold=True)
        self.rule(MARGIN, MARGIN + CONTENT_WIDTH, y + SECTION_RULE_OFFSET)
        return self.cursor.advance(title_height + SECTION_HEADER_PADDING)

    def paragraph(
        self,
        text: str,
        *,
        x: float = MARGIN,
        width: float = CONTENT_WIDTH,
        size: float = FontSize.BODY,
        bold: bool = False,
        color: tuple[int, int, int] = TEXT_RGB,
    ) -> float:
        line_height = self.metrics.line_height(size)
        for line in self.metrics.wrap(text, size, width, bold):
            self.cursor.ensure_space(line_height)
            self.text(line, x, self.cursor.y, size=size, bold=bold, color=color)
            self.cursor.advance(line_height)
        return self.cursor.y

    def bullet_list(
        self,
        items: Iterable[str],
        *,
        x: float = MARGIN,
        width: float = CONTENT_WIDTH,
        size: float = FontSize.BODY,
    ) -> float:
        line_height = self.metrics.line_height(size)
        for item in items:
            lines = self.metrics.wrap(item, size, width - BULLET_INDENT)
            if not lines:
                continue
            for index, line in enumerate(lines):
                self.cursor.ensure_space(line_height)
                if index == 0:
                    self.text(BULLET_GLYPH, x, self.cursor.y, size=size)
                self.text(line, x + BULLET_INDENT, self.cursor.y, size=size)
                self.cursor.advance(line_height)
            self.cursor.advance(BULLET_GAP)
        return self.cursor.y

    def label_value(
        self,
        label: str,
        value: str,
        *,
        x: float = MARGIN,
        width: float = CONTENT_WIDTH,
        size: float = FontSize.BODY,
    ) -> float:
        """Draw ``label:`` in bold followed by *value* wrapped beside it.

        The first value line shares the label's baseline; continuation lines
        align with the start of the value, not with the label.
        """
        line_height = self.metrics.line_height(size)
        label_text = f"{label}:"
        offset = self.metrics.width(label_text, size, bold=True) + INLINE_LABEL_GAP
        value_x = x + offset
        value_width = width - offset
        inline = value_width >= _MIN_VALUE_WIDTH
        if not inline:
            value_x, value_width = x, width

        self.cursor.ensure_space(line_height)
        self.text(label_text, x, self.cursor.y, size=size, bold=True)
        lines = self.metrics.wrap(value, size, value_width)
        if lines and not inline:
            self.cursor.advance(line_height)
        for index, line in enumerate(lines):
            if index > 0:
                self.cursor.advance(line_height)
            self.cursor.ensure_space(line_height)
            self.text(line, value_x, self.cursor.y, size=size)
        return self.cursor.advance(line_height)
