"""Font measurement and word wrapping for the PDF layout.

Widths are measured with reportlab's AFM metrics for the standard Type-1
fonts and reported in millimetres so the rest of the layout never deals
with points.
"""

from __future__ import annotations

from reportlab.pdfbase.pdfmetrics import stringWidth

from resume_builder.constants.layout_constants import (
    FONT_BOLD,
    FONT_REGULAR,
    LINE_HEIGHT_FACTOR,
    PT_TO_MM,
)

__all__ = ["TextMetrics"]


class TextMetrics:
    """Measure and wrap text for one regular/bold font pair."""

    def __init__(
        self,
        regular_font: str = FONT_REGULAR,
        bold_font: str = FONT_BOLD,
        line_height_factor: float = LINE_HEIGHT_FACTOR,
    ) -> None:
        self.regular_font = regular_font
        self.bold_font = bold_font
        self.line_height_factor = line_height_factor

    def font_name(self, bold: bool = False) -> str:
        return self.bold_font if bold else self.regular_font

    def width(self, text: str, size: float, bold: bool = False) -> float:
        """Rendered width of *text* in millimetres."""
        if not text:
            return 0.0
        return stringWidth(text, self.font_name(bold), size) * PT_TO_MM

    def line_height(self, size: float) -> float:
        """Vertical advance for one line set at *size* points."""
        return size * self.line_height_factor * PT_TO_MM

    def wrap(
        self,
        text: str,
        size: float,
        max_width: float,
        bold: bool = False,
    ) -> list[str]:
        """Break *text* into lines no wider than *max_width*.

        Lines break at whitespace; newlines force a break and blank lines are
        dropped. A word that cannot fit on a line by itself is split between
        characters.

        Raises:
            ValueError: If *max_width* is not positive.
        """
        if max_width <= 0:
            raise ValueError(f"max_width must be positive, got {max_width!r}")

        lines: list[str] = []
        for paragraph in text.splitlines():
            current = ""
            for word in paragraph.split():
                candidate = f"{current} {word}" if current else word
                if self.width(candidate, size, bold) <= max_width:
                    current = candidate
                    continue

                if current:
                    lines.append(current)
                if self.width(word, size, bold) <= max_width:
                    current = word
                else:
                    pieces = self._split_word(word, size, max_width, bold)
                    lines.extend(pieces[:-1])
                    current = pieces[-1]
            if current:
                lines.append(current)
        return lines

    def _split_word(
        self,
        word: str,
        size: float,
        max_width: float,
        bold: bool,
    ) -> list[str]:
        pieces: list[str] = []
        chunk = ""
        for char in word:
            if chunk and self.width(chunk + char, size, bold) > max_width:
                pieces.append(chunk)
                chunk = char
            else:
                chunk += char
        pieces.append(chunk)
        return pieces
