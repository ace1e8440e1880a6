from __future__ import annotations

from resume_builder.constants.layout_constants import (
    ACCENT_RGB,
    CONTENT_WIDTH,
    MARGIN,
    PAGE_HEIGHT,
    PAGE_WIDTH,
    Align,
    FontSize,
    SectionTitle,
)

__all__ = [
    "ACCENT_RGB",
    "CONTENT_WIDTH",
    "MARGIN",
    "PAGE_HEIGHT",
    "PAGE_WIDTH",
    "Align",
    "FontSize",
    "SectionTitle",
]
