"""Page geometry, typography and spacing for the resume PDF layout.

All distances are millimetres measured from the top-left corner of an A4
page. Font sizes are in points.
"""

from __future__ import annotations

from enum import StrEnum

# ---------------------------------------------------------------------------
# Page geometry

PAGE_WIDTH = 210.0
PAGE_HEIGHT = 297.0
MARGIN = 15.0
CONTENT_WIDTH = PAGE_WIDTH - 2 * MARGIN
HEADER_TOP = 20.0

# ---------------------------------------------------------------------------
# Typography

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"

LINE_HEIGHT_FACTOR = 1.15
PT_TO_MM = 25.4 / 72


class FontSize:
    """Point sizes used throughout the document."""

    NAME = 22
    SECTION_TITLE = 13
    SUBHEADING = 11
    BODY = 10
    META = 9


ACCENT_RGB = (37, 99, 235)
TEXT_RGB = (0, 0, 0)

# ---------------------------------------------------------------------------
# Spacing

GAP_BEFORE_SECTION = 6.0
SECTION_RULE_OFFSET = 2.0
SECTION_HEADER_PADDING = 2.0
BLOCK_GAP = 4.0
SUBLINE_GAP = 1.0
BULLET_INDENT = 5.0
BULLET_GAP = 1.0
INLINE_LABEL_GAP = 2.0
BUCKET_GAP = 1.0
BUCKET_LEAD_GAP = 2.0
PROJECT_NAME_GAP = 1.0
HEADER_LINE_GAP = 1.0
COLUMN_GUTTER = 10.0
PHOTO_SIZE = 25.0

# ---------------------------------------------------------------------------
# Glyphs and labels

BULLET_GLYPH = "•"
SEPARATOR = " • "
PLACEHOLDER_NAME = "Your Name"
FALLBACK_CATEGORY = "Category"

MAX_PROJECTS = 4
MAX_CERTIFICATES = 10


class SectionTitle(StrEnum):
    """Titles printed above each resume section."""

    SUMMARY = "Professional Summary"
    EXPERIENCE = "Professional Experience"
    EDUCATION = "Education"
    SKILLS = "Technical Skills"
    PROJECTS = "Notable Projects"
    ADDITIONAL = "Additional"


class Align(StrEnum):
    """Horizontal anchoring of a text run relative to its x coordinate."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class SubHeading(StrEnum):
    """Bold sub-headings inside the combined additional section."""

    LANGUAGES = "Languages"
    CERTIFICATES = "Certifications"
