"""Page layout primitives and section renderers for resume PDFs."""

from resume_builder.layout.cursor import PageCursor
from resume_builder.layout.metrics import TextMetrics
from resume_builder.layout.painter import PdfPainter
from resume_builder.layout.skill_groups import CategoryBucket, group_skills

__all__ = [
    "CategoryBucket",
    "PageCursor",
    "PdfPainter",
    "TextMetrics",
    "group_skills",
]
