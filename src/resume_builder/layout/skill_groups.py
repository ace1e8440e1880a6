"""Case-insensitive grouping of skills into labelled category buckets."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from resume_builder.constants.layout_constants import FALLBACK_CATEGORY

if TYPE_CHECKING:
    from resume_builder.services.resume_data import SkillItem

__all__ = ["CategoryBucket", "group_skills", "normalize_category"]


@dataclass
class CategoryBucket:
    """Skills sharing one normalized category, in input order."""

    label: str
    skills: list[SkillItem] = field(default_factory=list)

    @property
    def names(self) -> list[str]:
        return [skill.name for skill in self.skills]


def normalize_category(value: str | None) -> str:
    """NFKC-normalize *value*, collapse inner whitespace and trim it."""
    if not value:
        return ""
    return " ".join(unicodedata.normalize("NFKC", value).split())


def _has_upper(text: str) -> bool:
    return any(char.isupper() for char in text)


def group_skills(skills: Iterable[SkillItem]) -> list[CategoryBucket]:
    """Bucket *skills* by category, ignoring case and spacing differences.

    Buckets keep the order in which their category was first seen. A bucket
    is labelled with the first spelling encountered; any later spelling that
    contains capitals replaces it, so the last capitalized spelling wins and
    an all-lowercase spelling never replaces one with capitals. Blank
    categories fall into a bucket labelled ``Category``.
    """
    buckets: dict[str, CategoryBucket] = {}
    for skill in skills:
        display = normalize_category(skill.category) or FALLBACK_CATEGORY
        key = display.lower()

        bucket = buckets.get(key)
        if bucket is None:
            buckets[key] = CategoryBucket(label=display, skills=[skill])
            continue

        if _has_upper(display):
            bucket.label = display
        bucket.skills.append(skill)
    return list(buckets.values())
