"""Persistence service for resume records.

Sections are stored in the camelCase JSON shape of
:mod:`resume_builder.services.resume_data` so records round-trip with the
web client unchanged.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from resume_builder.data.db import get_session
from resume_builder.data.models import ResumeRecord
from resume_builder.services.resume_data import ResumeData

logger = logging.getLogger(__name__)

__all__ = [
    "ResumeNotFoundError",
    "SECTION_FIELDS",
    "create_resume",
    "delete_resume",
    "dump_section",
    "get_resume",
    "load_resume_data",
    "update_resume",
]

SECTION_FIELDS = (
    "personal_details",
    "experience",
    "education",
    "skills",
    "projects",
    "languages",
    "certificates",
)


class ResumeNotFoundError(LookupError):
    """Raised when no resume exists for the requested id."""


def dump_section(value: Any) -> Any:
    """Convert a section (model or list of models) into storable JSON."""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    if isinstance(value, list):
        return [dump_section(item) for item in value]
    return value


def _record_to_dict(record: ResumeRecord) -> dict[str, Any]:
    data: dict[str, Any] = {"id": record.id}
    for field in SECTION_FIELDS:
        data[field] = getattr(record, field)
    data["created_at"] = record.created_at
    data["updated_at"] = record.updated_at
    return data


def create_resume(resume: ResumeData) -> dict[str, Any]:
    """Store *resume* as a new record and return it with its generated id."""
    with get_session() as session:
        record = ResumeRecord(
            **{field: dump_section(getattr(resume, field)) for field in SECTION_FIELDS}
        )
        session.add(record)
        session.flush()
        logger.info("Created resume %s", record.id)
        return _record_to_dict(record)


def get_resume(resume_id: str) -> dict[str, Any] | None:
    with get_session() as session:
        record = session.get(ResumeRecord, resume_id)
        if record is None:
            return None
        return _record_to_dict(record)


def update_resume(resume_id: str, updates: dict[str, Any]) -> dict[str, Any] | None:
    """Replace the sections named in *updates*, leaving the others untouched.

    Args:
        resume_id: Record to update.
        updates: Mapping of section field name to its new value. Unknown keys
            are ignored.

    Returns:
        The updated record, or ``None`` if *resume_id* does not exist.
    """
    with get_session() as session:
        record = session.get(ResumeRecord, resume_id)
        if record is None:
            return None
        for field, value in updates.items():
            if field in SECTION_FIELDS:
                setattr(record, field, dump_section(value))
        session.flush()
        return _record_to_dict(record)


def delete_resume(resume_id: str) -> bool:
    with get_session() as session:
        record = session.get(ResumeRecord, resume_id)
        if record is None:
            return False
        session.delete(record)
        logger.info("Deleted resume %s", resume_id)
        return True


def load_resume_data(resume_id: str) -> ResumeData:
    """Return the stored resume as :class:`ResumeData`.

    Raises:
        ResumeNotFoundError: If *resume_id* does not exist.
    """
    stored = get_resume(resume_id)
    if stored is None:
        raise ResumeNotFoundError(f"Resume {resume_id!r} not found")
    sections = {field: stored[field] for field in SECTION_FIELDS if stored[field] is not None}
    return ResumeData.model_validate(sections)
