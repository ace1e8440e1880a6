"""Resume routes for the API."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, HTTPException, status
from fastapi import Path as PathParam

from resume_builder.api.schemas.resumes import ResumeResponse, ResumeUpdateRequest
from resume_builder.services.resume_data import ResumeData
from resume_builder.services.resume_store import (
    create_resume,
    delete_resume,
    get_resume,
    update_resume,
)

router = APIRouter(prefix="/resumes", tags=["resumes"])


def _not_found(resume_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Resume {resume_id} not found",
    )


def _to_response(record: dict[str, Any]) -> ResumeResponse:
    # Sections never written are stored as NULL; let the model defaults apply.
    return ResumeResponse.model_validate({k: v for k, v in record.items() if v is not None})


@router.post(
    "",
    response_model=ResumeResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_resume_endpoint(data: ResumeData) -> ResumeResponse:
    """Store a new resume snapshot."""
    return _to_response(create_resume(data))


@router.get("/{resume_id}", response_model=ResumeResponse)
def get_resume_endpoint(
    resume_id: Annotated[str, PathParam(description="Resume ID")],
) -> ResumeResponse:
    """Get a stored resume by id."""
    result = get_resume(resume_id)
    if result is None:
        raise _not_found(resume_id)
    return _to_response(result)


@router.patch("/{resume_id}", response_model=ResumeResponse)
def update_resume_endpoint(
    resume_id: Annotated[str, PathParam(description="Resume ID")],
    data: ResumeUpdateRequest,
) -> ResumeResponse:
    """Partial update of a resume. Sections left out of the body are kept."""
    updates = {
        field: getattr(data, field)
        for field in data.model_fields_set
        if getattr(data, field) is not None
    }
    result = update_resume(resume_id, updates)
    if result is None:
        raise _not_found(resume_id)
    return _to_response(result)


@router.delete("/{resume_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_resume_endpoint(
    resume_id: Annotated[str, PathParam(description="Resume ID")],
) -> None:
    """Delete a stored resume."""
    if not delete_resume(resume_id):
        raise _not_found(resume_id)
