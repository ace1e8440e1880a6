"""Liveness route for the resume service."""

from __future__ import annotations

from fastapi import APIRouter

SERVICE_NAME = "resume-builder"

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict[str, str]:
    """Report that the resume service is up and which service answered."""
    return {"status": "healthy", "service": SERVICE_NAME}
