"""Route handlers for the API."""

from resume_builder.api.routes import ai, health, resumes

__all__ = [
    "ai",
    "health",
    "resumes",
]
