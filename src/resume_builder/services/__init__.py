"""Services"""

from resume_builder.services.resume_data import ResumeData
from resume_builder.services.resume_generator import (
    ResumeDocument,
    ResumeGenerationError,
    build_resume_pdf,
    generate_resume,
    resume_filename,
    save_resume_document,
)
from resume_builder.services.resume_store import (
    ResumeNotFoundError,
    create_resume,
    delete_resume,
    get_resume,
    load_resume_data,
    update_resume,
)

__all__ = [
    "ResumeData",
    "ResumeDocument",
    "ResumeGenerationError",
    "build_resume_pdf",
    "generate_resume",
    "resume_filename",
    "save_resume_document",
    "ResumeNotFoundError",
    "create_resume",
    "delete_resume",
    "get_resume",
    "load_resume_data",
    "update_resume",
]
