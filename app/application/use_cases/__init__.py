"""Application use cases: one entry point per workflow."""

from app.application.use_cases.tasks import TaskIngestionService
from app.application.use_cases.uploads import ImageUploadService

__all__ = [
    "ImageUploadService",
    "TaskIngestionService",
]
