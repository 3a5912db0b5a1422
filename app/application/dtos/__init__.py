"""Application DTOs: use case inputs/outputs and the infrastructure context."""

from app.application.dtos.infrastructure import InfrastructureContext
from app.application.dtos.task import CreateTaskCommand
from app.application.dtos.upload import BlobReference, UploadImageCommand

__all__ = [
    "BlobReference",
    "CreateTaskCommand",
    "InfrastructureContext",
    "UploadImageCommand",
]
