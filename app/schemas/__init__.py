"""API request/response schemas (Pydantic). Used by endpoints only."""

from app.schemas.health import (
    HealthResponse,
    ReadinessResponse,
    ResourceOutcomeResponse,
)
from app.schemas.task import TaskCreateRequest, TaskCreatedResponse, TaskResponse
from app.schemas.upload import UploadBase64Request, UploadResponse

__all__ = [
    "HealthResponse",
    "ReadinessResponse",
    "ResourceOutcomeResponse",
    "TaskCreateRequest",
    "TaskCreatedResponse",
    "TaskResponse",
    "UploadBase64Request",
    "UploadResponse",
]
