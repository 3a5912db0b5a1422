"""Health check API schemas."""

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    ok: bool = Field(default=True, description="Service is up")


class ResourceOutcomeResponse(BaseModel):
    """One bootstrap step as reported on GET /health/ready."""

    kind: str = Field(..., description="table, bucket, topic or queue")
    name: str
    status: str = Field(..., description="created, exists, ensured or failed")
    identifier: str | None = None
    error: str | None = None
    details: dict[str, Any] | None = None


class ReadinessResponse(BaseModel):
    """Response for GET /health/ready (200 when ok, 503 otherwise)."""

    ok: bool = Field(..., description="Every bootstrap step succeeded")
    resources: list[ResourceOutcomeResponse] = Field(default_factory=list)
