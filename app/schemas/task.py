"""Task API schemas. Field names are camelCase on the wire."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TaskCreateRequest(BaseModel):
    """Payload for creating a task.

    title is optional here so that a missing title is reported by the use
    case as a 400 validation error rather than a 422 schema error.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    description: str | None = None
    task_id: str | None = Field(default=None, description="Caller-supplied id (overwrites on collision)")
    image_key: str | None = Field(default=None, description="Key returned by POST /upload")


class TaskResponse(BaseModel):
    """Stored task record."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    task_id: str
    title: str
    description: str
    image_key: str | None = None
    created_at: str = Field(..., description="ISO-8601 UTC, millisecond precision")


class TaskCreatedResponse(BaseModel):
    """Response for POST /tasks."""

    ok: bool = True
    task: TaskResponse
