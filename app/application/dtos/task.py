"""DTOs for the task ingestion use case (no dependency on boto3 or presentation schemas)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateTaskCommand:
    """Input for creating a task. Use case assigns identity/timestamp when absent and returns TaskEntity."""

    title: str | None
    description: str | None = None
    task_id: str | None = None
    image_key: str | None = None
