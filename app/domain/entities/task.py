"""Task domain entity.

A task is immutable once created: identity and creation timestamp are fixed
at persistence time and no update or delete operations exist.
"""

from dataclasses import dataclass
from typing import Any

from app.domain.exceptions import ValidationException


@dataclass(frozen=True)
class TaskEntity:
    """Immutable task record.

    Validation runs on construction. `to_item()` gives the stored and
    published shape, keyed by `taskId` (the table hash key).
    """

    task_id: str
    title: str
    description: str
    image_key: str | None
    created_at: str

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Enforce non-empty identity, title and timestamp.

        Raises:
            ValidationException: If a required field is empty.
        """
        if not self.task_id or not self.task_id.strip():
            raise ValidationException("taskId must be a non-empty string", field="taskId")
        if not self.title or not self.title.strip():
            raise ValidationException("title is required", field="title")
        if not self.created_at:
            raise ValidationException("createdAt is required", field="createdAt")

    def to_item(self) -> dict[str, Any]:
        """Return the persisted/wire representation (camelCase keys)."""
        return {
            "taskId": self.task_id,
            "title": self.title,
            "description": self.description,
            "imageKey": self.image_key,
            "createdAt": self.created_at,
        }
