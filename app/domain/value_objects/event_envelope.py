"""Event envelope value object for task fan-out."""

import json
from dataclasses import dataclass, field
from typing import Any

from app.domain.entities.task import TaskEntity
from app.domain.enums import EventType


@dataclass(frozen=True)
class TaskEventEnvelope:
    """Discriminated event payload: {"type": ..., "payload": <task item>}.

    The same envelope text is sent to the topic and to the queue.
    """

    type: EventType
    payload: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def task_created(cls, task: TaskEntity) -> "TaskEventEnvelope":
        """Envelope announcing a newly stored task."""
        return cls(type=EventType.TASK_CREATED, payload=task.to_item())

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "payload": self.payload}

    def to_json(self) -> str:
        """Serialize to the message body text."""
        return json.dumps(self.to_dict())
