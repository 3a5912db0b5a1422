"""Domain enumerations for the task intake service.

Enums represent fixed sets of domain values (event types, infrastructure
resource kinds, ensure outcomes).
"""

from enum import Enum


class EventType(str, Enum):
    """Event types emitted by the service. Only task creation exists."""

    TASK_CREATED = "TASK_CREATED"


class ResourceKind(str, Enum):
    """Kinds of infrastructure resources ensured at startup."""

    TABLE = "table"
    BUCKET = "bucket"
    TOPIC = "topic"
    QUEUE = "queue"


class ResourceStatus(str, Enum):
    """Outcome of a single ensure-step.

    ENSURED is used for idempotent create calls (topic, queue) whose result
    does not tell whether the resource was just created or already there.
    """

    CREATED = "created"
    EXISTS = "exists"
    ENSURED = "ensured"
    FAILED = "failed"
