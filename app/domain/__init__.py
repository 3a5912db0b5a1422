"""Domain layer: task entity, event envelope, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import TaskEntity
from app.domain.enums import EventType, ResourceKind, ResourceStatus
from app.domain.exceptions import (
    BootstrapException,
    FanoutException,
    PersistenceException,
    TaskIntakeException,
    ValidationException,
)
from app.domain.value_objects import TaskEventEnvelope

__all__ = [
    # Entities
    "TaskEntity",
    # Enums
    "EventType",
    "ResourceKind",
    "ResourceStatus",
    # Exceptions
    "BootstrapException",
    "FanoutException",
    "PersistenceException",
    "TaskIntakeException",
    "ValidationException",
    # Value objects
    "TaskEventEnvelope",
]
