"""Domain value objects."""

from app.domain.value_objects.event_envelope import TaskEventEnvelope

__all__ = ["TaskEventEnvelope"]
