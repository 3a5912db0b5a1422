"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.entities.task import TaskEntity


class IEventPublisher(Protocol):
    """Protocol for emitting task lifecycle events."""

    async def publish_created(self, task: TaskEntity) -> None:
        """Emit TASK_CREATED for a stored task. Raises FanoutException on failure."""
