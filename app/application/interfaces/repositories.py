"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.entities.task import TaskEntity


class ITaskRepository(Protocol):
    """Protocol for task persistence (single put-by-key)."""

    async def put(self, task: TaskEntity) -> None:
        """Persist the task keyed by its identity (last write wins)."""
