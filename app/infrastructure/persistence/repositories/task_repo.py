"""Task repository over the table store (implements ITaskRepository)."""

from __future__ import annotations

from app.application.interfaces.backends import ITableStore
from app.domain.entities.task import TaskEntity


class TaskRepository:
    """Persists tasks as items of a single hash-keyed table.

    Overwrite semantics: a put with an existing taskId replaces the item.
    Backend failures surface as TableStoreError.
    """

    def __init__(self, table_store: ITableStore, table_name: str) -> None:
        self.table_store = table_store
        self.table_name = table_name

    async def put(self, task: TaskEntity) -> None:
        """Write the task item keyed by taskId."""
        await self.table_store.put(self.table_name, task.to_item())
