"""Task use cases."""

from app.application.use_cases.tasks.create_task import TaskIngestionService

__all__ = ["TaskIngestionService"]
