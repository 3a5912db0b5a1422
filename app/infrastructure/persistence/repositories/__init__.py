"""Repositories: task persistence over the DynamoDB table store."""

from app.infrastructure.persistence.repositories.task_repo import TaskRepository

__all__ = ["TaskRepository"]
