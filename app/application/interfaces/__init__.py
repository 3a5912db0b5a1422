"""Application interfaces (ports): backends, repositories, and services."""

from app.application.interfaces.backends import (
    IBlobStore,
    IQueueService,
    ITableStore,
    ITopicService,
)
from app.application.interfaces.repositories import ITaskRepository
from app.application.interfaces.services import IEventPublisher

__all__ = [
    "IBlobStore",
    "IEventPublisher",
    "IQueueService",
    "ITableStore",
    "ITaskRepository",
    "ITopicService",
]
