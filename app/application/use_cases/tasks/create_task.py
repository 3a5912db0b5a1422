"""Task ingestion use case: validate, assign identity, persist, fan out."""

from __future__ import annotations

from collections.abc import Callable

from app.application.dtos.task import CreateTaskCommand
from app.application.interfaces.repositories import ITaskRepository
from app.application.interfaces.services import IEventPublisher
from app.domain.entities.task import TaskEntity
from app.domain.exceptions import PersistenceException, ValidationException
from app.shared.telemetry.logging import get_logger
from app.shared.telemetry.tracing import add_span_attributes, traced
from app.shared.utils.datetime import utc_now_iso
from app.shared.utils.generators import generate_id

logger = get_logger(__name__)


class TaskIngestionService:
    """Creates tasks: one put to the repository, then TASK_CREATED fan-out.

    Persistence happens-before fan-out. A failed put means no event is
    emitted. A failed fan-out still fails the request although the task is
    already stored (at-least-once is not guaranteed; the event can be lost).
    """

    def __init__(
        self,
        task_repo: ITaskRepository,
        event_publisher: IEventPublisher,
        *,
        id_generator: Callable[[], str] = generate_id,
        clock: Callable[[], str] = utc_now_iso,
    ) -> None:
        self.task_repo = task_repo
        self.event_publisher = event_publisher
        self._generate_id = id_generator
        self._clock = clock

    @traced("tasks.create_task")
    async def create_task(self, data: CreateTaskCommand) -> TaskEntity:
        """Create one task and return the stored record.

        Raises:
            ValidationException: Title missing or blank (nothing stored or sent).
            PersistenceException: Repository put failed (nothing sent).
            FanoutException: Stored, but topic publish or queue send failed.
        """
        if data.title is None or not data.title.strip():
            raise ValidationException("title is required", field="title")

        task = TaskEntity(
            task_id=data.task_id or self._generate_id(),
            title=data.title,
            description=data.description or "",
            image_key=data.image_key or None,
            created_at=self._clock(),
        )
        add_span_attributes(task_id=task.task_id)

        try:
            await self.task_repo.put(task)
        except Exception as e:
            logger.error("Persisting task %s failed: %s", task.task_id, e)
            raise PersistenceException("tasks", str(e)) from e

        await self.event_publisher.publish_created(task)
        logger.info("Task %s created", task.task_id)
        return task
