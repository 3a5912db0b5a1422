"""Task event fan-out: the same TASK_CREATED envelope to the topic and the queue."""

from __future__ import annotations

from app.application.dtos.infrastructure import InfrastructureContext
from app.application.interfaces.backends import IQueueService, ITopicService
from app.domain.entities.task import TaskEntity
from app.domain.exceptions import FanoutException
from app.domain.value_objects.event_envelope import TaskEventEnvelope
from app.shared.telemetry.logging import get_logger
from app.shared.telemetry.tracing import traced

logger = get_logger(__name__)


class EventFanoutPublisher:
    """Publishes task events to the topic, then sends them directly to the queue (IEventPublisher).

    Fail-fast: if the topic publish fails the queue send is not attempted.
    No retries and no compensation on the other channel.

    Because the queue is also subscribed to the topic, a queue consumer
    receives each event twice (direct send + forwarded copy) while
    context.direct_queue_send is True.
    """

    def __init__(
        self,
        topic_service: ITopicService,
        queue_service: IQueueService,
        context: InfrastructureContext,
    ) -> None:
        self.topic_service = topic_service
        self.queue_service = queue_service
        self.context = context

    @traced("tasks.fanout.publish_created")
    async def publish_created(self, task: TaskEntity) -> None:
        """Emit TASK_CREATED for a stored task.

        Raises:
            FanoutException: Topic publish or queue send failed (details.channel says which).
        """
        text = TaskEventEnvelope.task_created(task).to_json()

        try:
            await self.topic_service.publish(self.context.topic_arn, text)
        except Exception as e:
            logger.error(
                "Topic publish failed for task %s: %s", task.task_id, e
            )
            raise FanoutException("topic", task.task_id, str(e)) from e

        if not self.context.direct_queue_send:
            return

        try:
            await self.queue_service.send(self.context.queue_url, text)
        except Exception as e:
            logger.error("Queue send failed for task %s: %s", task.task_id, e)
            raise FanoutException("queue", task.task_id, str(e)) from e
