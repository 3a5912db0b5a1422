"""EventFanoutPublisher unit tests with mocked topic and queue services."""

import json
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.infrastructure import InfrastructureContext
from app.application.services.event_fanout import EventFanoutPublisher
from app.domain.entities.task import TaskEntity
from app.domain.exceptions import FanoutException

TOPIC_ARN = "arn:aws:sns:us-east-1:000000000000:task-events"
QUEUE_URL = "http://localhost:4566/000000000000/task-queue"


def _context(direct_queue_send: bool = True) -> InfrastructureContext:
    return InfrastructureContext(
        table_name="Tasks",
        bucket_name="shopping-images",
        topic_arn=TOPIC_ARN,
        queue_url=QUEUE_URL,
        blob_locator_base="http://localhost:4566/shopping-images",
        direct_queue_send=direct_queue_send,
    )


def _task() -> TaskEntity:
    return TaskEntity(
        task_id="t1",
        title="Buy milk",
        description="",
        image_key=None,
        created_at="2025-01-15T12:00:00.000Z",
    )


@pytest.fixture
def services():
    topic = AsyncMock()
    topic.publish = AsyncMock(return_value="m1")
    queue = AsyncMock()
    queue.send = AsyncMock(return_value="m2")
    return topic, queue


async def test_publishes_same_envelope_to_topic_then_queue(services) -> None:
    """Topic publish and queue send carry identical TASK_CREATED text."""
    topic, queue = services
    await EventFanoutPublisher(topic, queue, _context()).publish_created(_task())

    topic.publish.assert_awaited_once()
    queue.send.assert_awaited_once()
    topic_arn, topic_text = topic.publish.await_args.args
    queue_url, queue_text = queue.send.await_args.args
    assert topic_arn == TOPIC_ARN
    assert queue_url == QUEUE_URL
    assert topic_text == queue_text
    assert json.loads(topic_text) == {"type": "TASK_CREATED", "payload": _task().to_item()}


async def test_topic_failure_skips_queue(services) -> None:
    """Fail-fast: no queue send when the topic publish fails."""
    topic, queue = services
    topic.publish.side_effect = RuntimeError("topic down")

    with pytest.raises(FanoutException) as exc_info:
        await EventFanoutPublisher(topic, queue, _context()).publish_created(_task())

    assert exc_info.value.details["channel"] == "topic"
    assert exc_info.value.details["task_id"] == "t1"
    assert isinstance(exc_info.value.__cause__, RuntimeError)
    queue.send.assert_not_awaited()


async def test_queue_failure_after_topic_publish(services) -> None:
    topic, queue = services
    queue.send.side_effect = RuntimeError("queue down")

    with pytest.raises(FanoutException) as exc_info:
        await EventFanoutPublisher(topic, queue, _context()).publish_created(_task())

    assert exc_info.value.details["channel"] == "queue"
    topic.publish.assert_awaited_once()


async def test_direct_queue_send_disabled_publishes_only(services) -> None:
    topic, queue = services
    await EventFanoutPublisher(
        topic, queue, _context(direct_queue_send=False)
    ).publish_created(_task())

    topic.publish.assert_awaited_once()
    queue.send.assert_not_awaited()
