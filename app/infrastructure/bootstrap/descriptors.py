"""Static declaration of the infrastructure the service needs.

Five resources: the tasks table, the images bucket, the task-events topic,
the task queue, and the topic->queue subscription. The subscription only
delivers if the queue policy lets the topic send, so the policy is part of
the subscription descriptor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from app.domain.enums import ResourceKind

if TYPE_CHECKING:
    from app.core.config import Settings

POLICY_VERSION = "2012-10-17"
QUEUE_SEND_ACTION = "sqs:SendMessage"


@dataclass(frozen=True)
class TableDescriptor:
    kind: ClassVar[ResourceKind] = ResourceKind.TABLE

    name: str
    hash_key: str
    read_capacity: int = 5
    write_capacity: int = 5


@dataclass(frozen=True)
class BucketDescriptor:
    kind: ClassVar[ResourceKind] = ResourceKind.BUCKET

    name: str


@dataclass(frozen=True)
class TopicDescriptor:
    kind: ClassVar[ResourceKind] = ResourceKind.TOPIC

    name: str


@dataclass(frozen=True)
class QueueDescriptor:
    kind: ClassVar[ResourceKind] = ResourceKind.QUEUE

    name: str


@dataclass(frozen=True)
class SubscriptionDescriptor:
    """Topic->queue delivery: subscription protocol plus the queue policy statement id."""

    topic: TopicDescriptor
    queue: QueueDescriptor
    protocol: str = "sqs"
    policy_sid: str = "Allow-SNS-SendMessage"


@dataclass(frozen=True)
class ResourceDescriptorSet:
    """All resources ensured at startup."""

    table: TableDescriptor
    bucket: BucketDescriptor
    topic: TopicDescriptor
    queue: QueueDescriptor
    subscription: SubscriptionDescriptor

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ResourceDescriptorSet":
        topic = TopicDescriptor(name=settings.task_events_topic_name)
        queue = QueueDescriptor(name=settings.task_queue_name)
        return cls(
            table=TableDescriptor(
                name=settings.tasks_table_name,
                hash_key=settings.tasks_table_hash_key,
                read_capacity=settings.tasks_table_read_capacity,
                write_capacity=settings.tasks_table_write_capacity,
            ),
            bucket=BucketDescriptor(name=settings.images_bucket_name),
            topic=topic,
            queue=queue,
            subscription=SubscriptionDescriptor(topic=topic, queue=queue),
        )


def build_queue_policy(
    queue_arn: str,
    topic_arn: str,
    sid: str = "Allow-SNS-SendMessage",
) -> dict[str, Any]:
    """Queue access policy letting only the given topic send to the queue.

    The grant is conditional on aws:SourceArn, so the wildcard principal
    does not open the queue to other senders.
    """
    return {
        "Version": POLICY_VERSION,
        "Statement": [
            {
                "Sid": sid,
                "Effect": "Allow",
                "Principal": {"AWS": "*"},
                "Action": QUEUE_SEND_ACTION,
                "Resource": queue_arn,
                "Condition": {"ArnEquals": {"aws:SourceArn": topic_arn}},
            }
        ],
    }
