"""Managed resources: one ensure() per resource kind.

Each variant checks or idempotently creates its resource and returns a
ResourceOutcome. Errors propagate to the orchestrator, which records them.
`identifiers` maps kinds already ensured in this run to their identifiers;
the queue variant reads the topic ARN from it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from app.application.interfaces.backends import (
    IBlobStore,
    IQueueService,
    ITableStore,
    ITopicService,
)
from app.domain.enums import ResourceKind, ResourceStatus
from app.domain.exceptions import BootstrapException
from app.infrastructure.bootstrap.descriptors import (
    BucketDescriptor,
    SubscriptionDescriptor,
    TableDescriptor,
    TopicDescriptor,
    build_queue_policy,
)
from app.infrastructure.bootstrap.report import ResourceOutcome
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class ManagedResource(Protocol):
    """A resource the bootstrap can ensure."""

    kind: ResourceKind
    name: str

    async def ensure(
        self, identifiers: Mapping[ResourceKind, str]
    ) -> ResourceOutcome: ...


class TableResource:
    """Tasks table: list, create if absent, then wait until ACTIVE."""

    kind = ResourceKind.TABLE

    def __init__(self, descriptor: TableDescriptor, table_store: ITableStore) -> None:
        self.descriptor = descriptor
        self.name = descriptor.name
        self.table_store = table_store

    async def ensure(self, identifiers: Mapping[ResourceKind, str]) -> ResourceOutcome:
        if self.name in await self.table_store.list_collections():
            return ResourceOutcome(self.kind, self.name, ResourceStatus.EXISTS, self.name)

        created = await self.table_store.create_collection(
            self.name,
            self.descriptor.hash_key,
            read_capacity=self.descriptor.read_capacity,
            write_capacity=self.descriptor.write_capacity,
        )
        await self.table_store.wait_until_ready(self.name)
        if not created:
            return ResourceOutcome(self.kind, self.name, ResourceStatus.EXISTS, self.name)
        logger.info("[bootstrap] Created DynamoDB table %s", self.name)
        return ResourceOutcome(
            self.kind,
            self.name,
            ResourceStatus.CREATED,
            self.name,
            details={
                "hash_key": self.descriptor.hash_key,
                "read_capacity": self.descriptor.read_capacity,
                "write_capacity": self.descriptor.write_capacity,
            },
        )


class BucketResource:
    """Images bucket: HEAD probe, create if absent."""

    kind = ResourceKind.BUCKET

    def __init__(self, descriptor: BucketDescriptor, blob_store: IBlobStore) -> None:
        self.descriptor = descriptor
        self.name = descriptor.name
        self.blob_store = blob_store

    async def ensure(self, identifiers: Mapping[ResourceKind, str]) -> ResourceOutcome:
        if await self.blob_store.exists(self.name):
            return ResourceOutcome(self.kind, self.name, ResourceStatus.EXISTS, self.name)
        if not await self.blob_store.create_container(self.name):
            return ResourceOutcome(self.kind, self.name, ResourceStatus.EXISTS, self.name)
        logger.info("[bootstrap] Created S3 bucket %s", self.name)
        return ResourceOutcome(self.kind, self.name, ResourceStatus.CREATED, self.name)


class TopicResource:
    """Task-events topic. create_topic is idempotent, so it is called unconditionally."""

    kind = ResourceKind.TOPIC

    def __init__(self, descriptor: TopicDescriptor, topic_service: ITopicService) -> None:
        self.descriptor = descriptor
        self.name = descriptor.name
        self.topic_service = topic_service

    async def ensure(self, identifiers: Mapping[ResourceKind, str]) -> ResourceOutcome:
        topic_arn = await self.topic_service.create_or_get_topic(self.name)
        logger.info("[bootstrap] SNS topic: %s", topic_arn)
        return ResourceOutcome(self.kind, self.name, ResourceStatus.ENSURED, topic_arn)


class QueueResource:
    """Task queue plus its wiring to the topic, ensured as one unit.

    Steps: create queue -> read its ARN -> apply a policy allowing only the
    topic to send -> subscribe the queue ARN to the topic. Any failure fails
    the whole unit; there is no partial retry within a run.
    """

    kind = ResourceKind.QUEUE

    def __init__(
        self,
        descriptor: SubscriptionDescriptor,
        queue_service: IQueueService,
        topic_service: ITopicService,
    ) -> None:
        self.descriptor = descriptor
        self.name = descriptor.queue.name
        self.queue_service = queue_service
        self.topic_service = topic_service

    async def ensure(self, identifiers: Mapping[ResourceKind, str]) -> ResourceOutcome:
        queue_url = await self.queue_service.create_or_get_queue(self.name)
        queue_arn = await self.queue_service.get_resource_id(queue_url)
        logger.info("[bootstrap] SQS queue: %s", queue_url)

        topic_arn = identifiers.get(ResourceKind.TOPIC)
        if not topic_arn:
            raise BootstrapException(
                "queue",
                f"topic {self.descriptor.topic.name} unavailable; "
                "policy and subscription not applied",
            )

        policy = build_queue_policy(queue_arn, topic_arn, self.descriptor.policy_sid)
        await self.queue_service.set_access_policy(queue_url, policy)
        subscription_arn = await self.topic_service.subscribe(
            topic_arn, self.descriptor.protocol, queue_arn
        )
        logger.info("[bootstrap] Subscribed %s to %s", queue_arn, topic_arn)
        return ResourceOutcome(
            self.kind,
            self.name,
            ResourceStatus.ENSURED,
            queue_url,
            details={
                "queue_arn": queue_arn,
                "topic_arn": topic_arn,
                "subscription_arn": subscription_arn,
                "policy": policy,
            },
        )
