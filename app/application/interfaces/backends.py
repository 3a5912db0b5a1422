"""Backend interfaces (ports) for table, blob, topic and queue services.

These are the only calls the bootstrap and the workflows make on the
backends. Implementations: boto3 adapters in app.infrastructure; in-memory
fakes in tests.
"""

from __future__ import annotations

from typing import Any, Protocol


class ITableStore(Protocol):
    """Protocol for a key-value table store (DynamoDB)."""

    async def list_collections(self) -> set[str]:
        """Return the names of existing tables."""

    async def create_collection(
        self,
        name: str,
        key_field: str,
        *,
        read_capacity: int = 5,
        write_capacity: int = 5,
    ) -> bool:
        """Create a table with a single string hash key. Returns False if it already existed."""

    async def wait_until_ready(self, name: str) -> None:
        """Block (bounded poll) until the table is ready for writes."""

    async def put(self, collection: str, item: dict[str, Any]) -> None:
        """Write an item; an existing item with the same key is overwritten."""


class IBlobStore(Protocol):
    """Protocol for blob storage (S3)."""

    async def exists(self, container: str) -> bool:
        """Return True if the bucket exists and is reachable."""

    async def create_container(self, container: str) -> bool:
        """Create the bucket. Returns False when it already existed (owned by us)."""

    async def put(
        self, container: str, key: str, data: bytes, content_type: str
    ) -> None:
        """Store bytes under key with the given content type."""


class ITopicService(Protocol):
    """Protocol for a pub/sub topic service (SNS)."""

    async def create_or_get_topic(self, name: str) -> str:
        """Create the topic if needed and return its identifier (ARN). Idempotent."""

    async def publish(self, topic_id: str, text: str) -> str:
        """Publish a message and return the message id."""

    async def subscribe(self, topic_id: str, protocol: str, target_id: str) -> str:
        """Subscribe target to topic and return the subscription id. Idempotent per target."""


class IQueueService(Protocol):
    """Protocol for a point-to-point queue service (SQS)."""

    async def create_or_get_queue(self, name: str) -> str:
        """Create the queue if needed and return its address (URL). Idempotent."""

    async def get_resource_id(self, queue_id: str) -> str:
        """Return the queue's resource identifier (ARN), distinct from its URL."""

    async def set_access_policy(self, queue_id: str, policy: dict[str, Any]) -> None:
        """Replace the queue's access policy document."""

    async def send(self, queue_id: str, text: str) -> str:
        """Send a message and return the message id."""
