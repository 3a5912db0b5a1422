"""Pytest configuration and fixtures for task-intake.

In-memory fake backends stand in for DynamoDB, S3, SNS and SQS. They keep
call counts, honour the idempotent-create semantics of the real services,
forward topic messages to subscribed queues, and can be told to fail a
given operation. HTTP tests use an app built with these fakes.
"""

from collections import Counter
from collections.abc import AsyncIterator, Iterator
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings, get_settings
from app.core.lifespan import initialize_infrastructure
from app.infrastructure.exceptions import (
    BlobStoreError,
    QueueServiceError,
    TableStoreError,
    TopicServiceError,
)
from app.infrastructure.external.aws import AwsBackends
from app.main import create_app

REGION = "us-east-1"
ACCOUNT = "000000000000"
ENDPOINT = "http://localhost:4566"


class _FailureInjection:
    """fail_on(op, exc) makes every later call to op raise exc."""

    def _init_failures(self) -> None:
        self.calls: Counter[str] = Counter()
        self.failures: dict[str, Exception] = {}

    def fail_on(self, operation: str, exc: Exception) -> None:
        self.failures[operation] = exc

    def clear_failures(self) -> None:
        self.failures.clear()

    def _call(self, operation: str) -> None:
        self.calls[operation] += 1
        if operation in self.failures:
            raise self.failures[operation]


class FakeTableStore(_FailureInjection):
    def __init__(self) -> None:
        self._init_failures()
        self.tables: dict[str, dict[str, dict[str, Any]]] = {}
        self.key_fields: dict[str, str] = {}
        self.capacities: dict[str, tuple[int, int]] = {}

    async def list_collections(self) -> set[str]:
        self._call("list_collections")
        return set(self.tables)

    async def create_collection(
        self,
        name: str,
        key_field: str,
        *,
        read_capacity: int = 5,
        write_capacity: int = 5,
    ) -> bool:
        self._call("create_collection")
        if name in self.tables:
            return False
        self.tables[name] = {}
        self.key_fields[name] = key_field
        self.capacities[name] = (read_capacity, write_capacity)
        return True

    async def wait_until_ready(self, name: str) -> None:
        self._call("wait_until_ready")

    async def put(self, collection: str, item: dict[str, Any]) -> None:
        self._call("put")
        if collection not in self.tables:
            raise TableStoreError("put_item", collection, "ResourceNotFoundException")
        self.tables[collection][item[self.key_fields[collection]]] = dict(item)


class FakeBlobStore(_FailureInjection):
    def __init__(self) -> None:
        self._init_failures()
        self.buckets: dict[str, dict[str, tuple[bytes, str]]] = {}

    async def exists(self, container: str) -> bool:
        self._call("exists")
        return container in self.buckets

    async def create_container(self, container: str) -> bool:
        self._call("create_container")
        if container in self.buckets:
            return False
        self.buckets[container] = {}
        return True

    async def put(
        self, container: str, key: str, data: bytes, content_type: str
    ) -> None:
        self._call("put")
        if container not in self.buckets:
            raise BlobStoreError("put_object", f"{container}/{key}", "NoSuchBucket")
        self.buckets[container][key] = (data, content_type)


class FakeQueueService(_FailureInjection):
    def __init__(self) -> None:
        self._init_failures()
        # url -> {"name", "arn", "policy", "messages"}
        self.queues: dict[str, dict[str, Any]] = {}

    async def create_or_get_queue(self, name: str) -> str:
        self._call("create_or_get_queue")
        url = f"{ENDPOINT}/{ACCOUNT}/{name}"
        self.queues.setdefault(
            url,
            {
                "name": name,
                "arn": f"arn:aws:sqs:{REGION}:{ACCOUNT}:{name}",
                "policy": None,
                "messages": [],
            },
        )
        return url

    async def get_resource_id(self, queue_id: str) -> str:
        self._call("get_resource_id")
        if queue_id not in self.queues:
            raise QueueServiceError("get_queue_attributes", queue_id, "NonExistentQueue")
        return self.queues[queue_id]["arn"]

    async def set_access_policy(self, queue_id: str, policy: dict[str, Any]) -> None:
        self._call("set_access_policy")
        if queue_id not in self.queues:
            raise QueueServiceError("set_queue_attributes", queue_id, "NonExistentQueue")
        self.queues[queue_id]["policy"] = policy

    async def send(self, queue_id: str, text: str) -> str:
        self._call("send")
        if queue_id not in self.queues:
            raise QueueServiceError("send_message", queue_id, "NonExistentQueue")
        self.queues[queue_id]["messages"].append(text)
        return f"msg-{self.calls['send']}"

    def deliver_from_topic(self, queue_arn: str, topic_arn: str, text: str) -> None:
        """Topic-forwarded delivery; dropped unless the queue policy names the topic."""
        for queue in self.queues.values():
            if queue["arn"] != queue_arn or not queue["policy"]:
                continue
            statement = queue["policy"]["Statement"][0]
            if statement["Condition"]["ArnEquals"]["aws:SourceArn"] == topic_arn:
                queue["messages"].append(text)

    def messages(self, name: str) -> list[str]:
        return self.queues[f"{ENDPOINT}/{ACCOUNT}/{name}"]["messages"]


class FakeTopicService(_FailureInjection):
    def __init__(self, queue_service: FakeQueueService | None = None) -> None:
        self._init_failures()
        self.topics: dict[str, str] = {}
        self.subscriptions: set[tuple[str, str, str]] = set()
        self.published: list[tuple[str, str]] = []
        self.queue_service = queue_service

    async def create_or_get_topic(self, name: str) -> str:
        self._call("create_or_get_topic")
        return self.topics.setdefault(name, f"arn:aws:sns:{REGION}:{ACCOUNT}:{name}")

    async def publish(self, topic_id: str, text: str) -> str:
        self._call("publish")
        if topic_id not in self.topics.values():
            raise TopicServiceError("publish", topic_id, "NotFound")
        self.published.append((topic_id, text))
        if self.queue_service is not None:
            for topic_arn, protocol, target in self.subscriptions:
                if topic_arn == topic_id and protocol == "sqs":
                    self.queue_service.deliver_from_topic(target, topic_arn, text)
        return f"msg-{len(self.published)}"

    async def subscribe(self, topic_id: str, protocol: str, target_id: str) -> str:
        self._call("subscribe")
        if topic_id not in self.topics.values():
            raise TopicServiceError("subscribe", topic_id, "NotFound")
        self.subscriptions.add((topic_id, protocol, target_id))
        return f"{topic_id}:{target_id.rsplit(':', 1)[-1]}"


@pytest.fixture(autouse=True)
def test_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[Settings]:
    """Pin settings to LocalStack defaults regardless of the host environment."""
    monkeypatch.setenv("AWS_REGION", REGION)
    monkeypatch.setenv("AWS_ACCOUNT_ID", ACCOUNT)
    monkeypatch.setenv("LOCALSTACK_ENDPOINT", ENDPOINT)
    monkeypatch.delenv("AWS_ENDPOINT_URL", raising=False)
    monkeypatch.setenv("TELEMETRY_ENABLED", "false")
    monkeypatch.setenv("FANOUT_DIRECT_QUEUE_SEND", "true")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def fake_backends() -> AwsBackends:
    """Empty in-memory backends; the topic forwards to subscribed queues."""
    queue_service = FakeQueueService()
    return AwsBackends(
        table_store=FakeTableStore(),
        blob_store=FakeBlobStore(),
        topic_service=FakeTopicService(queue_service),
        queue_service=queue_service,
    )


@pytest.fixture
async def app(fake_backends: AwsBackends, test_settings: Settings) -> FastAPI:
    """App wired to the fakes, with the startup bootstrap already run."""
    application = create_app(backends=fake_backends)
    await initialize_infrastructure(application, settings=test_settings)
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
