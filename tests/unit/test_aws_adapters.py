"""boto3 adapters: DynamoDB and SNS through botocore Stubber, S3 and SQS through mocked clients."""

import json
from unittest.mock import MagicMock

import boto3
import pytest
from botocore.exceptions import ClientError
from botocore.stub import Stubber

from app.infrastructure.exceptions import (
    BlobStoreError,
    QueueServiceError,
    TableNotReadyError,
    TableStoreError,
    TopicServiceError,
)
from app.infrastructure.external.storage import S3BlobStore
from app.infrastructure.messaging import SNSTopicService, SQSQueueService
from app.infrastructure.persistence.dynamodb_table_store import DynamoDBTableStore

TOPIC_ARN = "arn:aws:sns:us-east-1:000000000000:task-events"
QUEUE_URL = "http://localhost:4566/000000000000/task-queue"
QUEUE_ARN = "arn:aws:sqs:us-east-1:000000000000:task-queue"


def _client(service: str):
    return boto3.client(
        service,
        region_name="us-east-1",
        aws_access_key_id="test",
        aws_secret_access_key="test",
    )


def _client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


# ---- DynamoDB ----


@pytest.fixture
def dynamodb():
    client = _client("dynamodb")
    with Stubber(client) as stubber:
        yield DynamoDBTableStore(client, poll_delay=0, max_attempts=1), stubber
        stubber.assert_no_pending_responses()


async def test_list_collections(dynamodb) -> None:
    store, stubber = dynamodb
    stubber.add_response("list_tables", {"TableNames": ["Tasks", "Other"]}, {})
    assert await store.list_collections() == {"Tasks", "Other"}


async def test_create_collection(dynamodb) -> None:
    store, stubber = dynamodb
    stubber.add_response(
        "create_table",
        {},
        {
            "TableName": "Tasks",
            "AttributeDefinitions": [{"AttributeName": "taskId", "AttributeType": "S"}],
            "KeySchema": [{"AttributeName": "taskId", "KeyType": "HASH"}],
            "ProvisionedThroughput": {"ReadCapacityUnits": 5, "WriteCapacityUnits": 5},
        },
    )
    assert await store.create_collection("Tasks", "taskId") is True


async def test_create_collection_custom_throughput(dynamodb) -> None:
    store, stubber = dynamodb
    stubber.add_response(
        "create_table",
        {},
        {
            "TableName": "Tasks",
            "AttributeDefinitions": [{"AttributeName": "taskId", "AttributeType": "S"}],
            "KeySchema": [{"AttributeName": "taskId", "KeyType": "HASH"}],
            "ProvisionedThroughput": {"ReadCapacityUnits": 10, "WriteCapacityUnits": 20},
        },
    )
    assert (
        await store.create_collection(
            "Tasks", "taskId", read_capacity=10, write_capacity=20
        )
        is True
    )
    stubber.assert_no_pending_responses()


async def test_create_collection_already_in_use(dynamodb) -> None:
    store, stubber = dynamodb
    stubber.add_client_error(
        "create_table", service_error_code="ResourceInUseException", http_status_code=400
    )
    assert await store.create_collection("Tasks", "taskId") is False


async def test_create_collection_other_error_wrapped(dynamodb) -> None:
    store, stubber = dynamodb
    stubber.add_client_error(
        "create_table", service_error_code="LimitExceededException", http_status_code=400
    )
    with pytest.raises(TableStoreError) as exc_info:
        await store.create_collection("Tasks", "taskId")
    assert exc_info.value.operation == "create_table"
    assert isinstance(exc_info.value.__cause__, ClientError)


async def test_wait_until_ready(dynamodb) -> None:
    store, stubber = dynamodb
    stubber.add_response(
        "describe_table", {"Table": {"TableStatus": "ACTIVE"}}, {"TableName": "Tasks"}
    )
    await store.wait_until_ready("Tasks")


async def test_wait_until_ready_exhausted(dynamodb) -> None:
    store, stubber = dynamodb
    stubber.add_client_error(
        "describe_table", service_error_code="ResourceNotFoundException", http_status_code=400
    )
    with pytest.raises(TableNotReadyError):
        await store.wait_until_ready("Tasks")


async def test_put_serializes_item(dynamodb) -> None:
    store, stubber = dynamodb
    stubber.add_response(
        "put_item",
        {},
        {
            "TableName": "Tasks",
            "Item": {
                "taskId": {"S": "t1"},
                "title": {"S": "Buy milk"},
                "description": {"S": ""},
                "imageKey": {"NULL": True},
                "createdAt": {"S": "2025-01-15T12:00:00.000Z"},
            },
        },
    )
    await store.put(
        "Tasks",
        {
            "taskId": "t1",
            "title": "Buy milk",
            "description": "",
            "imageKey": None,
            "createdAt": "2025-01-15T12:00:00.000Z",
        },
    )


async def test_put_missing_table_wrapped(dynamodb) -> None:
    store, stubber = dynamodb
    stubber.add_client_error(
        "put_item", service_error_code="ResourceNotFoundException", http_status_code=400
    )
    with pytest.raises(TableStoreError) as exc_info:
        await store.put("Tasks", {"taskId": "t1"})
    assert exc_info.value.reason.startswith("ResourceNotFoundException")


# ---- SNS ----


@pytest.fixture
def sns():
    client = _client("sns")
    with Stubber(client) as stubber:
        yield SNSTopicService(client), stubber
        stubber.assert_no_pending_responses()


async def test_create_or_get_topic(sns) -> None:
    service, stubber = sns
    stubber.add_response("create_topic", {"TopicArn": TOPIC_ARN}, {"Name": "task-events"})
    assert await service.create_or_get_topic("task-events") == TOPIC_ARN


async def test_publish(sns) -> None:
    service, stubber = sns
    stubber.add_response(
        "publish", {"MessageId": "m1"}, {"TopicArn": TOPIC_ARN, "Message": "{}"}
    )
    assert await service.publish(TOPIC_ARN, "{}") == "m1"


async def test_publish_error_wrapped(sns) -> None:
    service, stubber = sns
    stubber.add_client_error("publish", service_error_code="NotFound", http_status_code=404)
    with pytest.raises(TopicServiceError):
        await service.publish(TOPIC_ARN, "{}")


async def test_subscribe(sns) -> None:
    service, stubber = sns
    stubber.add_response(
        "subscribe",
        {"SubscriptionArn": f"{TOPIC_ARN}:sub1"},
        {
            "TopicArn": TOPIC_ARN,
            "Protocol": "sqs",
            "Endpoint": QUEUE_ARN,
            "ReturnSubscriptionArn": True,
        },
    )
    assert await service.subscribe(TOPIC_ARN, "sqs", QUEUE_ARN) == f"{TOPIC_ARN}:sub1"


# ---- S3 ----


async def test_bucket_exists() -> None:
    client = MagicMock()
    assert await S3BlobStore(client).exists("shopping-images") is True
    client.head_bucket.assert_called_once_with(Bucket="shopping-images")


async def test_bucket_missing() -> None:
    client = MagicMock()
    client.head_bucket.side_effect = _client_error("404", "HeadBucket")
    assert await S3BlobStore(client).exists("shopping-images") is False


async def test_bucket_head_forbidden_wrapped() -> None:
    client = MagicMock()
    client.head_bucket.side_effect = _client_error("403", "HeadBucket")
    with pytest.raises(BlobStoreError):
        await S3BlobStore(client).exists("shopping-images")


async def test_create_bucket_us_east_1_has_no_location_constraint() -> None:
    client = MagicMock()
    assert await S3BlobStore(client, region="us-east-1").create_container("b") is True
    client.create_bucket.assert_called_once_with(Bucket="b")


async def test_create_bucket_other_region_sets_location_constraint() -> None:
    client = MagicMock()
    await S3BlobStore(client, region="eu-west-1").create_container("b")
    client.create_bucket.assert_called_once_with(
        Bucket="b", CreateBucketConfiguration={"LocationConstraint": "eu-west-1"}
    )


async def test_create_bucket_already_owned() -> None:
    client = MagicMock()
    client.create_bucket.side_effect = _client_error("BucketAlreadyOwnedByYou", "CreateBucket")
    assert await S3BlobStore(client).create_container("b") is False


async def test_put_object() -> None:
    client = MagicMock()
    await S3BlobStore(client).put("b", "images/x.jpg", b"data", "image/png")
    client.put_object.assert_called_once_with(
        Bucket="b", Key="images/x.jpg", Body=b"data", ContentType="image/png"
    )


# ---- SQS ----


async def test_create_or_get_queue() -> None:
    client = MagicMock()
    client.create_queue.return_value = {"QueueUrl": QUEUE_URL}
    assert await SQSQueueService(client).create_or_get_queue("task-queue") == QUEUE_URL
    client.create_queue.assert_called_once_with(QueueName="task-queue")


async def test_get_resource_id() -> None:
    client = MagicMock()
    client.get_queue_attributes.return_value = {"Attributes": {"QueueArn": QUEUE_ARN}}
    assert await SQSQueueService(client).get_resource_id(QUEUE_URL) == QUEUE_ARN
    client.get_queue_attributes.assert_called_once_with(
        QueueUrl=QUEUE_URL, AttributeNames=["QueueArn"]
    )


async def test_get_resource_id_missing_arn() -> None:
    client = MagicMock()
    client.get_queue_attributes.return_value = {"Attributes": {}}
    with pytest.raises(QueueServiceError):
        await SQSQueueService(client).get_resource_id(QUEUE_URL)


async def test_set_access_policy_serializes_json() -> None:
    client = MagicMock()
    policy = {"Version": "2012-10-17", "Statement": []}
    await SQSQueueService(client).set_access_policy(QUEUE_URL, policy)
    kwargs = client.set_queue_attributes.call_args.kwargs
    assert kwargs["QueueUrl"] == QUEUE_URL
    assert json.loads(kwargs["Attributes"]["Policy"]) == policy


async def test_send_error_wrapped() -> None:
    client = MagicMock()
    client.send_message.side_effect = _client_error("NonExistentQueue", "SendMessage")
    with pytest.raises(QueueServiceError) as exc_info:
        await SQSQueueService(client).send(QUEUE_URL, "{}")
    assert exc_info.value.reason == "NonExistentQueue: NonExistentQueue"
