"""SQS queue service (implements IQueueService)."""

from __future__ import annotations

import asyncio
import json
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from app.infrastructure.exceptions import QueueServiceError
from app.infrastructure.external.aws.errors import error_reason


class SQSQueueService:
    """Queue service over a boto3 SQS client.

    A queue has two identifiers: its URL (used for every SQS call) and its
    ARN (used by SNS subscriptions and IAM policies).
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    async def create_or_get_queue(self, name: str) -> str:
        """Create queue (no-op if it exists with the same attributes) and return its URL."""
        try:
            response = await asyncio.to_thread(self._client.create_queue, QueueName=name)
        except (ClientError, BotoCoreError) as e:
            raise QueueServiceError("create_queue", name, error_reason(e)) from e
        return response["QueueUrl"]

    async def get_resource_id(self, queue_id: str) -> str:
        """Return the QueueArn attribute."""
        try:
            response = await asyncio.to_thread(
                self._client.get_queue_attributes,
                QueueUrl=queue_id,
                AttributeNames=["QueueArn"],
            )
        except (ClientError, BotoCoreError) as e:
            raise QueueServiceError("get_queue_attributes", queue_id, error_reason(e)) from e
        arn = response.get("Attributes", {}).get("QueueArn")
        if not arn:
            raise QueueServiceError("get_queue_attributes", queue_id, "QueueArn missing")
        return arn

    async def set_access_policy(self, queue_id: str, policy: dict[str, Any]) -> None:
        """Replace the queue Policy attribute with the given document."""
        try:
            await asyncio.to_thread(
                self._client.set_queue_attributes,
                QueueUrl=queue_id,
                Attributes={"Policy": json.dumps(policy)},
            )
        except (ClientError, BotoCoreError) as e:
            raise QueueServiceError("set_queue_attributes", queue_id, error_reason(e)) from e

    async def send(self, queue_id: str, text: str) -> str:
        try:
            response = await asyncio.to_thread(
                self._client.send_message, QueueUrl=queue_id, MessageBody=text
            )
        except (ClientError, BotoCoreError) as e:
            raise QueueServiceError("send_message", queue_id, error_reason(e)) from e
        return response.get("MessageId", "")
