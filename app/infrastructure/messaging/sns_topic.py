"""SNS topic service (implements ITopicService).

create_topic and subscribe are idempotent on the SNS side: the same name
returns the same TopicArn, and subscribing an already-subscribed endpoint
returns the existing SubscriptionArn.
"""

from __future__ import annotations

import asyncio
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from app.infrastructure.exceptions import TopicServiceError
from app.infrastructure.external.aws.errors import error_reason


class SNSTopicService:
    """Topic service over a boto3 SNS client (sync calls run in a worker thread)."""

    def __init__(self, client: Any) -> None:
        self._client = client

    async def create_or_get_topic(self, name: str) -> str:
        try:
            response = await asyncio.to_thread(self._client.create_topic, Name=name)
        except (ClientError, BotoCoreError) as e:
            raise TopicServiceError("create_topic", name, error_reason(e)) from e
        return response["TopicArn"]

    async def publish(self, topic_id: str, text: str) -> str:
        try:
            response = await asyncio.to_thread(
                self._client.publish, TopicArn=topic_id, Message=text
            )
        except (ClientError, BotoCoreError) as e:
            raise TopicServiceError("publish", topic_id, error_reason(e)) from e
        return response.get("MessageId", "")

    async def subscribe(self, topic_id: str, protocol: str, target_id: str) -> str:
        try:
            response = await asyncio.to_thread(
                self._client.subscribe,
                TopicArn=topic_id,
                Protocol=protocol,
                Endpoint=target_id,
                ReturnSubscriptionArn=True,
            )
        except (ClientError, BotoCoreError) as e:
            raise TopicServiceError("subscribe", topic_id, error_reason(e)) from e
        return response.get("SubscriptionArn", "")
