"""AWS backend factory: builds the four backend adapters from settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import boto3
from botocore.config import Config

from app.application.interfaces.backends import (
    IBlobStore,
    IQueueService,
    ITableStore,
    ITopicService,
)

if TYPE_CHECKING:
    from app.core.config import Settings


@dataclass(frozen=True)
class AwsBackends:
    """The table, blob, topic and queue backends used by bootstrap and workflows."""

    table_store: ITableStore
    blob_store: IBlobStore
    topic_service: ITopicService
    queue_service: IQueueService


class AwsBackendFactory:
    """Factory for boto3-backed adapters based on configuration."""

    @staticmethod
    def create_backends(settings: "Settings | None" = None) -> AwsBackends:
        """Create DynamoDB, S3, SNS and SQS adapters sharing one boto3 session.

        When aws_endpoint_url is set (LocalStack), every client targets it and
        S3 uses path-style addressing.

        Args:
            settings: Application settings; if None, uses get_settings().

        Returns:
            AwsBackends with all four adapters.
        """
        from app.core.config import get_settings
        from app.infrastructure.external.storage.s3_storage import S3BlobStore
        from app.infrastructure.messaging.sns_topic import SNSTopicService
        from app.infrastructure.messaging.sqs_queue import SQSQueueService
        from app.infrastructure.persistence.dynamodb_table_store import (
            DynamoDBTableStore,
        )

        s = settings or get_settings()
        session = boto3.session.Session(
            aws_access_key_id=s.aws_access_key_id,
            aws_secret_access_key=s.aws_secret_access_key.get_secret_value(),
            region_name=s.aws_region,
        )
        extra = {} if s.aws_endpoint_url is None else {"endpoint_url": s.aws_endpoint_url}
        s3_config = Config(s3={"addressing_style": "path"}) if s.aws_endpoint_url else None

        return AwsBackends(
            table_store=DynamoDBTableStore(
                session.client("dynamodb", **extra),
                poll_delay=s.table_ready_poll_delay_seconds,
                max_attempts=s.table_ready_max_attempts,
            ),
            blob_store=S3BlobStore(
                session.client("s3", config=s3_config, **extra),
                region=s.aws_region,
            ),
            topic_service=SNSTopicService(session.client("sns", **extra)),
            queue_service=SQSQueueService(session.client("sqs", **extra)),
        )
