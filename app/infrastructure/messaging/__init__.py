"""Messaging: SNS topic and SQS queue services used for task event fan-out."""

from app.infrastructure.messaging.sns_topic import SNSTopicService
from app.infrastructure.messaging.sqs_queue import SQSQueueService

__all__ = [
    "SNSTopicService",
    "SQSQueueService",
]
