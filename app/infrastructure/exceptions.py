"""Infrastructure exceptions for the AWS backends.

Adapters wrap botocore failures in these so callers never see raw
ClientError objects. They extend TaskIntakeException; use cases translate
them into PersistenceException / FanoutException.
"""

from app.domain.exceptions import TaskIntakeException


class BackendError(TaskIntakeException):
    """Base exception for backend service calls."""

    backend = "backend"

    def __init__(self, operation: str, resource: str, reason: str) -> None:
        super().__init__(
            f"{self.backend} {operation} failed for {resource}: {reason}",
            "BACKEND_ERROR",
            {
                "backend": self.backend,
                "operation": operation,
                "resource": resource,
                "reason": reason,
            },
        )
        self.operation = operation
        self.resource = resource
        self.reason = reason


class TableStoreError(BackendError):
    """DynamoDB call failed."""

    backend = "dynamodb"


class TableNotReadyError(TableStoreError):
    """Table did not become ACTIVE within the bounded wait."""

    def __init__(self, table: str, attempts: int) -> None:
        super().__init__(
            "wait_until_ready",
            table,
            f"not ACTIVE after {attempts} attempts",
        )


class BlobStoreError(BackendError):
    """S3 call failed."""

    backend = "s3"


class TopicServiceError(BackendError):
    """SNS call failed."""

    backend = "sns"


class QueueServiceError(BackendError):
    """SQS call failed."""

    backend = "sqs"
