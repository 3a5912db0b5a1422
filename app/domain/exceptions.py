"""Domain exceptions for the task intake service.

Defines the error kinds a caller can observe: bad input, a failed storage
write, a failed event fan-out after a successful write, and a failed
infrastructure ensure-step. Presentation layer maps them to HTTP responses
in exception handlers; bootstrap failures never leave the orchestrator.
"""

from typing import Any


class TaskIntakeException(Exception):
    """Base exception for all task intake errors.

    All custom exceptions inherit from this class so the presentation layer
    can map them to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, channel).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TaskIntakeException):
    """Raised when input validation fails (missing title, no image payload). Never retried."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class PersistenceException(TaskIntakeException):
    """Raised when a storage write (table item or blob) fails; nothing was created."""

    def __init__(self, resource: str, reason: str) -> None:
        """Initialize with the storage resource and failure reason.

        Args:
            resource: Logical resource that failed (e.g. 'table:Tasks').
            reason: Underlying error message.
        """
        super().__init__(
            f"Failed to persist to {resource}",
            "PERSISTENCE_ERROR",
            {"resource": resource, "reason": reason},
        )


class FanoutException(TaskIntakeException):
    """Raised when event delivery fails after the task was stored.

    The task record is durable even though this error is returned; the
    event for it may never reach one or both channels.
    """

    def __init__(self, channel: str, task_id: str, reason: str) -> None:
        """Initialize with the failed channel, affected task, and reason.

        Args:
            channel: 'topic' or 'queue'.
            task_id: Identity of the already-stored task.
            reason: Underlying error message.
        """
        super().__init__(
            f"Failed to deliver TASK_CREATED to {channel} for task {task_id}",
            "FANOUT_ERROR",
            {"channel": channel, "task_id": task_id, "reason": reason},
        )


class BootstrapException(TaskIntakeException):
    """Raised inside an ensure-step; always caught and recorded by the orchestrator."""

    def __init__(self, resource: str, reason: str) -> None:
        """Initialize with the resource being ensured and the reason.

        Args:
            resource: Resource kind or name (e.g. 'queue').
            reason: Why the ensure-step could not complete.
        """
        super().__init__(
            f"Failed to ensure {resource}: {reason}",
            "BOOTSTRAP_ERROR",
            {"resource": resource, "reason": reason},
        )
