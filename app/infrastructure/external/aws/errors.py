"""Helpers for reading botocore error responses."""

from botocore.exceptions import ClientError


def error_code(exc: ClientError) -> str:
    """Return the service error code (e.g. 'NoSuchBucket', '404')."""
    return str(exc.response.get("Error", {}).get("Code", ""))


def error_reason(exc: Exception) -> str:
    """Short human-readable reason for logs and error details."""
    if isinstance(exc, ClientError):
        message = exc.response.get("Error", {}).get("Message") or str(exc)
        code = error_code(exc)
        return f"{code}: {message}" if code else message
    return str(exc) or exc.__class__.__name__
