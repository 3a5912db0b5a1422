"""Process-wide infrastructure handles passed explicitly into the workflows."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InfrastructureContext:
    """Resolved names and identifiers of the shared resources.

    Built once at startup from the bootstrap report (falling back to
    identifiers derived from settings for steps that failed) and read-only
    afterwards.
    """

    table_name: str
    bucket_name: str
    topic_arn: str
    queue_url: str
    blob_locator_base: str
    direct_queue_send: bool = True

    def blob_url(self, key: str) -> str:
        """Public locator for an object key in the images bucket."""
        return f"{self.blob_locator_base.rstrip('/')}/{key}"
