"""Build the InfrastructureContext handed to the request workflows."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.infrastructure import InfrastructureContext
from app.domain.enums import ResourceKind
from app.infrastructure.bootstrap.report import BootstrapReport

if TYPE_CHECKING:
    from app.core.config import Settings


def build_infrastructure_context(
    settings: "Settings", report: BootstrapReport | None = None
) -> InfrastructureContext:
    """Prefer identifiers resolved by the bootstrap; otherwise derive them from settings.

    With a failed step the derived identifier may point at nothing, in which
    case requests fail with PersistenceException / FanoutException.
    """
    topic_arn = report.identifier(ResourceKind.TOPIC) if report else None
    queue_url = report.identifier(ResourceKind.QUEUE) if report else None
    return InfrastructureContext(
        table_name=settings.tasks_table_name,
        bucket_name=settings.images_bucket_name,
        topic_arn=topic_arn or settings.topic_arn,
        queue_url=queue_url or settings.queue_url,
        blob_locator_base=settings.blob_locator_base,
        direct_queue_send=settings.fanout_direct_queue_send,
    )
