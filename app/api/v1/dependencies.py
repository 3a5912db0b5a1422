"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the application use cases. Backends, the
bootstrap report and the infrastructure context are placed on app.state by
the lifespan (see app.core.lifespan.initialize_infrastructure); routes
depend only on these dependencies, not on infra directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from app.application.dtos.infrastructure import InfrastructureContext
from app.application.services.event_fanout import EventFanoutPublisher
from app.application.use_cases.tasks import TaskIngestionService
from app.application.use_cases.uploads import ImageUploadService
from app.core.config import get_settings
from app.infrastructure.bootstrap import BootstrapReport
from app.infrastructure.external.aws import AwsBackends
from app.infrastructure.persistence.repositories import TaskRepository


def _app_state_or_503(request: Request, name: str):
    """Return app.state.<name> or raise 503 when startup has not populated it."""
    value = getattr(request.app.state, name, None)
    if value is None:
        raise HTTPException(
            status_code=503,
            detail="Service infrastructure is not initialized",
        )
    return value


def get_backends(request: Request) -> AwsBackends:
    """Table, blob, topic and queue backends (composition root)."""
    return _app_state_or_503(request, "backends")


def get_infrastructure_context(request: Request) -> InfrastructureContext:
    """Resolved resource names and identifiers built at startup."""
    return _app_state_or_503(request, "infra_context")


def get_bootstrap_report(request: Request) -> BootstrapReport | None:
    """Report of the startup bootstrap; None before startup has run."""
    return getattr(request.app.state, "bootstrap_report", None)


def get_task_ingestion_service(
    backends: Annotated[AwsBackends, Depends(get_backends)],
    context: Annotated[InfrastructureContext, Depends(get_infrastructure_context)],
) -> TaskIngestionService:
    """Task ingestion use case: repository over the table store plus topic/queue fan-out."""
    return TaskIngestionService(
        task_repo=TaskRepository(backends.table_store, context.table_name),
        event_publisher=EventFanoutPublisher(
            backends.topic_service, backends.queue_service, context
        ),
    )


def get_image_upload_service(
    backends: Annotated[AwsBackends, Depends(get_backends)],
    context: Annotated[InfrastructureContext, Depends(get_infrastructure_context)],
) -> ImageUploadService:
    """Image upload use case over the blob store."""
    settings = get_settings()
    return ImageUploadService(
        backends.blob_store,
        context,
        key_prefix=settings.image_key_prefix,
        key_extension=settings.image_key_extension,
        default_content_type=settings.image_default_content_type,
    )
