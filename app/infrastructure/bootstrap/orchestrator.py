"""Bootstrap orchestrator: ensure every resource once at process start."""

from __future__ import annotations

from collections.abc import Sequence

from app.domain.enums import ResourceKind
from app.infrastructure.bootstrap.descriptors import ResourceDescriptorSet
from app.infrastructure.bootstrap.report import BootstrapReport, ResourceOutcome
from app.infrastructure.bootstrap.resources import (
    BucketResource,
    ManagedResource,
    QueueResource,
    TableResource,
    TopicResource,
)
from app.infrastructure.external.aws.factory import AwsBackends
from app.shared.telemetry.logging import get_logger
from app.shared.telemetry.tracing import add_span_event, traced

logger = get_logger(__name__)

_STEP_LABELS = {
    ResourceKind.TABLE: "DynamoDB",
    ResourceKind.BUCKET: "S3",
    ResourceKind.TOPIC: "SNS",
    ResourceKind.QUEUE: "SNS/SQS",
}


class BootstrapOrchestrator:
    """Runs each managed resource's ensure() in order and aggregates outcomes.

    Steps are isolated: a failing step is logged as a warning and recorded,
    and the next step still runs. ensure_infrastructure() never raises for
    ordinary errors, so startup always proceeds. Running it again against
    the same backends creates nothing new.
    """

    def __init__(self, resources: Sequence[ManagedResource]) -> None:
        self.resources = tuple(resources)

    @classmethod
    def from_backends(
        cls,
        backends: AwsBackends,
        descriptors: ResourceDescriptorSet,
    ) -> "BootstrapOrchestrator":
        """Standard order: table, bucket, topic, then queue (needs the topic ARN)."""
        return cls(
            [
                TableResource(descriptors.table, backends.table_store),
                BucketResource(descriptors.bucket, backends.blob_store),
                TopicResource(descriptors.topic, backends.topic_service),
                QueueResource(
                    descriptors.subscription,
                    backends.queue_service,
                    backends.topic_service,
                ),
            ]
        )

    @staticmethod
    def unavailable_report(
        descriptors: ResourceDescriptorSet, error: str
    ) -> BootstrapReport:
        """Report with every step failed, for when no backends could be built."""
        steps = (
            descriptors.table,
            descriptors.bucket,
            descriptors.topic,
            descriptors.queue,
        )
        return BootstrapReport(
            tuple(ResourceOutcome.failure(d.kind, d.name, error) for d in steps)
        )

    @traced("bootstrap.ensure_infrastructure")
    async def ensure_infrastructure(self) -> BootstrapReport:
        identifiers: dict[ResourceKind, str] = {}
        outcomes: list[ResourceOutcome] = []

        for resource in self.resources:
            try:
                outcome = await resource.ensure(identifiers)
            except Exception as e:
                label = _STEP_LABELS.get(resource.kind, resource.kind.value)
                logger.warning("[bootstrap] %s ensure failed: %s", label, e)
                add_span_event(
                    "bootstrap.step_failed",
                    {"kind": resource.kind.value, "name": resource.name},
                )
                outcome = ResourceOutcome.failure(resource.kind, resource.name, str(e))
            else:
                if outcome.identifier:
                    identifiers[resource.kind] = outcome.identifier
            outcomes.append(outcome)

        report = BootstrapReport(tuple(outcomes))
        if report.ok:
            logger.info(
                "[bootstrap] Infrastructure ready (%d created)", len(report.created)
            )
        else:
            logger.warning(
                "[bootstrap] Completed with failures: %s",
                ", ".join(o.kind.value for o in report.failed),
            )
        return report
