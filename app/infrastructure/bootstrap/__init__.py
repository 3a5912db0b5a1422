"""Infrastructure bootstrap: idempotently ensure table, bucket, topic, queue and subscription.

Usage:
    descriptors = ResourceDescriptorSet.from_settings(settings)
    report = await BootstrapOrchestrator.from_backends(backends, descriptors).ensure_infrastructure()
    context = build_infrastructure_context(settings, report)
"""

from app.infrastructure.bootstrap.context import build_infrastructure_context
from app.infrastructure.bootstrap.descriptors import (
    BucketDescriptor,
    QueueDescriptor,
    ResourceDescriptorSet,
    SubscriptionDescriptor,
    TableDescriptor,
    TopicDescriptor,
    build_queue_policy,
)
from app.infrastructure.bootstrap.orchestrator import BootstrapOrchestrator
from app.infrastructure.bootstrap.report import BootstrapReport, ResourceOutcome
from app.infrastructure.bootstrap.resources import (
    BucketResource,
    ManagedResource,
    QueueResource,
    TableResource,
    TopicResource,
)

__all__ = [
    "BootstrapOrchestrator",
    "BootstrapReport",
    "BucketDescriptor",
    "BucketResource",
    "ManagedResource",
    "QueueDescriptor",
    "QueueResource",
    "ResourceDescriptorSet",
    "ResourceOutcome",
    "SubscriptionDescriptor",
    "TableDescriptor",
    "TableResource",
    "TopicDescriptor",
    "TopicResource",
    "build_infrastructure_context",
    "build_queue_policy",
]
