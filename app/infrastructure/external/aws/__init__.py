"""AWS clients: backend factory and botocore error helpers.

Adapters are built by AwsBackendFactory.create_backends() from
app.core.config; tests substitute in-memory backends through AwsBackends.
"""

from app.infrastructure.external.aws.factory import AwsBackendFactory, AwsBackends

__all__ = [
    "AwsBackendFactory",
    "AwsBackends",
]
