"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Startup configures logging and
telemetry, then runs the infrastructure bootstrap before the app accepts
traffic. The bootstrap never blocks startup: failed steps are logged and
reported on /health/ready.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import Settings, get_settings
from app.infrastructure.bootstrap import (
    BootstrapOrchestrator,
    BootstrapReport,
    ResourceDescriptorSet,
    build_infrastructure_context,
)
from app.infrastructure.external.aws import AwsBackendFactory, AwsBackends
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


async def initialize_infrastructure(
    app: FastAPI,
    backends: AwsBackends | None = None,
    settings: Settings | None = None,
) -> BootstrapReport:
    """Ensure resources and store backends, report and context on app.state.

    Uses backends already on app.state (e.g. injected by create_app) when
    none are passed; otherwise builds boto3 backends from settings.
    """
    s = settings or get_settings()
    descriptors = ResourceDescriptorSet.from_settings(s)
    backends = backends or getattr(app.state, "backends", None)
    if backends is None:
        try:
            backends = AwsBackendFactory.create_backends(s)
        except Exception as e:
            # Bad endpoint or region: serve anyway, every step reported failed.
            logger.warning("[bootstrap] Could not build AWS clients: %s", e)
            backends = None
            report = BootstrapOrchestrator.unavailable_report(descriptors, str(e))

    if backends is not None:
        orchestrator = BootstrapOrchestrator.from_backends(backends, descriptors)
        report = await orchestrator.ensure_infrastructure()

    app.state.backends = backends
    app.state.bootstrap_report = report
    app.state.infra_context = build_infrastructure_context(s, report)
    return report


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, telemetry (if enabled), infrastructure bootstrap.
    Shutdown: telemetry flush.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    if settings.telemetry_enabled:
        from app.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        telemetry.instrument_botocore()
        telemetry.instrument_logging()
        logger.info("Telemetry initialized")

    report = await initialize_infrastructure(app, settings=settings)
    if not report.ok:
        logger.warning(
            "Serving with degraded infrastructure; failed steps: %s",
            ", ".join(o.kind.value for o in report.failed),
        )

    yield

    # ---- Shutdown ----
    from app.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
