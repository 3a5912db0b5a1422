"""Ensure the Tasks table, images bucket, task-events topic and task-queue exist.

Usage:
    python -m scripts.bootstrap_infrastructure
Reads the same settings as the API (env and .env at the project root), runs
the bootstrap once and prints the report as JSON. Exits 1 if any step failed.
"""

import asyncio
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from app.core.config import get_settings
from app.infrastructure.bootstrap import (
    BootstrapOrchestrator,
    BootstrapReport,
    ResourceDescriptorSet,
)
from app.infrastructure.external.aws import AwsBackendFactory
from app.shared.telemetry.logging import setup_logging


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees LOCALSTACK_ENDPOINT etc. when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def run() -> BootstrapReport:
    settings = get_settings()
    descriptors = ResourceDescriptorSet.from_settings(settings)
    try:
        backends = AwsBackendFactory.create_backends(settings)
    except Exception as e:
        return BootstrapOrchestrator.unavailable_report(descriptors, str(e))
    orchestrator = BootstrapOrchestrator.from_backends(backends, descriptors)
    return await orchestrator.ensure_infrastructure()


def main() -> None:
    _load_env()
    get_settings.cache_clear()
    setup_logging()
    report = asyncio.run(run())
    print(json.dumps(report.to_dict(), indent=2))
    if not report.ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
