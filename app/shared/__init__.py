"""Shared utilities: telemetry, datetime and identity helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.utils import (
    ensure_utc,
    generate_id,
    to_iso_z,
    utc_now,
    utc_now_iso,
)

__all__ = [
    "generate_id",
    "utc_now",
    "utc_now_iso",
    "ensure_utc",
    "to_iso_z",
]
