"""Shared utilities: datetime and ID generators."""

from app.shared.utils.datetime import ensure_utc, to_iso_z, utc_now, utc_now_iso
from app.shared.utils.generators import generate_id

__all__ = [
    "generate_id",
    "utc_now",
    "utc_now_iso",
    "ensure_utc",
    "to_iso_z",
]
