"""Identity generators for tasks and uploaded images (CUID2)."""

from cuid2 import cuid_wrapper

_next_id = cuid_wrapper()


def generate_id() -> str:
    """Return a fresh, globally unique identity.

    CUID2 values are collision-resistant across processes and hosts, so two
    service instances may generate task and image identities independently.
    """
    value = _next_id()
    if not isinstance(value, str) or not value:
        raise TypeError(f"Expected non-empty str from CUID2, got {value!r}")
    return value
