"""traced decorator without a configured tracer provider."""

import pytest

from app.shared.telemetry import add_span_attributes, add_span_event, traced


@traced("test.async_op")
async def _async_op(value: int, *, task_id: str = "t1") -> int:
    add_span_attributes(task_id=task_id)
    add_span_event("test.event", {"value": value})
    return value * 2


@traced()
def _sync_op(value: int) -> int:
    if value < 0:
        raise ValueError("negative")
    return value + 1


async def test_async_function_result_passes_through() -> None:
    assert await _async_op(2, task_id="abc") == 4


def test_sync_function_result_passes_through() -> None:
    assert _sync_op(1) == 2


def test_exceptions_are_re_raised() -> None:
    with pytest.raises(ValueError, match="negative"):
        _sync_op(-1)


def test_wrapper_keeps_function_metadata() -> None:
    assert _sync_op.__name__ == "_sync_op"
    assert _async_op.__name__ == "_async_op"
