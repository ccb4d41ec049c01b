"""Propagation of a trace id through the current execution context."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

_trace_id: ContextVar[str | None] = ContextVar("trace_id", default=None)


@contextmanager
def with_trace_id(trace_id: str) -> Iterator[None]:
    """Carry a trace id for the duration of the block; an empty id changes nothing."""
    if not trace_id:
        yield
        return
    token = _trace_id.set(trace_id)
    try:
        yield
    finally:
        _trace_id.reset(token)


def current_trace_id() -> str | None:
    """Return the trace id in effect, or None if there is none."""
    return _trace_id.get() or None