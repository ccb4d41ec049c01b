"""In-memory counters, gauges and summaries rendered in Prometheus text format."""

from __future__ import annotations

import math
import threading
from collections.abc import Mapping
from dataclasses import dataclass

_U64 = 1 << 64
_I64 = 1 << 63

_HEADER = "# HELP dvt_up 1\n# TYPE dvt_up gauge\ndvt_up 1\n"


@dataclass(frozen=True, order=True)
class _Key:
    name: str
    labels: str
    pairs: tuple[tuple[str, str], ...]


def _key(name: str, labels: Mapping[str, str] | None) -> _Key:
    pairs = tuple(sorted((labels or {}).items()))
    return _Key(name, ",".join(f"{k}={v}" for k, v in pairs), pairs)


def _series(key: _Key, suffix: str = "") -> str:
    if not key.pairs:
        return key.name + suffix
    rendered = ",".join(f'{k}="{v}"' for k, v in key.pairs)
    return f"{key.name}{suffix}{{{rendered}}}"


def _wrap_i64(value: int) -> int:
    return (value + _I64) % _U64 - _I64


@dataclass
class _Summary:
    total: int = 0
    count: int = 0


class Registry:
    """A thread-safe set of named, labelled metrics."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counters: dict[_Key, int] = {}
        self._gauges: dict[_Key, int] = {}
        self._summaries: dict[_Key, _Summary] = {}

    def inc(self, name: str, labels: Mapping[str, str] | None = None) -> None:
        """Increment a counter by one."""
        key = _key(name, labels)
        with self._lock:
            self._counters[key] = (self._counters.get(key, 0) + 1) % _U64

    def observe_summary(
        self, name: str, labels: Mapping[str, str] | None, value: float
    ) -> None:
        """Record an observation; its integer part is added to the sum.

        NaN and infinite values are ignored.
        """
        if math.isnan(value) or math.isinf(value):
            return
        key = _key(name, labels)
        with self._lock:
            summary = self._summaries.setdefault(key, _Summary())
            summary.total = (summary.total + int(value)) % _U64
            summary.count = (summary.count + 1) % _U64

    def add_gauge(self, name: str, labels: Mapping[str, str] | None, delta: int) -> None:
        """Add a delta to a gauge."""
        key = _key(name, labels)
        with self._lock:
            self._gauges[key] = _wrap_i64(self._gauges.get(key, 0) + delta)

    def set_gauge(self, name: str, labels: Mapping[str, str] | None, value: int) -> None:
        """Set a gauge to a value."""
        key = _key(name, labels)
        with self._lock:
            self._gauges[key] = _wrap_i64(value)

    def dump_prom(self) -> str:
        """Render all metrics as Prometheus exposition text."""
        with self._lock:
            lines = [_HEADER]
            lines.extend(
                f"{_series(k)} {v}\n" for k, v in sorted(self._counters.items())
            )
            lines.extend(
                f"{_series(k)} {v}\n" for k, v in sorted(self._gauges.items())
            )
            for k, s in sorted(self._summaries.items(), key=lambda item: item[0]):
                lines.append(f"{_series(k, '_sum')} {s.total}\n")
                lines.append(f"{_series(k, '_count')} {s.count}\n")
            return "".join(lines)

    def reset(self) -> None:
        """Clear counters and summaries; gauges are kept."""
        with self._lock:
            self._counters.clear()
            self._summaries.clear()


_default = Registry()


def inc(name: str, labels: Mapping[str, str] | None = None) -> None:
    """Increment a counter in the default registry."""
    _default.inc(name, labels)


def observe_summary(name: str, labels: Mapping[str, str] | None, value: float) -> None:
    """Record a summary observation in the default registry."""
    _default.observe_summary(name, labels, value)


def add_gauge(name: str, labels: Mapping[str, str] | None, delta: int) -> None:
    """Add to a gauge in the default registry."""
    _default.add_gauge(name, labels, delta)


def set_gauge(name: str, labels: Mapping[str, str] | None, value: int) -> None:
    """Set a gauge in the default registry."""
    _default.set_gauge(name, labels, value)


def dump_prom() -> str:
    """Render the default registry as Prometheus text."""
    return _default.dump_prom()


def reset() -> None:
    """Clear counters and summaries of the default registry."""
    _default.reset()