"""Loading of cluster lock files."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class Operator:
    """One operator of a cluster."""

    index: int = 0
    peer_id: str = ""


@dataclass
class ClusterLock:
    """The cluster definition: name, signing threshold and operators."""

    name: str = ""
    threshold: int = 0
    operators: list[Operator] = field(default_factory=list)


def _lookup(obj: dict[str, Any], key: str) -> Any:
    """Find a key, preferring an exact match, then a case-insensitive one."""
    if key in obj:
        return obj[key]
    lowered = key.lower()
    return next((v for k, v in obj.items() if k.lower() == lowered), None)


def _as_int(value: Any, what: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"cannot decode {value!r} into integer field {what}")
    return value


def _as_str(value: Any, what: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"cannot decode {value!r} into string field {what}")
    return value


def _as_object(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"cannot decode {value!r} into object {what}")
    return value


def _operator(value: Any) -> Operator:
    if value is None:
        return Operator()
    obj = _as_object(value, "Operator")
    return Operator(
        index=_as_int(_lookup(obj, "index"), "index"),
        peer_id=_as_str(_lookup(obj, "peer_id"), "peer_id"),
    )


def load_cluster_lock(path: str | Path) -> ClusterLock:
    """Read and decode a cluster lock JSON file.

    Raises OSError when the file cannot be read and ValueError when its
    contents do not decode into a cluster lock.
    """
    data = json.loads(Path(path).read_bytes())
    if data is None:
        return ClusterLock()
    obj = _as_object(data, "ClusterLock")
    raw_ops = _lookup(obj, "operators")
    if raw_ops is None:
        operators: list[Operator] = []
    elif isinstance(raw_ops, list):
        operators = [_operator(op) for op in raw_ops]
    else:
        raise ValueError(f"cannot decode {raw_ops!r} into operators list")
    return ClusterLock(
        name=_as_str(_lookup(obj, "name"), "name"),
        threshold=_as_int(_lookup(obj, "threshold"), "threshold"),
        operators=operators,
    )