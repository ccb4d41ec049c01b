"""Plain-text and JSON line logging to standard output."""

from __future__ import annotations

import json
import sys
from datetime import datetime, timedelta
from typing import Any, TextIO

_output: TextIO | None = None

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def set_output(stream: TextIO | None) -> None:
    """Direct log lines to a stream; None restores standard output."""
    global _output
    _output = stream


def _stream() -> TextIO:
    return _output if _output is not None else sys.stdout


def _timestamp(now: datetime | None = None) -> str:
    """Format a local time as RFC 3339 with trailing fractional zeros trimmed."""
    now = now or datetime.now().astimezone()
    text = now.strftime("%Y-%m-%dT%H:%M:%S")
    if now.microsecond:
        text += "." + f"{now.microsecond:06d}".rstrip("0")
    offset = now.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return text + "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _write(line: str) -> None:
    stream = _stream()
    stream.write(line + "\n")
    stream.flush()


def _log(tag: str, msg: str) -> None:
    _write(f"{_timestamp()} {tag} {msg}")


def info(msg: str) -> None:
    """Log an informational text line."""
    _log("INFO", msg)


def warn(msg: str) -> None:
    """Log a warning text line."""
    _log("WARN", msg)


def error(msg: str) -> None:
    """Log an error text line."""
    _log("ERRO", msg)


def _encode(record: dict[str, Any]) -> str:
    text = json.dumps(
        record, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=str
    )
    for char, escaped in _JSON_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


def _log_json(level: str, msg: str, fields: dict[str, Any] | None) -> None:
    record = dict(fields or {})
    record["level"] = level
    record["ts"] = _timestamp()
    record["msg"] = msg
    _write(_encode(record))


def info_j(msg: str, fields: dict[str, Any] | None = None) -> None:
    """Log an informational JSON line with extra fields."""
    _log_json("info", msg, fields)


def warn_j(msg: str, fields: dict[str, Any] | None = None) -> None:
    """Log a warning JSON line with extra fields."""
    _log_json("warn", msg, fields)


def error_j(msg: str, fields: dict[str, Any] | None = None) -> None:
    """Log an error JSON line with extra fields."""
    _log_json("error", msg, fields)