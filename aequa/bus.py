"""A small in-process event bus with a bounded buffer that drops on backpressure."""

from __future__ import annotations

import queue
from dataclasses import dataclass
from enum import Enum
from typing import Any

DEFAULT_SIZE = 128


class Kind(str, Enum):
    """Kinds of events carried on the bus."""

    DUTY = "duty"
    CONSENSUS = "consensus"
    TX = "tx"


@dataclass
class Event:
    """An event published on the bus."""

    kind: Kind
    height: int = 0
    round: int = 0
    body: Any = None
    trace_id: str = ""


class Bus:
    """A single bounded channel shared by publishers and subscribers."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            size = DEFAULT_SIZE
        self._queue: queue.Queue[Event] = queue.Queue(maxsize=size)

    def publish(self, event: Event) -> bool:
        """Enqueue an event; drop it silently when the buffer is full.

        Returns True if the event was enqueued.
        """
        try:
            self._queue.put_nowait(event)
        except queue.Full:
            return False
        return True

    def subscribe(self) -> queue.Queue[Event]:
        """Return the queue events are delivered on."""
        return self._queue