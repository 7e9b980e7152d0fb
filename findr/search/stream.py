"""
Result stream shared by all scanners and the aggregator.

An unbounded multi-producer/single-consumer queue of `ScanMessage`s plus a
counter of scans still in flight, so shutdown can wait for every producer
before closing the stream.
"""

from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass
from typing import Optional

from ..config.constants import ERROR_PREFIX

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanMessage:
    """One item emitted by a scanner: a matched path or an error marker."""

    generation: int
    path: Optional[str] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.path is None) == (self.error is None):
            raise ValueError("ScanMessage needs exactly one of path or error")

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def text(self) -> str:
        """Display text: the path, or the error with its marker prefix."""
        if self.error is not None:
            return f"{ERROR_PREFIX}{self.error}"
        return self.path  # type: ignore[return-value]

    @classmethod
    def match(cls, generation: int, path: str) -> "ScanMessage":
        return cls(generation=generation, path=path)

    @classmethod
    def failure(cls, generation: int, error: str) -> "ScanMessage":
        return cls(generation=generation, error=error)


class InFlightCounter:
    """Counts running scans; `wait()` blocks until none are left."""

    def __init__(self) -> None:
        self._count = 0
        self._cond = threading.Condition()

    def add(self, n: int = 1) -> None:
        with self._cond:
            self._count += n

    def done(self) -> None:
        with self._cond:
            if self._count <= 0:
                raise RuntimeError("InFlightCounter.done() called more times than add()")
            self._count -= 1
            if self._count == 0:
                self._cond.notify_all()

    @property
    def count(self) -> int:
        with self._cond:
            return self._count

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the count reaches zero. Returns False on timeout."""
        with self._cond:
            return self._cond.wait_for(lambda: self._count == 0, timeout=timeout)


_CLOSED = object()


class ResultStream:
    """Unbounded MPSC stream of ScanMessages with an end-of-stream sentinel."""

    def __init__(self) -> None:
        self._queue: "queue.Queue[object]" = queue.Queue()
        self._closed = threading.Event()
        self.in_flight = InFlightCounter()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def put(self, message: ScanMessage) -> bool:
        """Enqueue a message. Returns False (message dropped) once closed."""
        if self._closed.is_set():
            return False
        self._queue.put(message)
        return True

    def get(self, timeout: Optional[float] = None) -> Optional[ScanMessage]:
        """Next message, or None once the stream has been closed and drained.

        Raises:
            queue.Empty: if `timeout` elapses with nothing to read.
        """
        item = self._queue.get(timeout=timeout)
        if item is _CLOSED:
            return None
        return item  # type: ignore[return-value]

    def close(self) -> None:
        """Mark end-of-stream. Call only after every producer has finished."""
        if self._closed.is_set():
            return
        if self.in_flight.count:
            logger.warning("Closing result stream with %d scans in flight", self.in_flight.count)
        self._closed.set()
        self._queue.put(_CLOSED)

    def __iter__(self):
        while True:
            message = self.get()
            if message is None:
                return
            yield message
