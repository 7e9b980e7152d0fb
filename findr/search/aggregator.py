"""
Aggregator: the single consumer of the result stream.

Drops messages from superseded generations, de-duplicates paths, appends new
ones to the shared result set and reports each accepted line exactly once.
Callbacks run on the aggregator thread after the state lock is released, so
they must hand work to the UI without blocking on it.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from .state import Accepted, SearchState
from .stream import ResultStream, ScanMessage

logger = logging.getLogger(__name__)

AppendCallback = Callable[[Accepted], None]
ErrorCallback = Callable[[int, str], None]


class Aggregator:
    """Consumes ScanMessages on a dedicated daemon thread."""

    def __init__(
        self,
        stream: ResultStream,
        state: SearchState,
        on_append: Optional[AppendCallback] = None,
        on_error: Optional[ErrorCallback] = None,
    ):
        self.stream = stream
        self.state = state
        self.on_append = on_append
        self.on_error = on_error
        self.dropped_stale = 0
        self.dropped_duplicates = 0
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self._run, name="findr-aggregator", daemon=True
        )
        self._thread.start()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the consumer to exit. Returns False if it is still running."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _run(self) -> None:
        logger.debug("Aggregator started")
        for message in self.stream:
            try:
                self.handle(message)
            except Exception as e:
                logger.error("Aggregator failed on %r: %s", message, e, exc_info=True)
        logger.debug(
            "Aggregator stopped (stale=%d, duplicates=%d)",
            self.dropped_stale,
            self.dropped_duplicates,
        )

    def handle(self, message: ScanMessage) -> Optional[Accepted]:
        """Process one message. Returns the accepted entry, if any."""
        if message.is_error:
            if not self.state.is_current(message.generation):
                self.dropped_stale += 1
                return None
            if self.on_error:
                self.on_error(message.generation, message.text)
            return None

        accepted = self.state.accept(message)
        if accepted is None:
            if self.state.is_current(message.generation):
                self.dropped_duplicates += 1
            else:
                self.dropped_stale += 1
            return None

        if self.on_append:
            self.on_append(accepted)
        return accepted
