"""
Directory scanner: walks a root and streams matching file paths.

One `ScanRequest` per query. Scans run on a thread pool and are never joined
by the UI; a superseded scan is cancelled cooperatively through its event and
any output it still produces carries a stale generation.
"""

from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from ..config.constants import DEFAULT_MAX_WORKERS
from ..exceptions import ScanRootError
from .matcher import matches
from .stream import ResultStream, ScanMessage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanRequest:
    """A single query's scan: where to look, what to match, which generation."""

    root: Path
    query: str
    generation: int
    cancel_event: threading.Event = field(default_factory=threading.Event, compare=False)

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()

    def cancel(self) -> None:
        self.cancel_event.set()


def _root_error_handler(root: str):
    """os.walk onerror hook: abort on the root, skip anything below it."""
    normalized_root = os.path.normpath(root)

    def on_error(err: OSError) -> None:
        failed = err.filename
        if failed is None or os.path.normpath(os.fspath(failed)) == normalized_root:
            raise ScanRootError(err.strerror or str(err), root=root) from err
        logger.debug("Skipping unreadable entry %s: %s", failed, err)

    return on_error


def scan(request: ScanRequest, stream: ResultStream) -> int:
    """Walk `request.root` and put every matching file path on `stream`.

    Paths are relative to the root, in walk order. A root that cannot be read
    produces a single error message. Returns the number of matches sent.
    """
    root = os.fspath(request.root)
    sent = 0
    logger.debug("Scan gen=%d query=%r root=%s started", request.generation, request.query, root)

    try:
        for dirpath, _dirnames, filenames in os.walk(root, onerror=_root_error_handler(root)):
            if request.cancelled:
                logger.debug("Scan gen=%d cancelled", request.generation)
                return sent
            for name in filenames:
                if request.cancelled:
                    return sent
                if not matches(name, request.query):
                    continue
                rel_path = os.path.relpath(os.path.join(dirpath, name), root)
                if not stream.put(ScanMessage.match(request.generation, rel_path)):
                    return sent
                sent += 1
    except ScanRootError as e:
        logger.warning("Scan gen=%d failed: %s", request.generation, e)
        stream.put(ScanMessage.failure(request.generation, f"{e.message}: {root}"))
        return sent

    logger.debug("Scan gen=%d finished with %d matches", request.generation, sent)
    return sent


class Scanner:
    """Launches scans on a thread pool and tracks them in the stream's counter."""

    def __init__(self, stream: ResultStream, max_workers: int = DEFAULT_MAX_WORKERS):
        self.stream = stream
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="findr-scan"
        )

    def launch(self, request: ScanRequest) -> "Future[int]":
        """Start scanning in the background; returns immediately."""
        self.stream.in_flight.add()
        try:
            future = self._executor.submit(scan, request, self.stream)
        except RuntimeError:
            self.stream.in_flight.done()
            raise
        # Runs on completion, failure, or cancellation before start
        future.add_done_callback(self._on_scan_done)
        return future

    def _on_scan_done(self, future: "Future[int]") -> None:
        try:
            if not future.cancelled() and future.exception() is not None:
                logger.error("Scan crashed: %s", future.exception(), exc_info=future.exception())
        finally:
            self.stream.in_flight.done()

    def shutdown(self) -> None:
        """Stop accepting scans and drop any that have not started yet."""
        self._executor.shutdown(wait=False, cancel_futures=True)
