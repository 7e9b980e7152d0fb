"""
Search session: owns the query lifecycle and the selection.

Every query change starts a new generation. The shared state is reset (results
emptied, selection cleared) before the new scan is launched, the previous scan
is cancelled, and anything it still emits is discarded by the aggregator
because its generation is no longer current.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from ..config.constants import DEFAULT_MAX_WORKERS, DEFAULT_ROOT, SHUTDOWN_TIMEOUT_SECONDS
from ..exceptions import LaunchError, SessionClosedError
from ..services.launcher import Launcher, open_path, resolve_under_root
from .aggregator import Aggregator, AppendCallback, ErrorCallback
from .navigator import step_down, step_up
from .scanner import Scanner, ScanRequest
from .state import SearchState, SelectionView
from .stream import ResultStream

logger = logging.getLogger(__name__)


class ConfirmStatus(Enum):
    IGNORED = "ignored"
    OPENED = "opened"
    FAILED = "failed"


@dataclass(frozen=True)
class ConfirmResult:
    """Outcome of pressing Enter."""

    status: ConfirmStatus
    path: Optional[str] = None
    error: Optional[str] = None

    @property
    def opened(self) -> bool:
        return self.status is ConfirmStatus.OPENED


class SearchSession:
    """
    Coordinates scanners, the aggregator and the selection for one root.

    - `on_query_changed()` resets state and launches a scan, never blocking
    - `move_up()` / `move_down()` return snapshots for rendering
    - `confirm()` opens the selected file through the launcher
    - `close()` cancels scans, waits for them, then stops the aggregator
    """

    def __init__(
        self,
        root: Union[str, Path] = DEFAULT_ROOT,
        *,
        on_append: Optional[AppendCallback] = None,
        on_error: Optional[ErrorCallback] = None,
        launcher: Launcher = open_path,
        max_workers: int = DEFAULT_MAX_WORKERS,
        debounce_seconds: float = 0.0,
    ):
        self.root = Path(root)
        self.launcher = launcher
        self.debounce_seconds = debounce_seconds
        self.state = SearchState()
        self.stream = ResultStream()
        self.scanner = Scanner(self.stream, max_workers=max_workers)
        self.aggregator = Aggregator(self.stream, self.state, on_append, on_error)

        # Guards _current_request, _pending_timer and _closed
        self._launch_lock = threading.Lock()
        self._current_request: Optional[ScanRequest] = None
        self._pending_timer: Optional[threading.Timer] = None
        self._closed = False

        self.aggregator.start()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def generation(self) -> int:
        return self.state.generation

    @property
    def selected_index(self) -> int:
        return self.state.selected_index

    def is_current(self, generation: int) -> bool:
        return self.state.is_current(generation)

    def selection(self) -> SelectionView:
        return self.state.snapshot()

    # ------------------------------------------------------------------
    # Query lifecycle
    # ------------------------------------------------------------------

    def on_query_changed(self, query: str) -> int:
        """Reset results and selection, then start scanning for `query`.

        Returns the generation assigned to this query.

        Raises:
            SessionClosedError: after close().
        """
        with self._launch_lock:
            if self._closed:
                raise SessionClosedError(query=query)

            generation = self.state.reset()
            self._cancel_current()

            request = ScanRequest(root=self.root, query=query, generation=generation)
            self._current_request = request
            logger.debug("Query %r -> generation %d", query, generation)

            if self.debounce_seconds > 0:
                timer = threading.Timer(self.debounce_seconds, self._launch_deferred, args=(request,))
                timer.daemon = True
                self._pending_timer = timer
                timer.start()
            else:
                self.scanner.launch(request)

        return generation

    def _cancel_current(self) -> None:
        if self._pending_timer is not None:
            self._pending_timer.cancel()
            self._pending_timer = None
        if self._current_request is not None:
            self._current_request.cancel()

    def _launch_deferred(self, request: ScanRequest) -> None:
        with self._launch_lock:
            if self._closed or request.cancelled:
                return
            self._pending_timer = None
            self.scanner.launch(request)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def move_up(self) -> SelectionView:
        return self.state.move(lambda index, _count: step_up(index))

    def move_down(self) -> SelectionView:
        return self.state.move(step_down)

    # ------------------------------------------------------------------
    # Confirm
    # ------------------------------------------------------------------

    def selected_path(self, input_text: str) -> Optional[str]:
        return self.state.resolve_selection(input_text)

    def confirm(self, input_text: str) -> ConfirmResult:
        """Open the selected result with the launcher.

        Does nothing without a valid selection. A launch failure is returned,
        not raised, and leaves the search state untouched.
        """
        path = self.selected_path(input_text)
        if path is None:
            return ConfirmResult(ConfirmStatus.IGNORED)

        try:
            self.launcher(resolve_under_root(self.root, path))
        except LaunchError as e:
            return ConfirmResult(ConfirmStatus.FAILED, path=path, error=e.message)

        return ConfirmResult(ConfirmStatus.OPENED, path=path)

    # ------------------------------------------------------------------
    # Shutdown
    # ------------------------------------------------------------------

    def close(self, timeout: float = SHUTDOWN_TIMEOUT_SECONDS) -> bool:
        """Cancel and wait for all scans, then close the stream.

        Returns False if scanners or the aggregator did not stop in time.
        Safe to call more than once.
        """
        with self._launch_lock:
            if self._closed:
                return True
            self._closed = True
            self._cancel_current()

        self.scanner.shutdown()
        scans_done = self.stream.in_flight.wait(timeout)
        if not scans_done:
            logger.warning("%d scans still running at shutdown", self.stream.in_flight.count)

        self.stream.close()
        aggregator_done = self.aggregator.join(timeout)
        if not aggregator_done:
            logger.warning("Aggregator did not stop within %.1fs", timeout)

        logger.debug("Session closed")
        return scans_done and aggregator_done

    def __enter__(self) -> "SearchSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
