"""
Finder TUI - type part of a file name, pick a result, open it.

The app is the only place that touches widgets. Scan results arrive on the
aggregator thread and are posted here as messages; each one is checked
against the session's current generation before it is drawn, because a
result accepted just before a query change can still be waiting in the
message queue.
"""

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Input, Label

from ..config.constants import (
    INPUT_FIELD_WIDTH,
    INPUT_LABEL,
    INPUT_PLACEHOLDER,
    LAUNCH_ERROR_PREFIX,
)
from ..config.settings import FinderSettings
from ..search.navigator import compute_scroll_offset
from ..search.session import ConfirmStatus, SearchSession
from ..search.state import Accepted, SelectionView
from ..services.launcher import Launcher, open_path
from .protocols import ResultRenderer
from .result_view import ResultView

logger = logging.getLogger(__name__)


class ResultAppended(Message):
    """A new path was accepted into the result set."""

    def __init__(self, generation: int, index: int, path: str) -> None:
        super().__init__()
        self.generation = generation
        self.index = index
        self.path = path


class ScanFailed(Message):
    """The current scan could not walk its root."""

    def __init__(self, generation: int, text: str) -> None:
        super().__init__()
        self.generation = generation
        self.text = text


class FinderApp(App):
    """Incremental file-name search over one directory tree."""

    TITLE = "findr"

    CSS = """
    #search-bar {
        dock: top;
        height: 1;
        padding: 0 1;
    }

    #search-label {
        width: auto;
        height: 1;
        text-style: bold;
    }

    #search-input {
        height: 1;
        border: none;
        padding: 0;
    }
    """

    BINDINGS = [
        Binding("up", "move_up", "Up", show=False, priority=True),
        Binding("down", "move_down", "Down", show=False, priority=True),
        Binding("escape", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit", show=False),
    ]

    def __init__(
        self,
        settings: Optional[FinderSettings] = None,
        launcher: Launcher = open_path,
    ):
        super().__init__()
        self.settings = settings or FinderSettings()
        self.launcher = launcher
        self.session: Optional[SearchSession] = None

    def compose(self) -> ComposeResult:
        with Horizontal(id="search-bar"):
            yield Label(INPUT_LABEL, id="search-label")
            input_field = Input(placeholder=INPUT_PLACEHOLDER, id="search-input")
            input_field.styles.width = INPUT_FIELD_WIDTH
            yield input_field
        yield ResultView(id="results")

    def on_mount(self) -> None:
        self.session = SearchSession(
            self.settings.root,
            on_append=self._post_append,
            on_error=self._post_error,
            launcher=self.launcher,
            max_workers=self.settings.max_workers,
            debounce_seconds=self.settings.debounce_seconds,
        )
        logger.info("Finder started at %s", self.settings.root.resolve())
        self.query_one("#search-input", Input).focus()

    def on_unmount(self) -> None:
        if self.session is not None:
            self.session.close()

    @property
    def result_view(self) -> ResultView:
        return self.query_one("#results", ResultView)

    # ------------------------------------------------------------------
    # Aggregator thread -> UI
    # ------------------------------------------------------------------

    def _post_append(self, accepted: Accepted) -> None:
        self.post_message(ResultAppended(accepted.generation, accepted.index, accepted.path))

    def _post_error(self, generation: int, text: str) -> None:
        self.post_message(ScanFailed(generation, text))

    def on_result_appended(self, message: ResultAppended) -> None:
        if self.session is None or not self.session.is_current(message.generation):
            return
        results = self.result_view
        if message.index < results.entry_count:
            # Already drawn by a full redraw after navigation
            return
        if message.index > results.entry_count:
            logger.warning(
                "Result %d arrived with %d drawn; redrawing", message.index, results.entry_count
            )
            self._render_selection(self.session.selection())
            return
        results.append_line(message.path)

    def on_scan_failed(self, message: ScanFailed) -> None:
        if self.session is None or not self.session.is_current(message.generation):
            return
        self.result_view.append_error(message.text)

    # ------------------------------------------------------------------
    # Input events
    # ------------------------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        if self.session is None:
            return
        self.result_view.clear()
        self.session.on_query_changed(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if self.session is None:
            return
        result = self.session.confirm(event.value)
        if result.status is ConfirmStatus.IGNORED:
            return
        if result.status is ConfirmStatus.FAILED:
            logger.warning("Could not open %s: %s", result.path, result.error)
            self.result_view.show_error(f"{LAUNCH_ERROR_PREFIX}{result.error}")
            return

        # Clear the query but keep the current results on screen
        input_field = event.input
        with input_field.prevent(Input.Changed):
            input_field.value = ""

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def action_move_up(self) -> None:
        if self.session is None:
            return
        view = self.session.move_up()
        if view.changed:
            self._render_selection(view)

    def action_move_down(self) -> None:
        if self.session is None:
            return
        view = self.session.move_down()
        if view.changed:
            self._render_selection(view)

    def _render_selection(self, view: SelectionView) -> None:
        results: ResultRenderer = self.result_view
        results.set_full_text(view.results, view.selected_index)
        results.scroll_to_line(
            compute_scroll_offset(view.selected_index, results.viewport_height())
        )


def run_finder(settings: FinderSettings, launcher: Launcher = open_path) -> None:
    """Run the finder until the user quits."""
    FinderApp(settings, launcher=launcher).run()
