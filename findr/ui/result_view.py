"""Result list widget for the finder."""

import logging
from typing import Sequence

from rich.text import Text
from textual.widgets import RichLog

from ..config.constants import SELECTION_MARKER, SELECTION_STYLE

logger = logging.getLogger(__name__)


def format_result_line(path: str, selected: bool = False) -> Text:
    """Render one result; the selected one is bracketed, colored and marked."""
    if not selected:
        return Text(path)
    return Text.assemble("[", (path, SELECTION_STYLE), "]", SELECTION_MARKER)


def format_error_line(message: str) -> Text:
    return Text(message, style="bold red")


class ResultView(RichLog):
    """Append-only result list with a full redraw for selection changes."""

    DEFAULT_CSS = """
    ResultView {
        height: 1fr;
        border: none;
        padding: 0 1;
        background: $background;
    }
    """

    can_focus = False

    def __init__(self, **kwargs):
        super().__init__(wrap=False, markup=False, highlight=False, auto_scroll=False, **kwargs)
        self.entry_count = 0

    def clear(self) -> "ResultView":
        super().clear()
        self.entry_count = 0
        return self

    def append_line(self, text: str, selected: bool = False) -> None:
        self.write(format_result_line(text, selected))
        self.entry_count += 1

    def append_error(self, message: str) -> None:
        """Show a scan error below the current entries."""
        self.write(format_error_line(message))

    def show_error(self, message: str) -> None:
        """Replace what is drawn with a single error line.

        Entries arriving afterwards are still appended below it.
        """
        super().clear()
        self.write(format_error_line(message))

    def set_full_text(self, lines: Sequence[str], selected_index: int) -> None:
        super().clear()
        for index, line in enumerate(lines):
            self.write(format_result_line(line, index == selected_index))
        self.entry_count = len(lines)

    def viewport_height(self) -> int:
        return self.scrollable_content_region.height

    def scroll_to_line(self, offset: int) -> None:
        self.scroll_to(y=offset, animate=False)
