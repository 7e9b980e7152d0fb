"""
Protocols for the rendering side of the finder.

The search session never touches widgets; the app drives any object that
implements ResultRenderer.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class ResultRenderer(Protocol):
    """Minimal interface for a scrollable result list."""

    entry_count: int
    """Number of result entries currently drawn (error lines excluded)."""

    def clear(self) -> object:
        """Remove every line."""
        ...

    def append_line(self, text: str, selected: bool = False) -> None:
        """Draw one more result line at the bottom."""
        ...

    def set_full_text(self, lines: Sequence[str], selected_index: int) -> None:
        """Redraw the whole list, highlighting `selected_index`."""
        ...

    def viewport_height(self) -> int:
        """Visible rows, or 0 before the widget has been laid out."""
        ...

    def scroll_to_line(self, offset: int) -> None:
        """Make `offset` the first visible row."""
        ...
