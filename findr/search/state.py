"""
Shared search state: the current generation, its result set and the selection.

Everything here is guarded by one lock. The session resets it from the UI
thread, the aggregator appends to it from its consumer thread, and navigation
reads it only through snapshots taken under the lock.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Set, Tuple

from .navigator import NO_SELECTION
from .stream import ScanMessage


class ResultSet:
    """Ordered, de-duplicated matched paths for the current query."""

    def __init__(self) -> None:
        self._paths: List[str] = []
        self._seen: Set[str] = set()

    def add(self, path: str) -> bool:
        """Append `path` unless already present. Returns True if appended."""
        if path in self._seen:
            return False
        self._seen.add(path)
        self._paths.append(path)
        return True

    def clear(self) -> None:
        self._paths.clear()
        self._seen.clear()

    def snapshot(self) -> Tuple[str, ...]:
        return tuple(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __getitem__(self, index: int) -> str:
        return self._paths[index]

    def __contains__(self, path: object) -> bool:
        return path in self._seen

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)


@dataclass(frozen=True)
class SelectionView:
    """Immutable snapshot of the results and selection, safe to render."""

    generation: int
    results: Tuple[str, ...]
    selected_index: int
    changed: bool = False

    @property
    def selected_path(self) -> Optional[str]:
        if 0 <= self.selected_index < len(self.results):
            return self.results[self.selected_index]
        return None


@dataclass(frozen=True)
class Accepted:
    """A path the aggregator appended: its generation and position."""

    generation: int
    index: int
    path: str


class SearchState:
    """Lock-guarded generation counter, result set and selection index."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._generation = 0
        self._results = ResultSet()
        self._selected_index = NO_SELECTION

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    @property
    def selected_index(self) -> int:
        with self._lock:
            return self._selected_index

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)

    def reset(self) -> int:
        """Start a new generation: empty results, no selection.

        Returns the new generation number.
        """
        with self._lock:
            self._generation += 1
            self._results.clear()
            self._selected_index = NO_SELECTION
            return self._generation

    def is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def accept(self, message: ScanMessage) -> Optional[Accepted]:
        """Append a path message if it is current and new.

        Returns None for stale generations and duplicates.
        """
        if message.is_error:
            raise ValueError("accept() takes path messages only")
        with self._lock:
            if message.generation != self._generation:
                return None
            if not self._results.add(message.path):
                return None
            return Accepted(message.generation, len(self._results) - 1, message.path)

    def move(self, step: Callable[[int, int], int]) -> SelectionView:
        """Apply `step(index, count)` to the selection under the lock."""
        with self._lock:
            before = self._selected_index
            after = step(before, len(self._results))
            if not NO_SELECTION <= after < len(self._results):
                after = before
            self._selected_index = after
            return SelectionView(
                self._generation, self._results.snapshot(), after, changed=after != before
            )

    def snapshot(self) -> SelectionView:
        with self._lock:
            return SelectionView(
                self._generation, self._results.snapshot(), self._selected_index
            )

    def resolve_selection(self, input_text: str) -> Optional[str]:
        """Path to act on for Enter, or None when confirm should do nothing.

        Bounds are checked against the result set length only.
        """
        with self._lock:
            index = self._selected_index
            if not 0 <= index < len(self._results):
                return None
            if not input_text and index < 0:
                return None
            return self._results[index]
