"""Tests for the result set and the lock-guarded search state."""

import threading

import pytest

from findr.search.navigator import NO_SELECTION, step_down, step_up
from findr.search.state import ResultSet, SearchState, SelectionView
from findr.search.stream import ScanMessage


class TestResultSet:
    def test_add_preserves_first_arrival_order(self):
        results = ResultSet()
        for path in ["b.txt", "a.txt", "c.txt"]:
            assert results.add(path)
        assert list(results) == ["b.txt", "a.txt", "c.txt"]

    def test_duplicate_is_rejected(self):
        results = ResultSet()
        assert results.add("a.txt")
        assert not results.add("a.txt")
        assert len(results) == 1
        assert results.snapshot() == ("a.txt",)

    def test_sequence_and_seen_set_stay_in_sync(self):
        results = ResultSet()
        for path in ["x", "y", "x", "z", "y"]:
            results.add(path)
        assert list(results) == ["x", "y", "z"]
        assert all(path in results for path in results)

    def test_clear_empties_both(self):
        results = ResultSet()
        results.add("a.txt")
        results.clear()
        assert len(results) == 0
        assert "a.txt" not in results
        assert results.add("a.txt")


def _fill(state: SearchState, paths):
    generation = state.reset()
    for path in paths:
        state.accept(ScanMessage.match(generation, path))
    return generation


class TestSearchState:
    def test_reset_bumps_generation_and_clears(self):
        state = SearchState()
        first = _fill(state, ["a", "b"])
        state.move(step_down)

        second = state.reset()

        assert second == first + 1
        assert len(state) == 0
        assert state.selected_index == NO_SELECTION

    def test_accept_returns_position(self):
        state = SearchState()
        generation = state.reset()
        first = state.accept(ScanMessage.match(generation, "a"))
        second = state.accept(ScanMessage.match(generation, "b"))
        assert (first.index, first.path) == (0, "a")
        assert (second.index, second.path) == (1, "b")

    def test_accept_drops_stale_generation(self):
        state = SearchState()
        old = state.reset()
        state.reset()
        assert state.accept(ScanMessage.match(old, "a")) is None
        assert len(state) == 0

    def test_accept_drops_duplicates(self):
        state = SearchState()
        generation = state.reset()
        assert state.accept(ScanMessage.match(generation, "a")) is not None
        assert state.accept(ScanMessage.match(generation, "a")) is None
        assert len(state) == 1

    def test_accept_rejects_error_messages(self):
        state = SearchState()
        with pytest.raises(ValueError):
            state.accept(ScanMessage.failure(state.reset(), "boom"))

    def test_move_reports_change(self):
        state = SearchState()
        _fill(state, ["a", "b"])

        view = state.move(step_down)
        assert isinstance(view, SelectionView)
        assert view.changed
        assert view.selected_index == 0
        assert view.selected_path == "a"
        assert view.results == ("a", "b")

        view = state.move(lambda index, _count: step_up(index))
        assert not view.changed
        assert view.selected_index == 0

    def test_move_ignores_out_of_range_step(self):
        state = SearchState()
        _fill(state, ["a"])
        view = state.move(lambda index, count: count + 5)
        assert view.selected_index == NO_SELECTION
        assert not view.changed

    def test_resolve_selection_requires_valid_index(self):
        state = SearchState()
        _fill(state, ["a", "b"])
        assert state.resolve_selection("q") is None

        state.move(step_down)
        state.move(step_down)
        assert state.resolve_selection("q") == "b"

    def test_resolve_selection_after_reset_is_none(self):
        state = SearchState()
        _fill(state, ["a"])
        state.move(step_down)
        state.reset()
        assert state.resolve_selection("") is None

    def test_concurrent_accepts_and_resets_keep_invariants(self):
        state = SearchState()
        stop = threading.Event()

        def producer():
            n = 0
            while not stop.is_set():
                state.accept(ScanMessage.match(state.generation, f"f{n % 50}"))
                n += 1

        thread = threading.Thread(target=producer)
        thread.start()
        try:
            for _ in range(200):
                state.reset()
                view = state.snapshot()
                assert len(view.results) == len(set(view.results))
                assert view.selected_index == NO_SELECTION
        finally:
            stop.set()
            thread.join()
