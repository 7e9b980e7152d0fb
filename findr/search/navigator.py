"""Selection movement and scroll positioning for the result list."""

NO_SELECTION = -1


def step_up(index: int) -> int:
    """Move selection up one row, stopping at the first row."""
    if index > 0:
        return index - 1
    return index


def step_down(index: int, count: int) -> int:
    """Move selection down one row, stopping at the last of `count` rows."""
    if index < count - 1:
        return index + 1
    return index


def compute_scroll_offset(selected_index: int, viewport_height: int) -> int:
    """Scroll offset that keeps the selected row centered in the viewport.

    Returns 0 while the viewport has no height yet.
    """
    if viewport_height <= 0:
        return 0
    return max(0, selected_index - viewport_height // 2)
