"""File-name matching."""


def matches(file_name: str, query: str) -> bool:
    """Return True if `query` occurs in `file_name` as a contiguous substring.

    Case-sensitive. An empty query matches every name.
    """
    return query in file_name
