"""
Incremental file-name search pipeline.

Provides:
- SearchSession: query lifecycle, selection and confirm
- Scanner / scan: background directory walks
- Aggregator: de-duplicating consumer of scan results
"""

from .aggregator import Aggregator
from .matcher import matches
from .navigator import compute_scroll_offset, step_down, step_up
from .scanner import Scanner, ScanRequest, scan
from .session import ConfirmResult, ConfirmStatus, SearchSession
from .state import Accepted, ResultSet, SearchState, SelectionView
from .stream import ResultStream, ScanMessage

__all__ = [
    "Accepted",
    "Aggregator",
    "ConfirmResult",
    "ConfirmStatus",
    "ResultSet",
    "ResultStream",
    "ScanMessage",
    "ScanRequest",
    "Scanner",
    "SearchSession",
    "SearchState",
    "SelectionView",
    "compute_scroll_offset",
    "matches",
    "scan",
    "step_down",
    "step_up",
]
