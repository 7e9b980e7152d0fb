"""
Finder TUI.

Provides:
- FinderApp: Textual app with the search input and result list
- ResultView: result list widget
"""

from .finder_app import FinderApp, run_finder
from .result_view import ResultView

__all__ = [
    "FinderApp",
    "ResultView",
    "run_finder",
]
