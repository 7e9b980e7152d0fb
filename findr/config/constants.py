"""
Centralized constants for findr.

Magic strings and numbers used across the search pipeline and the TUI live
here so behavior can be tuned in one place.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

FINDR_CONFIG_DIR = Path.home() / ".config" / "findr"
LOG_FILE_NAME = "findr.log"

# Max log file size: 5MB, keep 2 backups
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 2

# =============================================================================
# SEARCH PIPELINE
# =============================================================================

DEFAULT_ROOT = "."
DEFAULT_MAX_WORKERS = 4  # Concurrent scanner threads
DEFAULT_DEBOUNCE_MS = 0  # 0 = launch a scan on every keystroke
SHUTDOWN_TIMEOUT_SECONDS = 5.0  # Max wait for scanners/aggregator on exit

# Prefix that distinguishes an error marker from a real path in the result stream
ERROR_PREFIX = "Error: "

# =============================================================================
# UI
# =============================================================================

INPUT_LABEL = "Search: "
INPUT_PLACEHOLDER = "Type part of a file name..."
INPUT_FIELD_WIDTH = 30
SELECTION_MARKER = " <-----------"
SELECTION_STYLE = "green"
LAUNCH_ERROR_PREFIX = "Error opening file: "

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS = {
    "FINDR_DEBOUNCE_MS": {
        "description": "Quiet period in milliseconds before a query change starts a scan",
        "default": str(DEFAULT_DEBOUNCE_MS),
        "valid_values": None,
        "min_value": 0,
    },
    "FINDR_MAX_WORKERS": {
        "description": "Maximum number of scanner threads running at once",
        "default": str(DEFAULT_MAX_WORKERS),
        "valid_values": None,
        "min_value": 1,
    },
    "FINDR_LOG_LEVEL": {
        "description": "Log level for findr's own loggers",
        "default": "INFO",
        "valid_values": ["DEBUG", "INFO", "WARNING", "ERROR"],
    },
    "FINDR_LOG_DIR": {
        "description": "Directory for the rotating log file",
        "default": None,
        "valid_values": None,
    },
}
