"""Logging utilities for findr.

Modules use the standard pattern:

    import logging
    logger = logging.getLogger(__name__)

and the TUI calls `setup_tui_logging()` once at startup. Everything goes to a
rotating file because writing to stderr would draw over the Textual screen.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..config.constants import (
    FINDR_CONFIG_DIR,
    LOG_BACKUP_COUNT,
    LOG_FILE_NAME,
    LOG_MAX_BYTES,
)

_FORMAT = "%(asctime)s - %(name)s - %(threadName)s - %(levelname)s - %(message)s"


def setup_tui_logging(
    level: str = "INFO",
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """
    Set up file logging for the TUI.

    The root logger is set to WARNING to avoid noise from third-party libs
    (textual, asyncio). findr's own loggers (findr.*) use `level`.

    Returns:
        The "findr" package logger.
    """
    findr_logger = logging.getLogger("findr")
    findr_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    try:
        log_dir = log_dir or FINDR_CONFIG_DIR
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LOG_FILE_NAME

        root = logging.getLogger()
        if not root.handlers:
            handler = RotatingFileHandler(
                log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
            )
            handler.setFormatter(logging.Formatter(_FORMAT))
            logging.basicConfig(level=logging.WARNING, handlers=[handler])
    except OSError as e:
        # We can't log this failure since logging is what's failing
        import sys
        print(f"Warning: TUI logging setup failed: {e}", file=sys.stderr)

    return findr_logger
