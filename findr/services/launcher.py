"""Open files with the platform's default application."""

import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Protocol, Union

from ..exceptions import LaunchError, UnsupportedPlatformError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class Launcher(Protocol):
    """Anything that can open a path; raises LaunchError on failure."""

    def __call__(self, path: PathLike) -> None:
        ...


def opener_command(path: PathLike, platform: Optional[str] = None) -> List[str]:
    """Build the command that opens `path` on `platform` (default: this one).

    Raises:
        UnsupportedPlatformError: when no opener is known.
    """
    platform = platform or sys.platform
    target = os.fspath(path)

    if platform.startswith("linux") or "bsd" in platform:
        return ["xdg-open", target]
    if platform.startswith("win"):
        return ["rundll32", "url.dll,FileProtocolHandler", target]
    if platform == "darwin":
        return ["open", target]

    raise UnsupportedPlatformError(platform=platform)


def open_path(path: PathLike, platform: Optional[str] = None) -> None:
    """Start the default application for `path` without waiting for it.

    Raises:
        LaunchError: unsupported platform, missing opener, or spawn failure.
    """
    cmd = opener_command(path, platform)
    logger.info("Opening %s with %s", path, cmd[0])
    try:
        subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        logger.error("Failed to launch %s for %s: %s", cmd[0], path, e)
        raise LaunchError(f"{cmd[0]}: {e.strerror or e}", path=str(path)) from e


def resolve_under_root(root: Path, relative: str) -> Path:
    """Join a scan-relative path back onto its root."""
    return Path(root) / relative
