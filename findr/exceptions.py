"""Custom exception hierarchy for findr.

Exception Hierarchy:
    FindrError (base)
    ├── ScanError - directory walk problems
    │   └── ScanRootError
    ├── LaunchError - opening a file with the default application
    │   └── UnsupportedPlatformError
    ├── ConfigurationError - settings / CLI values
    └── SessionClosedError - search session already shut down

Usage:
    from findr.exceptions import LaunchError

    try:
        subprocess.Popen(cmd)
    except OSError as e:
        raise LaunchError("Failed to start opener", path=path) from e
"""

from typing import Any, Optional


class FindrError(Exception):
    """Base exception for all findr errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., paths, platforms)
        retryable: Whether this error might succeed on retry
    """

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        **context: Any,
    ) -> None:
        self.message = message
        self.context = context
        self.retryable = retryable
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Scan Errors
# =============================================================================


class ScanError(FindrError):
    """Base exception for directory scanning."""

    pass


class ScanRootError(ScanError):
    """The scan root could not be walked at all."""

    def __init__(
        self,
        message: str = "Cannot scan root directory",
        *,
        root: Optional[str] = None,
        **context: Any,
    ) -> None:
        if root:
            context["root"] = root
        super().__init__(message, **context)


# =============================================================================
# Launch Errors
# =============================================================================


class LaunchError(FindrError):
    """Opening a file with its default application failed."""

    def __init__(
        self,
        message: str = "Failed to open file",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


class UnsupportedPlatformError(LaunchError):
    """No default-application opener is known for this platform."""

    def __init__(
        self,
        message: str = "unsupported platform",
        *,
        platform: Optional[str] = None,
        **context: Any,
    ) -> None:
        if platform:
            context["platform"] = platform
        super().__init__(message, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(FindrError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)


# =============================================================================
# Session Errors
# =============================================================================


class SessionClosedError(FindrError):
    """A query was submitted to a session that has been closed."""

    def __init__(self, message: str = "Search session is closed", **context: Any) -> None:
        super().__init__(message, **context)
