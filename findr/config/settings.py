"""Configuration utilities for findr."""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Optional, Tuple

from ..exceptions import ConfigurationError
from .constants import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_ROOT,
    ENV_VAR_DEFINITIONS,
    FINDR_CONFIG_DIR,
)


@dataclass(frozen=True)
class FinderSettings:
    """Resolved runtime settings for one findr session."""

    root: Path = Path(DEFAULT_ROOT)
    debounce_seconds: float = 0.0
    max_workers: int = DEFAULT_MAX_WORKERS
    log_level: str = "INFO"
    log_dir: Path = FINDR_CONFIG_DIR

    def with_overrides(
        self,
        *,
        root: Optional[Path] = None,
        debounce_ms: Optional[int] = None,
        verbose: bool = False,
    ) -> "FinderSettings":
        """Apply CLI overrides on top of environment-derived settings."""
        updated = self
        if root is not None:
            updated = replace(updated, root=root)
        if debounce_ms is not None:
            if debounce_ms < 0:
                raise ConfigurationError(
                    "Debounce must not be negative", setting="--debounce-ms", value=debounce_ms
                )
            updated = replace(updated, debounce_seconds=debounce_ms / 1000.0)
        if verbose:
            updated = replace(updated, log_level="DEBUG")
        return updated


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS or value is None:
        return True, None

    definition = ENV_VAR_DEFINITIONS[name]

    valid_values = definition.get("valid_values")
    if valid_values is not None:
        if value.upper() not in [v.upper() for v in valid_values]:
            return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"
        return True, None

    min_value = definition.get("min_value")
    if min_value is not None:
        try:
            number = int(value)
        except ValueError:
            return False, f"Invalid value '{value}' for {name}. Expected an integer"
        if number < min_value:
            return False, f"Invalid value '{value}' for {name}. Must be >= {min_value}"

    return True, None


def validate_all_env_vars() -> List[str]:
    """Validate all findr environment variables.

    Returns:
        List of error messages (empty if all valid).
    """
    errors = []
    for name in ENV_VAR_DEFINITIONS:
        is_valid, error = validate_env_var(name, os.environ.get(name))
        if not is_valid:
            errors.append(error)
    return errors


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable with optional validation.

    Raises:
        ConfigurationError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name)

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise ConfigurationError(error, setting=name)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value


def load_settings() -> FinderSettings:
    """Build FinderSettings from FINDR_* environment variables."""
    debounce_ms = int(get_env_var("FINDR_DEBOUNCE_MS"))
    max_workers = int(get_env_var("FINDR_MAX_WORKERS"))
    log_level = get_env_var("FINDR_LOG_LEVEL").upper()
    log_dir = get_env_var("FINDR_LOG_DIR")

    return FinderSettings(
        debounce_seconds=debounce_ms / 1000.0,
        max_workers=max_workers,
        log_level=log_level,
        log_dir=Path(log_dir) if log_dir else FINDR_CONFIG_DIR,
    )
