"""Configuration for findr."""

from .settings import FinderSettings, load_settings

__all__ = ["FinderSettings", "load_settings"]
