"""Shared console output utilities."""

from rich.console import Console

# Goes to stderr so it never mixes with the Textual screen on stdout
console = Console(stderr=True)
