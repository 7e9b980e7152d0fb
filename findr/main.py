#!/usr/bin/env python3
"""
Main CLI entry point for findr
"""

from pathlib import Path
from typing import Optional

import typer

from findr import __version__
from findr.config.settings import load_settings
from findr.exceptions import ConfigurationError
from findr.utils.logging import setup_tui_logging
from findr.utils.output import console

app = typer.Typer(add_completion=False)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"findr version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    root: Path = typer.Option(
        Path("."), "--root", "-r", help="Directory to search (defaults to the current one)"
    ),
    debounce_ms: Optional[int] = typer.Option(
        None,
        "--debounce-ms",
        help="Wait this long after the last keystroke before scanning (overrides FINDR_DEBOUNCE_MS)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show version"
    ),
):
    """
    findr - incremental file-name search

    Type part of a file name; matches stream in as the tree is scanned.
    Use [bold]Up[/bold]/[bold]Down[/bold] to select and [bold]Enter[/bold]
    to open the file with its default application. [bold]Esc[/bold] quits.
    """
    try:
        settings = load_settings().with_overrides(
            root=root, debounce_ms=debounce_ms, verbose=verbose
        )
    except ConfigurationError as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(1) from e

    logger = setup_tui_logging(settings.log_level, settings.log_dir)
    logger.debug("Settings: %s", settings)

    from findr.ui.finder_app import run_finder

    try:
        run_finder(settings)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.exception("Finder UI failed")
        console.print(f"❌ Error: {e}", style="red")
        raise typer.Exit(1) from e


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
