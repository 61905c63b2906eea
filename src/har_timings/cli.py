#!/usr/bin/env python3
"""HAR Timings CLI.

Visualize the timing phases of HAR entries right in your terminal.
"""

from __future__ import annotations

__version__ = "0.1.0"

import logging
from pathlib import Path

import typer
from rich.console import Console

from har_timings.config import DisplayStyle, RenderSettings
from har_timings.models import load_har
from har_timings.report import print_entries

logger = logging.getLogger(__name__)


# =============================================================================
# CLI
# =============================================================================

app = typer.Typer(
    name="har-timings",
    help="Visualize HTTP Archive (HAR) timings right in your terminal",
    add_completion=False,
)


@app.callback()
def callback() -> None:
    """HAR timing breakdown viewer."""


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"har-timings version {__version__}")


def setup_logging(verbose: bool) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _use_color(no_color: bool) -> bool:
    """Color only when stdout is a terminal, honoring NO_COLOR and FORCE_COLOR."""
    if no_color:
        return False
    console = Console()
    return console.is_terminal and not console.no_color


def _echo_block(text: str) -> None:
    typer.echo(text, nl=False)


@app.command()
def show(
    har_file: Path = typer.Argument(  # noqa: B008
        ..., exists=True, file_okay=True, dir_okay=False, readable=True, help="HAR file to analyze"
    ),
    style: DisplayStyle = typer.Option(
        DisplayStyle.STANDARD, "--style", "-s", help="Style of output"
    ),
    jobs: int = typer.Option(1, "--jobs", "-j", min=1, help="Render entries on N worker threads"),
    bar_width: int = typer.Option(
        80, "--bar-width", min=8, help="Maximum width of the timing bar in characters"
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable colored output (default: color only on a terminal)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Print the timing breakdown of every entry in a HAR file."""
    setup_logging(verbose)

    try:
        har = load_har(har_file)
        settings = RenderSettings(
            style=style, max_bar_width=bar_width, color=_use_color(no_color)
        )
        count = print_entries(har.log.entries, settings, _echo_block, jobs=jobs)
        logger.debug(f"Printed {count} entries")

    except KeyboardInterrupt:
        typer.echo("\n\nInterrupted by user", err=True)
        raise typer.Exit(130) from None
    except Exception as e:
        typer.echo(f"\nError: {e}", err=True)
        raise typer.Exit(1) from e


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
