"""Main CLI application entry point.

Defines the Typer application: a single search command taking root
paths plus repeatable name and type filters.
"""

import logging
import sys
from enum import Enum
from typing import Annotated

import typer

from findr import __version__
from findr.core.config import build_configuration
from findr.core.engine import run
from findr.models import ConfigError
from findr.utils.formatting import print_diagnostic, print_error

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="findr",
    help="Find filesystem entries by type and name.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


class TypeChoice(str, Enum):
    """Entry types accepted by --type."""

    DIRECTORY = "d"
    FILE = "f"
    SYMLINK = "l"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"findr version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.command()
def main(
    paths: Annotated[
        list[str] | None,
        typer.Argument(
            metavar="[PATH]...",
            help="Search path(s). Defaults to the current directory.",
            show_default=False,
        ),
    ] = None,
    names: Annotated[
        list[str] | None,
        typer.Option(
            "--name",
            "-n",
            metavar="PATTERN",
            help="Regular expression matched against entry names (repeatable).",
        ),
    ] = None,
    entry_types: Annotated[
        list[TypeChoice] | None,
        typer.Option(
            "--type",
            "-t",
            help="Entry type: d (directory), f (file), l (symlink). Repeatable.",
            case_sensitive=True,
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging on stderr.",
        ),
    ] = False,
) -> None:
    """Search PATHs depth-first and print entries matching every filter.

    Entries pass when they match any requested [bold]--type[/] and any
    requested [bold]--name[/]. Unreadable paths are reported on stderr
    and skipped.
    """
    _configure_logging(verbose)

    try:
        config = build_configuration(
            paths=paths,
            names=names,
            entry_types=[t.value for t in entry_types or ()],
        )
    except ConfigError as e:
        logger.debug("Configuration failed: %s", e)
        print_error(str(e))
        raise typer.Exit(code=1) from None

    run(config, on_error=print_diagnostic)


if __name__ == "__main__":
    app()
