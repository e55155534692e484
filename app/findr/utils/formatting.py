"""Rich console formatting utilities.

Provides the shared error console and message helpers for CLI output.
Search results themselves are written as plain text by the engine.
"""

import sys

import typer
from rich.console import Console

from findr.core.theme import get_theme
from findr.models import WalkError


def _detect_color_system() -> str | None:
    """Use truecolor on interactive terminals, otherwise let Rich decide."""
    if sys.stderr.isatty():
        return "truecolor"
    return None


# Shared error console (theme loaded once at import)
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def print_error(message: str) -> None:
    """Print an error message.

    Only the prefix is styled; the message is written verbatim.
    """
    err_console.print("[error]Error:[/]", end=" ", highlight=False, emoji=False, soft_wrap=True)
    typer.echo(message, err=True)


def print_diagnostic(error: WalkError) -> None:
    """Print a traversal error as one line on standard error, verbatim."""
    typer.echo(str(error), err=True)
