"""Scan engine driving traversal, filtering and output.

Each root path is walked independently and in order. Traversal errors
are handed to an error callback and skipped; matching paths for a root
are written as one newline-joined block once that root is done.
"""

import logging
import sys
from collections.abc import Callable
from typing import TextIO

from findr.core.filters import matches
from findr.core.walker import walk
from findr.models import Configuration, WalkError

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[WalkError], None]


def write_error(error: WalkError) -> None:
    """Write a traversal error as a single line to standard error."""
    sys.stderr.write(f"{error}\n")


def search_root(root: str, config: Configuration, on_error: ErrorHandler) -> list[str]:
    """Collect the matching paths under one root.

    Args:
        root: Root path to walk.
        config: Search configuration.
        on_error: Called once for every failed traversal step.

    Returns:
        Display paths of matching entries, in traversal order.
    """
    found: list[str] = []
    for result in walk(root):
        if isinstance(result, WalkError):
            logger.debug("Skipping %s: %s", result.path, result.message)
            on_error(result)
            continue
        if matches(result, config):
            found.append(result.path)
    return found


def run(
    config: Configuration,
    *,
    out: TextIO | None = None,
    on_error: ErrorHandler | None = None,
) -> None:
    """Search every root path in the configuration and print the matches.

    One block is written per root, even when it has no matches.

    Args:
        config: Search configuration.
        out: Stream for matches. Defaults to standard output.
        on_error: Handler for traversal errors. Defaults to write_error.
    """
    stream = out if out is not None else sys.stdout
    handler = on_error if on_error is not None else write_error

    for root in config.paths:
        found = search_root(root, config, handler)
        logger.debug("Found %d matches under %s", len(found), root)
        stream.write("\n".join(found) + "\n")
        stream.flush()
