"""Lazy depth-first directory walker.

Yields every entry under a root path in pre-order (a directory before
its children, siblings in directory listing order). Failures on a
single path are yielded as WalkError values instead of being raised,
so a caller can report them and keep consuming the walk.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator

from findr.models import Entry, WalkError, WalkResult

logger = logging.getLogger(__name__)


def display_text(value: str) -> str:
    """Make an OS-decoded string safe to print.

    Undecodable bytes (surrogate escapes) become U+FFFD.
    """
    return value.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def root_name(root: str) -> str:
    """Get the bare file name of a root path.

    ``root/`` is named ``root`` and ``.`` is named ``.``. A filesystem
    root such as ``/`` has no final component and is named after itself.
    """
    name = os.path.basename(os.path.normpath(root))
    return name or root


def walk(root: str) -> Iterator[WalkResult]:
    """Walk a tree rooted at root, depth-first.

    The root is classified following symlinks, so a root that links to a
    directory is descended into. Entries below the root are classified
    without following symlinks and linked directories are not entered.

    Args:
        root: Path to start the walk from.

    Yields:
        Entry for each visited path, or WalkError for each failed step.
    """
    try:
        st = os.stat(root)
    except OSError as exc:
        yield WalkError.from_os_error(display_text(root), exc)
        return

    is_dir = stat.S_ISDIR(st.st_mode)
    yield Entry(
        path=display_text(root),
        name=display_text(root_name(root)),
        is_dir=is_dir,
        is_file=stat.S_ISREG(st.st_mode),
    )
    if not is_dir:
        return

    opened = _open_dir(root)
    if isinstance(opened, WalkError):
        yield opened
        return

    stack: list[tuple[str, Iterator[os.DirEntry[str]]]] = [(root, opened)]
    try:
        while stack:
            parent, entries = stack[-1]
            try:
                dirent = next(entries)
            except StopIteration:
                _close(entries)
                stack.pop()
                continue
            except OSError as exc:
                _close(entries)
                stack.pop()
                yield WalkError.from_os_error(display_text(parent), exc)
                continue

            result = _classify(dirent)
            yield result
            if isinstance(result, WalkError) or not result.is_dir:
                continue

            children = _open_dir(dirent.path)
            if isinstance(children, WalkError):
                yield children
            else:
                stack.append((dirent.path, children))
    finally:
        for _, entries in stack:
            _close(entries)


def _open_dir(path: str) -> Iterator[os.DirEntry[str]] | WalkError:
    """Open a directory listing, or describe why it cannot be opened."""
    try:
        return os.scandir(path)
    except OSError as exc:
        logger.debug("Cannot read directory %s: %s", path, exc)
        return WalkError.from_os_error(display_text(path), exc)


def _close(entries: Iterator[os.DirEntry[str]]) -> None:
    close = getattr(entries, "close", None)
    if close is not None:
        close()


def _classify(dirent: os.DirEntry[str]) -> WalkResult:
    """Build an Entry from a directory listing item without following links."""
    try:
        is_symlink = dirent.is_symlink()
        is_dir = not is_symlink and dirent.is_dir(follow_symlinks=False)
        is_file = not is_symlink and dirent.is_file(follow_symlinks=False)
    except OSError as exc:
        return WalkError.from_os_error(display_text(dirent.path), exc)

    return Entry(
        path=display_text(dirent.path),
        name=display_text(dirent.name),
        is_dir=is_dir,
        is_file=is_file,
        is_symlink=is_symlink,
    )
