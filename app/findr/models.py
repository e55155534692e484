"""Domain models for filesystem search.

This module defines the data structures shared by the configuration
builder, the walker and the scan engine: requested entry types, the
immutable run configuration, and the per-step results of a traversal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class ConfigError(ValueError):
    """Raised when command-line options cannot form a valid configuration."""


class EntryType(str, Enum):
    """Type of filesystem entry a search can be restricted to.

    Values are the single-character tokens accepted by ``--type``.

    Attributes:
        DIRECTORY: Directory (``d``).
        FILE: Regular file (``f``).
        SYMLINK: Symbolic link (``l``).
    """

    DIRECTORY = "d"
    FILE = "f"
    SYMLINK = "l"

    @classmethod
    def from_token(cls, token: str) -> EntryType:
        """Map a ``--type`` token to its entry type.

        Args:
            token: One of ``d``, ``f`` or ``l``.

        Returns:
            The corresponding EntryType.

        Raises:
            ConfigError: If the token is not a known entry type.
        """
        match token:
            case "d":
                return cls.DIRECTORY
            case "f":
                return cls.FILE
            case "l":
                return cls.SYMLINK
            case _:
                msg = f'Invalid --type "{token}"'
                raise ConfigError(msg)

    def matches(self, entry: Entry) -> bool:
        """Check whether an entry is classified as this type."""
        match self:
            case EntryType.DIRECTORY:
                return entry.is_dir
            case EntryType.FILE:
                return entry.is_file
            case EntryType.SYMLINK:
                return entry.is_symlink


class Configuration(BaseModel):
    """Immutable search configuration built once per invocation.

    Attributes:
        paths: Root paths to scan, in output order. Never empty.
        names: Compiled name patterns. Empty means every name matches.
        entry_types: Requested entry types. Empty means every type matches.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    paths: tuple[str, ...] = (".",)
    names: tuple[re.Pattern[str], ...] = ()
    entry_types: tuple[EntryType, ...] = ()

    @field_validator("paths")
    @classmethod
    def validate_paths(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Require at least one root path."""
        if not v:
            msg = "At least one search path is required"
            raise ValueError(msg)
        return v


@dataclass(frozen=True, slots=True)
class Entry:
    """A filesystem entry visited during traversal.

    Attributes:
        path: Path as displayed, joined from the root with the native separator.
        name: Bare file name (final path component).
        is_dir: Entry is a directory.
        is_file: Entry is a regular file.
        is_symlink: Entry is a symbolic link (not followed).
    """

    path: str
    name: str
    is_dir: bool = False
    is_file: bool = False
    is_symlink: bool = False


@dataclass(frozen=True, slots=True)
class WalkError:
    """A traversal step that failed for a single path.

    Attributes:
        path: Path the failed operation was performed on.
        message: Description of the underlying failure.
        errno: OS error number, if known.
    """

    path: str
    message: str
    errno: int | None = None

    @classmethod
    def from_os_error(cls, path: str, exc: OSError) -> WalkError:
        """Build a WalkError from an OSError raised while visiting path.

        The message is the OS description followed by ``(os error N)``
        when an error number is known.
        """
        message = exc.strerror or str(exc)
        if exc.errno is not None:
            message = f"{message} (os error {exc.errno})"
        return cls(path=path, message=message, errno=exc.errno)

    def __str__(self) -> str:
        return f"IO error for operation on {self.path}: {self.message}"


WalkResult = Entry | WalkError
