"""Search configuration builder.

Turns the parsed command-line options into a validated, immutable
Configuration. Name patterns are compiled here so that an invalid
pattern fails the run before any traversal starts.
"""

import logging
import re
from collections.abc import Sequence

from findr.models import ConfigError, Configuration, EntryType

logger = logging.getLogger(__name__)

DEFAULT_PATHS: tuple[str, ...] = (".",)


def compile_names(names: Sequence[str]) -> tuple[re.Pattern[str], ...]:
    """Compile name patterns in order, stopping at the first invalid one.

    Args:
        names: Regular expression sources from ``--name``.

    Returns:
        Compiled patterns, in the order given.

    Raises:
        ConfigError: Naming the first pattern that does not compile.
    """
    compiled: list[re.Pattern[str]] = []
    for name in names:
        try:
            compiled.append(re.compile(name))
        except re.error as e:
            msg = f'Invalid --name "{name}"'
            raise ConfigError(msg) from e
    return tuple(compiled)


def build_configuration(
    paths: Sequence[str] | None = None,
    names: Sequence[str] | None = None,
    entry_types: Sequence[str] | None = None,
) -> Configuration:
    """Build the run configuration from parsed options.

    Args:
        paths: Positional root paths. Defaults to the current directory.
        names: ``--name`` values, each a regular expression.
        entry_types: ``--type`` tokens (``d``, ``f`` or ``l``).

    Returns:
        Immutable Configuration for the scan engine.

    Raises:
        ConfigError: If a type token is unknown or a name pattern is invalid.
    """
    types = tuple(EntryType.from_token(token) for token in entry_types or ())
    patterns = compile_names(names or ())

    config = Configuration(
        paths=tuple(paths) if paths else DEFAULT_PATHS,
        names=patterns,
        entry_types=types,
    )
    logger.debug(
        "Configuration: paths=%s names=%s types=%s",
        list(config.paths),
        [p.pattern for p in config.names],
        [t.value for t in config.entry_types],
    )
    return config
