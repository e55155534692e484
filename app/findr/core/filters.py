"""Entry filters for type and name.

An empty filter list always passes. Within a category requested values
are combined with OR; the two categories are combined with AND.
"""

import re
from collections.abc import Sequence

from findr.models import Configuration, Entry, EntryType


def matches_type(entry: Entry, entry_types: Sequence[EntryType]) -> bool:
    """Check the entry against the requested entry types."""
    return not entry_types or any(t.matches(entry) for t in entry_types)


def matches_name(entry: Entry, names: Sequence[re.Pattern[str]]) -> bool:
    """Check the entry's bare file name against the name patterns.

    Patterns are searched, not anchored: ``txt`` matches ``a.txt``.
    """
    return not names or any(pattern.search(entry.name) for pattern in names)


def matches(entry: Entry, config: Configuration) -> bool:
    """Check whether the entry passes both the type and the name filter."""
    return matches_type(entry, config.entry_types) and matches_name(entry, config.names)
