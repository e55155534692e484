"""Search core: configuration, traversal, filtering and the scan engine."""

from findr.core.config import build_configuration, compile_names
from findr.core.engine import run, search_root
from findr.core.filters import matches, matches_name, matches_type
from findr.core.walker import walk

__all__ = [
    "build_configuration",
    "compile_names",
    "matches",
    "matches_name",
    "matches_type",
    "run",
    "search_root",
    "walk",
]
