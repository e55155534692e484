"""Console theme for findr."""

import logging

from rich.theme import Theme

logger = logging.getLogger(__name__)

ERROR_COLOR = "#f53263"


def get_rich_theme() -> Theme:
    """Build the Rich theme used by the error console."""
    return Theme({"error": f"bold {ERROR_COLOR}"})


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the Rich theme, building and caching it on first use."""
    global _cached_theme
    if _cached_theme is None:
        logger.debug("Building console theme")
        _cached_theme = get_rich_theme()
    return _cached_theme
