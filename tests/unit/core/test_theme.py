"""Unit tests for theme module."""

# pyright: reportPrivateUsage=false

from unittest.mock import patch

import findr.core.theme as theme_module
from findr.core.theme import get_rich_theme, get_theme
from rich.theme import Theme


class TestRichTheme:
    """Tests for Rich theme generation."""

    def test_error_style_is_bold(self) -> None:
        """The error style used by print_error is bold."""
        theme = get_rich_theme()
        assert theme.styles["error"].bold

    def test_get_theme_is_cached(self) -> None:
        """get_theme builds the theme once."""
        with patch.object(theme_module, "_cached_theme", None):
            first = get_theme()
            second = get_theme()
        assert isinstance(first, Theme)
        assert first is second
