"""Tests for findr domain models."""

import errno
import re

import pytest
from findr.models import ConfigError, Configuration, Entry, EntryType, WalkError
from pydantic import ValidationError


class TestEntryType:
    """Tests for EntryType enum."""

    def test_entry_type_values(self) -> None:
        """Verify all 3 EntryType values use the --type tokens."""
        assert EntryType.DIRECTORY == "d"
        assert EntryType.FILE == "f"
        assert EntryType.SYMLINK == "l"
        assert len(EntryType) == 3

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("d", EntryType.DIRECTORY),
            ("f", EntryType.FILE),
            ("l", EntryType.SYMLINK),
        ],
    )
    def test_from_token(self, token: str, expected: EntryType) -> None:
        """Each known token maps to its entry type."""
        assert EntryType.from_token(token) is expected

    @pytest.mark.parametrize("token", ["x", "D", "", "dir"])
    def test_from_token_rejects_unknown(self, token: str) -> None:
        """Unknown tokens raise ConfigError instead of falling through."""
        with pytest.raises(ConfigError, match="Invalid --type"):
            EntryType.from_token(token)

    def test_matches_classification(self) -> None:
        """Each type matches only entries with its classification."""
        directory = Entry(path="r/d", name="d", is_dir=True)
        file = Entry(path="r/f", name="f", is_file=True)
        link = Entry(path="r/l", name="l", is_symlink=True)

        assert EntryType.DIRECTORY.matches(directory)
        assert not EntryType.DIRECTORY.matches(file)
        assert EntryType.FILE.matches(file)
        assert not EntryType.FILE.matches(link)
        assert EntryType.SYMLINK.matches(link)
        assert not EntryType.SYMLINK.matches(directory)


class TestConfiguration:
    """Tests for the Configuration model."""

    def test_defaults(self) -> None:
        """Default configuration searches the current directory unfiltered."""
        config = Configuration()
        assert config.paths == (".",)
        assert config.names == ()
        assert config.entry_types == ()

    def test_keeps_order_and_duplicates(self) -> None:
        """Paths keep their order and duplicates."""
        config = Configuration(paths=("b", "a", "b"))
        assert config.paths == ("b", "a", "b")

    def test_empty_paths_rejected(self) -> None:
        """A configuration without paths is invalid."""
        with pytest.raises(ValidationError, match="At least one search path"):
            Configuration(paths=())

    def test_compiled_patterns_kept(self) -> None:
        """Compiled patterns are stored as given."""
        pattern = re.compile(r"\.txt$")
        config = Configuration(names=(pattern,))
        assert config.names[0].pattern == r"\.txt$"

    def test_is_frozen(self) -> None:
        """Configuration cannot be modified after construction."""
        config = Configuration()
        with pytest.raises(ValidationError):
            config.paths = ("other",)  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        """Unknown fields are rejected."""
        with pytest.raises(ValidationError):
            Configuration(depth=3)  # type: ignore[call-arg]


class TestWalkError:
    """Tests for WalkError."""

    def test_str_is_single_line(self) -> None:
        """str() gives a one-line diagnostic naming the path."""
        error = WalkError(path="missing", message="No such file or directory")
        assert str(error) == "IO error for operation on missing: No such file or directory"
        assert "\n" not in str(error)

    def test_from_os_error(self) -> None:
        """OSError details are carried over."""
        exc = FileNotFoundError(errno.ENOENT, "No such file or directory")
        error = WalkError.from_os_error("missing", exc)
        assert error.path == "missing"
        assert error.message == f"No such file or directory (os error {errno.ENOENT})"
        assert error.errno == errno.ENOENT

    def test_from_os_error_without_strerror(self) -> None:
        """An OSError without strerror falls back to its string form."""
        error = WalkError.from_os_error("x", OSError("boom"))
        assert error.message == "boom"
        assert error.errno is None
