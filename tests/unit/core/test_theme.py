"""Unit tests for console styles."""

# pyright: reportPrivateUsage=false

from pathlib import Path

import pytest
from fstools.core.paths import get_styles_path
from fstools.core.theme import ConsoleStyles, _read_styles, get_theme, load_styles
from rich.theme import Theme


def _write_user_styles(content: str) -> Path:
    path = get_styles_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


class TestConsoleStyles:
    """Tests for the ConsoleStyles model."""

    def test_accepts_rich_definitions(self) -> None:
        """Attributes, names and hex colors are all valid styles."""
        styles = ConsoleStyles(folder="bold underline blue", file="italic #aabbcc")

        assert styles.folder == "bold underline blue"
        assert styles.file == "italic #aabbcc"

    def test_rejects_unparsable_style(self) -> None:
        """Definitions Rich cannot parse are rejected."""
        with pytest.raises(ValueError):
            ConsoleStyles(folder="bold on on")

    def test_rejects_unknown_names(self) -> None:
        """Only rendered style names are accepted."""
        with pytest.raises(ValueError):
            ConsoleStyles(symlink="cyan")  # type: ignore[call-arg]

    def test_to_theme_registers_every_style(self) -> None:
        """Every field becomes a named theme style."""
        theme = ConsoleStyles().to_theme()

        for name in ("folder", "file", "header", "border", "muted", "error"):
            assert name in theme.styles


class TestReadStyles:
    """Tests for reading [styles] tables."""

    def test_keeps_string_entries(self, tmp_path: Path) -> None:
        """Non-string values are dropped."""
        path = tmp_path / "styles.toml"
        path.write_text('[styles]\nfile = "green"\nsize = 3\n')

        assert _read_styles(path) == {"file": "green"}

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file contributes nothing."""
        assert _read_styles(tmp_path / "absent.toml") == {}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """A malformed file contributes nothing."""
        path = tmp_path / "styles.toml"
        path.write_text("[styles\n")

        assert _read_styles(path) == {}

    def test_styles_not_a_table(self, tmp_path: Path) -> None:
        """A scalar [styles] value is ignored."""
        path = tmp_path / "styles.toml"
        path.write_text('styles = "red"\n')

        assert _read_styles(path) == {}


class TestLoadStyles:
    """Tests for load_styles."""

    def test_bundled_defaults(self) -> None:
        """Without overrides the bundled styles match the model defaults."""
        assert load_styles() == ConsoleStyles()

    def test_user_overrides_per_key(self) -> None:
        """User entries replace bundled ones individually."""
        _write_user_styles('[styles]\nfolder = "bold red"\n')

        styles = load_styles()

        assert styles.folder == "bold red"
        assert styles.file == ConsoleStyles().file

    def test_invalid_entry_skipped(self) -> None:
        """An invalid entry is skipped while valid ones still apply."""
        _write_user_styles('[styles]\nfolder = "bold on on"\nfile = "magenta"\nlink = "cyan"\n')

        styles = load_styles()

        assert styles.folder == ConsoleStyles().folder
        assert styles.file == "magenta"

    def test_explicit_path(self, tmp_path: Path) -> None:
        """An explicit override file wins over the config directory."""
        path = tmp_path / "custom.toml"
        path.write_text('[styles]\nheader = "bold yellow"\n')

        assert load_styles(path).header == "bold yellow"


class TestGetTheme:
    """Tests for the cached Rich theme."""

    def test_cached_until_cleared(self) -> None:
        """get_theme caches its result."""
        get_theme.cache_clear()

        first = get_theme()
        assert isinstance(first, Theme)
        assert get_theme() is first

        get_theme.cache_clear()
        assert get_theme() is not first
