"""Unit tests for theme module.

Tests for color validation and Rich theme generation.
"""

import pytest
from nvmprune.core.theme import ThemeColors, get_rich_theme, get_theme, load_theme_colors
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.success == "#03b971"
        assert colors.error == "#f53263"

    def test_valid_hex_colors(self) -> None:
        """ThemeColors accepts #RGB and #RRGGBB."""
        colors = ThemeColors(text="#AABBCC", muted="#abc")
        assert colors.text == "#AABBCC"
        assert colors.muted == "#abc"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(text="ffffff")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors with wrong length."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(text="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects non-hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(text="#gggggg")

    def test_unknown_color_rejected(self) -> None:
        """Unknown color names are rejected."""
        with pytest.raises(ValueError):
            ThemeColors(sparkle="#ffffff")  # type: ignore[call-arg]


class TestLoadThemeColors:
    """Tests for load_theme_colors function."""

    def test_applies_overrides(self) -> None:
        """Valid overrides replace defaults."""
        assert load_theme_colors({"success": "#00ff00"}).success == "#00ff00"

    def test_invalid_overrides_fall_back(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Invalid overrides fall back to defaults with a warning."""
        colors = load_theme_colors({"success": "green"})

        assert colors == ThemeColors()
        assert "Invalid theme configuration" in capsys.readouterr().err


class TestRichTheme:
    """Tests for Rich theme generation."""

    def test_contains_styles(self) -> None:
        """The Rich theme defines the styles used by the CLI."""
        theme = get_rich_theme(ThemeColors())
        for name in ("success", "warning", "error", "info", "version.current", "bold_header"):
            assert name in theme.styles

    def test_get_theme_is_cached(self) -> None:
        """get_theme returns the same instance every time."""
        assert isinstance(get_theme(), Theme)
        assert get_theme() is get_theme()
