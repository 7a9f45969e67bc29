# topmark:header:start
#
#   project      : fluent-ansi
#   file         : test_theme.py
#   file_relpath : tests/config/test_theme.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for loading, querying and dumping themes."""

from __future__ import annotations

import pytest

from fluent_ansi import Color, IndexedColor, RGBColor, Style, Styled, ThemeError, UnderlineStyle
from fluent_ansi.config.theme import Theme, style_from_table, style_to_table
from tests.conftest import parametrize

THEME_TOML = """\
[styles.error]
effects = ["bold", "italic"]
underline = "curly"
fg = "red"
bg = "bright-black"
underline_color = 196

[styles.path]
fg = "#5f87ff"

[styles.plain]
"""


def test_load_theme_from_text() -> None:
    """Styles are read in declaration order with every key applied."""
    theme = Theme.from_toml_text(THEME_TOML)

    assert theme.names() == ("error", "path", "plain")
    assert len(theme) == 3
    assert "error" in theme
    assert "missing" not in theme
    assert theme.get("error") == (
        Style()
        .bold()
        .italic()
        .curly_underline()
        .fg(Color.RED)
        .bg(Color.BLACK.bright())
        .underline_color(IndexedColor(196))
    )
    assert theme.get("path") == Style().fg(RGBColor(0x5F, 0x87, 0xFF))
    assert theme.get("plain").is_empty()


def test_apply_named_style() -> None:
    """`apply` wraps content with the named style."""
    theme = Theme.from_toml_text(THEME_TOML)
    assert theme.apply("path", "src") == Styled("src", theme.get("path"))


def test_unknown_style_lists_known_names() -> None:
    """Looking up a missing style names the known ones."""
    theme = Theme.from_toml_text(THEME_TOML, source="demo.toml")
    with pytest.raises(ThemeError, match=r"demo\.toml: unknown style 'nope' \(known: error, path, plain\)"):
        theme.get("nope")


@parametrize("tool_key", ["fluent-ansi", "fluent_ansi"])
def test_load_theme_from_pyproject(tool_key: str) -> None:
    """A ``pyproject.toml`` holds the theme under ``[tool.fluent-ansi]``."""
    text = f"""\
[project]
name = "demo"

[tool.other]
key = 1

[tool.{tool_key}.styles.warn]
fg = "yellow"
"""
    theme = Theme.from_toml_text(text, source="pyproject.toml")
    assert theme.get("warn") == Style().fg(Color.YELLOW)


def test_pyproject_without_fluent_ansi_table() -> None:
    """A ``tool`` table without a fluent-ansi section is an error."""
    with pytest.raises(ThemeError, match=r"no \[tool\.fluent-ansi\] table"):
        Theme.from_toml_text("[tool.black]\nline-length = 100\n", source="pyproject.toml")


def test_document_without_styles_is_empty() -> None:
    """A document without ``[styles]`` defines an empty theme."""
    theme = Theme.from_toml_text("title = 'nothing here'\n")
    assert len(theme) == 0
    assert theme.names() == ()


@parametrize(
    "text, message",
    [
        ("[styles.a]\nfg = 'purple'\n", r"styles\.a\.fg: Unknown color name"),
        ("[styles.a]\nbg = 300\n", r"styles\.a\.bg:"),
        ("[styles.a]\nunderline_color = [1, 2]\n", r"styles\.a\.underline_color: Not a color"),
        ("[styles.a]\neffects = ['shiny']\n", r"styles\.a\.effects: Unknown effect"),
        ("[styles.a]\neffects = 'bold'\n", r"styles\.a\.effects: expected a list"),
        ("[styles.a]\neffects = [1]\n", r"styles\.a\.effects: expected an effect name"),
        ("[styles.a]\nunderline = 'wavy'\n", r"styles\.a\.underline: Unknown underline style"),
        ("[styles.a]\nunderline = 1\n", r"styles\.a\.underline: expected an underline style name"),
        ("[styles.a]\ncolour = 'red'\n", r"styles\.a: unknown key\(s\): colour"),
        ("[styles]\na = 'red'\n", r"styles\.a: expected a table, got str"),
        ("styles = 1\n", r"\[styles\] must be a table"),
        ("[styles\n", r"invalid TOML"),
    ],
)
def test_malformed_theme_reports_location(text: str, message: str) -> None:
    """Errors name the source and the offending key."""
    with pytest.raises(ThemeError, match=message):
        Theme.from_toml_text(text, source="t.toml")


def test_equal_themes_hash_equal() -> None:
    """Themes are hashable values; equal themes share a hash."""
    first = Theme.from_toml_text(THEME_TOML)
    second = Theme.from_toml_text(THEME_TOML)

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second, Theme()}) == 2
    assert hash(Theme()) == hash(Theme())


def test_dump_reads_back() -> None:
    """`to_toml` output parses back to the same styles."""
    theme = Theme.from_toml_text(THEME_TOML)
    again = Theme.from_toml_text(theme.to_toml())

    assert again.styles == theme.styles
    assert again.names() == theme.names()


def test_style_table_round_trip() -> None:
    """`style_to_table` writes only the keys that are set."""
    style = Style().faint().double_underline().bg(IndexedColor(3))
    table = style_to_table(style)

    assert table == {"effects": ["faint"], "underline": "double", "bg": 3}
    assert style_from_table(table, where="x") == style
    assert style_to_table(Style()) == {}


def test_underline_key_overrides_underline_effects() -> None:
    """``underline`` replaces an underline effect listed in ``effects``."""
    style = style_from_table({"effects": ["underline"], "underline": "dashed"}, where="x")
    assert style.get_underline_style() is UnderlineStyle.DASHED
