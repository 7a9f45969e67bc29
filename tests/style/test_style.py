# topmark:header:start
#
#   project      : fluent-ansi
#   file         : test_style.py
#   file_relpath : tests/style/test_style.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Style`: composition, queries and rendering."""

from __future__ import annotations

import dataclasses
import io

import pytest

from fluent_ansi import (
    RESET,
    UNDERLINE,
    BasicColor,
    Color,
    ColorTarget,
    Effect,
    IndexedColor,
    RGBColor,
    Style,
    Styled,
    StyleElementError,
    UnderlineStyle,
)
from tests.conftest import RESET_SEQ, parametrize, sgr


def test_empty_style_renders_reset() -> None:
    """The empty style renders ``ESC[0m``."""
    assert str(Style()) == RESET_SEQ
    assert str(Style.new()) == RESET_SEQ
    assert Style().is_empty()


@parametrize(
    "style, expected",
    [
        (Style().bold().fg(Color.RED), sgr("1", "31")),
        (Style().underline().fg(Color.RED).bg(Color.GREEN), sgr("4", "31", "42")),
        (Style().curly_underline().dotted_underline(), sgr("4:4")),
        (Style().fg(Color.RED).bold(), sgr("1", "31")),
        (Style().bg(Color.BLUE).fg(BasicColor.YELLOW.bright()), sgr("93", "44")),
        (
            Style()
            .underline_color(IndexedColor(5))
            .overline()
            .bg(Color.BLUE)
            .fg(RGBColor(1, 2, 3))
            .bold(),
            sgr("1", "53", "38;2;1;2;3", "44", "58;5;5"),
        ),
        (
            Style()
            .strikethrough()
            .conceal()
            .reverse()
            .blink()
            .double_underline()
            .italic()
            .faint()
            .bold(),
            sgr("1", "2", "3", "5", "7", "8", "9", "21"),
        ),
    ],
)
def test_rendering_order(style: Style, expected: str) -> None:
    """Effects come first in declaration order, then fg, bg and underline colors."""
    assert str(style) == expected


def test_write_to_sink() -> None:
    """`write_to` writes the same text as `str`."""
    buffer = io.StringIO()
    Style().italic().bg(Color.CYAN).write_to(buffer)
    assert buffer.getvalue() == sgr("3", "46")


def test_failing_sink_propagates() -> None:
    """Errors raised by the sink reach the caller unchanged."""

    class BrokenSink:
        def write(self, text: str, /) -> int:
            raise OSError("disk full")

    with pytest.raises(OSError, match="disk full"):
        Style().bold().write_to(BrokenSink())


def test_effect_accessors() -> None:
    """`set_effect`/`get_effect` accept effects and underline styles."""
    style = Style().set_effect(Effect.BOLD, True).set_effect(UnderlineStyle.CURLY, True)

    assert style.get_effect(Effect.BOLD)
    assert style.get_effect(UnderlineStyle.CURLY)
    assert style.get_effect(Effect.CURLY_UNDERLINE)
    assert not style.get_effect(Effect.ITALIC)
    assert list(style.get_effects()) == [Effect.BOLD, Effect.CURLY_UNDERLINE]
    assert style.get_underline_style() is UnderlineStyle.CURLY

    assert not style.set_effect(Effect.BOLD, False).get_effect(Effect.BOLD)
    assert style.set_underline_style(None).get_underline_style() is None
    assert style.set_underline_style(UnderlineStyle.DASHED).get_underline_style() is UnderlineStyle.DASHED


def test_underline_styles_are_mutually_exclusive() -> None:
    """Setting an underline style clears the previous one but keeps other effects."""
    style = Style().bold().underline().underline_style(UnderlineStyle.DOUBLE)
    assert list(style.get_effects()) == [Effect.BOLD, Effect.DOUBLE_UNDERLINE]


def test_color_accessors() -> None:
    """Colors are stored canonically per target and can be cleared."""
    style = Style().set_color(ColorTarget.BACKGROUND, BasicColor.RED)

    assert style.get_color(ColorTarget.BACKGROUND) == Color.RED
    assert isinstance(style.get_color(ColorTarget.BACKGROUND), Color)
    assert style.get_color(ColorTarget.FOREGROUND) is None
    assert style.set_color(ColorTarget.BACKGROUND, Color.none()) == Style()
    assert Style().bg(Color.RED) == style


def test_generic_attribute_access() -> None:
    """`set`/`get`/`unset` work for every attribute kind."""
    style = (
        Style()
        .set(Effect.BOLD, True)
        .set(UNDERLINE, UnderlineStyle.DOTTED)
        .set(ColorTarget.FOREGROUND, Color.RED)
    )

    assert style.get(Effect.BOLD) is True
    assert style.get(UnderlineStyle.DOTTED) is True
    assert style.get(UNDERLINE) is UnderlineStyle.DOTTED
    assert style.get(ColorTarget.FOREGROUND) == Color.RED
    assert style.get(ColorTarget.UNDERLINE) is None

    assert style.unset(Effect.BOLD) == Style().dotted_underline().fg(Color.RED)
    assert style.unset(UNDERLINE) == Style().bold().fg(Color.RED)
    assert style.unset(UnderlineStyle.DOTTED) == Style().bold().fg(Color.RED)
    assert style.unset(ColorTarget.FOREGROUND) == Style().bold().dotted_underline()
    assert style.set(UnderlineStyle.SOLID, True).get(UNDERLINE) is UnderlineStyle.SOLID


@parametrize(
    "attr, value",
    [
        (Effect.BOLD, "yes"),
        (UnderlineStyle.CURLY, None),
        (UNDERLINE, True),
        (ColorTarget.FOREGROUND, "red"),
        ("bold", True),
    ],
)
def test_generic_set_rejects_bad_values(attr: object, value: object) -> None:
    """Values that do not fit the attribute raise `StyleElementError`."""
    with pytest.raises(StyleElementError):
        Style().set(attr, value)  # type: ignore[arg-type]


def test_get_rejects_non_attributes() -> None:
    """Unknown attributes raise `StyleElementError` (also a `TypeError`)."""
    with pytest.raises(TypeError):
        Style().get("bold")  # type: ignore[arg-type]
    with pytest.raises(StyleElementError):
        Style().unset(42)  # type: ignore[arg-type]


def test_add_rejects_non_elements() -> None:
    """Only style elements can be added."""
    with pytest.raises(StyleElementError):
        Style().add("bold")


def test_add_elements() -> None:
    """Every element kind folds into a style."""
    style = (
        Style()
        .add(Effect.ITALIC)
        .add(UnderlineStyle.DASHED)
        .add(Color.RED.for_bg())
        .add(IndexedColor(3))
    )
    assert style == Style().italic().dashed_underline().bg(Color.RED).fg(IndexedColor(3))


def test_style_is_immutable() -> None:
    """Builder methods return new values and never mutate the receiver."""
    style = Style()
    bold = style.bold()

    assert style == Style()
    assert bold != style
    with pytest.raises(dataclasses.FrozenInstanceError):
        bold.fg_color = Color.RED  # type: ignore[misc]


def test_style_and_reset() -> None:
    """A style equals `RESET` iff it is empty."""
    assert Style() == RESET
    assert RESET == Style()
    assert Style().bold() != RESET
    assert hash(Style()) == hash(RESET)


def test_to_style_and_applied_to() -> None:
    """`to_style` returns the style itself; `applied_to` wraps content."""
    style = Style().bold()
    assert style.to_style() is style
    assert style.to_style_set() is style
    assert style.applied_to("x") == Styled("x", style)
