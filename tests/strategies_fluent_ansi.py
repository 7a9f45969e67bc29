# topmark:header:start
#
#   project      : fluent-ansi
#   file         : strategies_fluent_ansi.py
#   file_relpath : tests/strategies_fluent_ansi.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for colors, style elements, attributes and styles."""

from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

from fluent_ansi import (
    UNDERLINE,
    BasicColor,
    Color,
    ColorTarget,
    Effect,
    IndexedColor,
    RGBColor,
    SimpleColor,
    Style,
    TargetedColor,
    UnderlineStyle,
)

components: st.SearchStrategy[int] = st.integers(min_value=0, max_value=255)

basic_colors: st.SearchStrategy[BasicColor] = st.sampled_from(list(BasicColor))

simple_colors: st.SearchStrategy[SimpleColor] = st.builds(SimpleColor, basic_colors, st.booleans())

indexed_colors: st.SearchStrategy[IndexedColor] = st.builds(IndexedColor, components)

rgb_colors: st.SearchStrategy[RGBColor] = st.builds(RGBColor, components, components, components)

color_kinds: st.SearchStrategy[Any] = st.one_of(basic_colors, simple_colors, indexed_colors, rgb_colors)

colors: st.SearchStrategy[Color] = color_kinds.map(lambda kind: kind.to_color())

effects: st.SearchStrategy[Effect] = st.sampled_from(list(Effect))

underline_styles: st.SearchStrategy[UnderlineStyle] = st.sampled_from(list(UnderlineStyle))

targets: st.SearchStrategy[ColorTarget] = st.sampled_from(list(ColorTarget))

targeted_colors: st.SearchStrategy[TargetedColor] = st.builds(TargetedColor, colors, targets)

elements: st.SearchStrategy[Any] = st.one_of(effects, underline_styles, targeted_colors, color_kinds)


@st.composite
def styles(draw: st.DrawFn) -> Style:
    """Draw a style built from a random sequence of elements."""
    style = Style()
    for element in draw(st.lists(elements, max_size=8)):
        style = style.add(element)
    return style


@st.composite
def attribute_values(draw: st.DrawFn) -> tuple[Any, Any]:
    """Draw an ``(attribute, value)`` pair accepted by ``Style.set``."""
    kind = draw(st.sampled_from(["effect", "underline_style", "underline", "target"]))
    if kind == "effect":
        return draw(effects), draw(st.booleans())
    if kind == "underline_style":
        return draw(underline_styles), draw(st.booleans())
    if kind == "underline":
        return UNDERLINE, draw(st.none() | underline_styles)
    return draw(targets), draw(st.none() | colors)
