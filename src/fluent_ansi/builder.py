# topmark:header:start
#
#   project      : fluent-ansi
#   file         : builder.py
#   file_relpath : src/fluent_ansi/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fluent builder surface shared by styles, styled content and style elements.

There is a single canonical fluent API:

    * `StyleBuilder`: the ``bold()``, ``fg()``, ``underline_style()``, ...
      shorthands. Every one of them funnels into ``add(element)``, the only
      abstract method. `fluent_ansi.Style` and `fluent_ansi.Styled`
      implement ``add`` by folding the element into themselves.
    * `StyleElement`: values that can be folded into a style (effects,
      underline styles, targeted colors and color kinds). Calling a builder
      method on an element starts from an empty `fluent_ansi.Style`
      holding only that element.

Example:
    ```python
    from fluent_ansi import Color, Effect, Style

    assert Effect.BOLD.fg(Color.RED) == Style().bold().fg(Color.RED)
    assert str(Color.RED.for_fg().bold()) == "\\x1b[1;31m"
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from fluent_ansi.errors import StyleElementError

if TYPE_CHECKING:
    from fluent_ansi.color import ColorLike
    from fluent_ansi.effect import Effect, UnderlineStyle
    from fluent_ansi.rendering import TextSink
    from fluent_ansi.style import Style
    from fluent_ansi.styled import Styled
    from fluent_ansi.targeted_color import TargetedColor

_R = TypeVar("_R")
_S = TypeVar("_S")
_C = TypeVar("_C")


class StyleBuilder(Generic[_R]):
    """Fluent shorthands over ``add(element)``.

    Subclasses define ``add``; ``_R`` is its return type and the return type
    of every shorthand (a `Style`, or a `Styled` for styled content).
    """

    def add(self, element: Any) -> _R:
        """Add the given style element, returning the updated value."""
        raise NotImplementedError

    def bold(self) -> _R:
        """Set the bold effect."""
        from fluent_ansi.effect import Effect

        return self.add(Effect.BOLD)

    def faint(self) -> _R:
        """Set the faint effect."""
        from fluent_ansi.effect import Effect

        return self.add(Effect.FAINT)

    def italic(self) -> _R:
        """Set the italic effect."""
        from fluent_ansi.effect import Effect

        return self.add(Effect.ITALIC)

    def underline(self) -> _R:
        """Set the solid underline effect (clears other underline styles)."""
        from fluent_ansi.effect import Effect

        return self.add(Effect.UNDERLINE)

    def curly_underline(self) -> _R:
        """Set the curly underline effect (clears other underline styles)."""
        from fluent_ansi.effect import Effect

        return self.add(Effect.CURLY_UNDERLINE)

    def dotted_underline(self) -> _R:
        """Set the dotted underline effect (clears other underline styles)."""
        from fluent_ansi.effect import Effect

        return self.add(Effect.DOTTED_UNDERLINE)

    def dashed_underline(self) -> _R:
        """Set the dashed underline effect (clears other underline styles)."""
        from fluent_ansi.effect import Effect

        return self.add(Effect.DASHED_UNDERLINE)

    def blink(self) -> _R:
        """Set the blink effect."""
        from fluent_ansi.effect import Effect

        return self.add(Effect.BLINK)

    def reverse(self) -> _R:
        """Set the reverse video effect."""
        from fluent_ansi.effect import Effect

        return self.add(Effect.REVERSE)

    def conceal(self) -> _R:
        """Set the conceal (hidden) effect."""
        from fluent_ansi.effect import Effect

        return self.add(Effect.CONCEAL)

    def strikethrough(self) -> _R:
        """Set the strikethrough effect."""
        from fluent_ansi.effect import Effect

        return self.add(Effect.STRIKETHROUGH)

    def double_underline(self) -> _R:
        """Set the double underline effect (clears other underline styles)."""
        from fluent_ansi.effect import Effect

        return self.add(Effect.DOUBLE_UNDERLINE)

    def overline(self) -> _R:
        """Set the overline effect."""
        from fluent_ansi.effect import Effect

        return self.add(Effect.OVERLINE)

    def effect(self, effect: Effect | UnderlineStyle) -> _R:
        """Set the given effect (underline styles are accepted too)."""
        return self.add(effect)

    def underline_style(self, underline_style: UnderlineStyle) -> _R:
        """Set the given underline style."""
        return self.add(underline_style)

    def fg(self, color: ColorLike) -> _R:
        """Set the foreground color."""
        from fluent_ansi.targeted_color import TargetedColor

        return self.color(TargetedColor.new_for_fg(color))

    def bg(self, color: ColorLike) -> _R:
        """Set the background color."""
        from fluent_ansi.targeted_color import TargetedColor

        return self.color(TargetedColor.new_for_bg(color))

    def underline_color(self, color: ColorLike) -> _R:
        """Set the underline color."""
        from fluent_ansi.targeted_color import TargetedColor

        return self.color(TargetedColor.new_for_underline(color))

    def color(self, targeted_color: TargetedColor) -> _R:
        """Set a color at the target it carries."""
        return self.add(targeted_color)


class StyleElement(StyleBuilder["Style"]):
    """A value that can be folded into a `Style` or a `Styled` value.

    Subclasses implement ``add_to``. Rendering an element renders the style
    that holds only this element.
    """

    def add_to(self, style_set: _S) -> _S:
        """Fold this element into ``style_set`` (a `Style` or `Styled`)."""
        raise NotImplementedError

    def to_style(self) -> Style:
        """Convert this element into a `Style` holding only this element."""
        from fluent_ansi.style import Style

        return self.add_to(Style())

    def to_style_set(self) -> Style:
        """Alias of `to_style`; elements always build a plain `Style`."""
        return self.to_style()

    def add(self, element: Any) -> Style:
        """Return a `Style` holding this element and ``element``."""
        return self.to_style().add(element)

    def applied_to(self, content: _C) -> Styled[_C]:
        """Apply this element to some content.

        Args:
            content (_C): Any value with a string form.

        Returns:
            Styled[_C]: ``content`` styled with this element only.
        """
        return self.to_style().applied_to(content)

    def write_to(self, sink: TextSink) -> None:
        """Write the escape sequence of this element into ``sink``."""
        self.to_style().write_to(sink)

    def __str__(self) -> str:
        return str(self.to_style())


def fold_element(style_set: _S, element: object) -> _S:
    """Fold ``element`` into ``style_set``.

    Args:
        style_set (_S): A `Style` or `Styled` value.
        element (object): The element to add.

    Returns:
        _S: The updated value, of the same type as ``style_set``.

    Raises:
        StyleElementError: If ``element`` is not a `StyleElement`.
    """
    if not isinstance(element, StyleElement):
        raise StyleElementError(f"Cannot add {element!r} to a style: not a style element")
    return element.add_to(style_set)
