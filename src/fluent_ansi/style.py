# topmark:header:start
#
#   project      : fluent-ansi
#   file         : style.py
#   file_relpath : src/fluent_ansi/style.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The `Style` value: active effects plus optional colors per target.

`Style` is a frozen dataclass. Every operation returns a new value built
with `dataclasses.replace`, so styles can be shared freely.

Rendering contract (``str(style)`` or ``style.write_to(sink)``):

    * the empty style renders ``ESC[0m``;
    * otherwise ``ESC[`` + the codes of the active effects in `Effect`
      declaration order, then the foreground, background and underline
      colors, joined by ``;``, + ``m``.

The order does not depend on the order in which elements were added:
``Style().fg(RED).bold()`` and ``Style().bold().fg(RED)`` both render
``ESC[1;31m``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, TypeVar

from fluent_ansi.attributes import attribute_default, get_attribute, set_attribute
from fluent_ansi.builder import StyleBuilder, fold_element
from fluent_ansi.color import Color, ColorLike, as_color
from fluent_ansi.color_target import ColorTarget
from fluent_ansi.constants import RESET_CODE
from fluent_ansi.effect import Effect, UnderlineStyle
from fluent_ansi.encoded_effects import EncodedEffects
from fluent_ansi.errors import StyleElementError
from fluent_ansi.rendering import render_to_string, write_escape_sequence

if TYPE_CHECKING:
    from collections.abc import Iterator

    from fluent_ansi.attributes import AttributeValue, StyleAttribute
    from fluent_ansi.rendering import CodeWriter, TextSink
    from fluent_ansi.styled import Styled

_C = TypeVar("_C")


def _as_effect(effect: Effect | UnderlineStyle) -> Effect:
    if isinstance(effect, UnderlineStyle):
        return effect.to_effect()
    if isinstance(effect, Effect):
        return effect
    raise StyleElementError(f"Expected an Effect or UnderlineStyle, got {effect!r}")


@dataclass(frozen=True)
class Style(StyleBuilder["Style"]):
    """Text styling: effects and colors.

    Attributes:
        effects (EncodedEffects): The active effects (internal encoding).
        fg_color (Color | None): The foreground color.
        bg_color (Color | None): The background color.
        ul_color (Color | None): The underline color.
    """

    effects: EncodedEffects = EncodedEffects()
    fg_color: Color | None = None
    bg_color: Color | None = None
    ul_color: Color | None = None

    @classmethod
    def new(cls) -> Style:
        """Create an empty style."""
        return cls()

    # --- Effects ---

    def set_effect(self, effect: Effect | UnderlineStyle, value: bool) -> Style:
        """Enable or disable an effect.

        Enabling an underline-family effect replaces any other underline style.

        Args:
            effect (Effect | UnderlineStyle): The effect to change.
            value (bool): Whether the effect is active.

        Returns:
            Style: The updated style.
        """
        return replace(self, effects=self.effects.set(_as_effect(effect), value))

    def get_effect(self, effect: Effect | UnderlineStyle) -> bool:
        """Return whether ``effect`` is active."""
        return self.effects.get(_as_effect(effect))

    def get_effects(self) -> Iterator[Effect]:
        """Yield the active effects, in declaration order."""
        return self.effects.get_effects()

    def set_underline_style(self, underline_style: UnderlineStyle | None) -> Style:
        """Replace the underline style; None removes any underline."""
        return replace(self, effects=self.effects.set_underline(underline_style))

    def get_underline_style(self) -> UnderlineStyle | None:
        """Return the active underline style, if any."""
        return self.effects.get_underline()

    # --- Colors ---

    def set_color(self, target: ColorTarget, color: ColorLike | None) -> Style:
        """Replace the color of ``target``; None clears it.

        Args:
            target (ColorTarget): The target to change.
            color (ColorLike | None): Any color kind, or None.

        Returns:
            Style: The updated style.
        """
        value: Color | None = None if color is None else as_color(color)
        match target:
            case ColorTarget.FOREGROUND:
                return replace(self, fg_color=value)
            case ColorTarget.BACKGROUND:
                return replace(self, bg_color=value)
            case ColorTarget.UNDERLINE:
                return replace(self, ul_color=value)
            case _:
                raise StyleElementError(f"Expected a ColorTarget, got {target!r}")

    def get_color(self, target: ColorTarget) -> Color | None:
        """Return the color of ``target``, if any."""
        match target:
            case ColorTarget.FOREGROUND:
                return self.fg_color
            case ColorTarget.BACKGROUND:
                return self.bg_color
            case ColorTarget.UNDERLINE:
                return self.ul_color
            case _:
                raise StyleElementError(f"Expected a ColorTarget, got {target!r}")

    # --- Generic attribute access ---

    def set(self, attr: StyleAttribute, value: AttributeValue) -> Style:
        """Set ``attr`` (see `fluent_ansi.attributes`) to ``value``."""
        return set_attribute(self, attr, value)

    def get(self, attr: StyleAttribute) -> AttributeValue:
        """Return the value of ``attr``."""
        return get_attribute(self, attr)

    def unset(self, attr: StyleAttribute) -> Style:
        """Reset ``attr`` to its default (False or None)."""
        return self.set(attr, attribute_default(attr))

    # --- Composition ---

    def add(self, element: Any) -> Style:
        """Fold a style element (effect, underline style, color) into this style."""
        return fold_element(self, element)

    def to_style(self) -> Style:
        """Return this style."""
        return self

    def to_style_set(self) -> Style:
        """Return this style."""
        return self

    def applied_to(self, content: _C) -> Styled[_C]:
        """Apply this style to some content."""
        from fluent_ansi.styled import Styled

        return Styled(content, self)

    def is_empty(self) -> bool:
        """Whether no effect and no color is set."""
        return self == EMPTY_STYLE

    # --- Rendering ---

    def write_codes(self, writer: CodeWriter) -> None:
        """Write the SGR parameters of this style (``0`` when empty)."""
        if self.is_empty():
            writer.write_code(RESET_CODE)
            return
        for effect in self.get_effects():
            writer.write_code(effect.get_code())
        if self.fg_color is not None:
            self.fg_color.write_color_codes(ColorTarget.FOREGROUND, writer)
        if self.bg_color is not None:
            self.bg_color.write_color_codes(ColorTarget.BACKGROUND, writer)
        if self.ul_color is not None:
            self.ul_color.write_color_codes(ColorTarget.UNDERLINE, writer)

    def write_to(self, sink: TextSink) -> None:
        """Write the escape sequence of this style into ``sink``.

        Exceptions raised by ``sink.write`` propagate unchanged.
        """
        write_escape_sequence(sink, self.write_codes)

    def __str__(self) -> str:
        return render_to_string(self.write_to)


EMPTY_STYLE: Style = Style()
