# topmark:header:start
#
#   project      : fluent-ansi
#   file         : kind.py
#   file_relpath : src/fluent_ansi/color/kind.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Capabilities shared by every color kind.

A color kind is any of `BasicColor`, `SimpleColor`, `IndexedColor`,
`RGBColor` or the `Color` sum type itself. All of them:

    * convert to a canonical `Color` via ``to_color()``;
    * pair with a target via ``for_fg()``, ``for_bg()``, ``for_underline()``
      and ``for_target()``;
    * compare (and hash) through their canonical `Color`, so
      ``BasicColor.RED == SimpleColor(BasicColor.RED) == Color.RED.to_color()``;
    * act as style elements that default to the foreground target, so
      ``Color.RED.bold() == Style().fg(Color.RED).bold()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from fluent_ansi.builder import StyleElement
from fluent_ansi.color_target import ColorTarget
from fluent_ansi.errors import ColorValueError

if TYPE_CHECKING:
    from fluent_ansi.color.color import Color
    from fluent_ansi.rendering import CodeWriter
    from fluent_ansi.targeted_color import TargetedColor

_S = TypeVar("_S")


def check_component(name: str, value: Any) -> int:
    """Validate an 8-bit color component.

    Args:
        name (str): Component name used in the error message.
        value (Any): The candidate value.

    Returns:
        int: ``value`` unchanged.

    Raises:
        ColorValueError: If ``value`` is not an integer in ``0..255``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ColorValueError(f"{name} must be an integer in 0..255, got {value!r}")
    if not 0 <= value <= 255:
        raise ColorValueError(f"{name} must be in 0..255, got {value}")
    return value


class ColorKind(StyleElement):
    """Base class of every color representation."""

    def to_color(self) -> Color:
        """Convert this value into a canonical `Color`."""
        raise NotImplementedError

    def write_color_codes(self, target: ColorTarget, writer: CodeWriter) -> None:
        """Write the SGR parameters of this color for ``target``."""
        self.to_color().write_color_codes(target, writer)

    def for_fg(self) -> TargetedColor:
        """Associate this color with the foreground."""
        return self.for_target(ColorTarget.FOREGROUND)

    def for_bg(self) -> TargetedColor:
        """Associate this color with the background."""
        return self.for_target(ColorTarget.BACKGROUND)

    def for_underline(self) -> TargetedColor:
        """Associate this color with the underline effects."""
        return self.for_target(ColorTarget.UNDERLINE)

    def for_target(self, target: ColorTarget) -> TargetedColor:
        """Associate this color with ``target``."""
        from fluent_ansi.targeted_color import TargetedColor

        return TargetedColor(self, target)

    def add_to(self, style_set: _S) -> _S:
        """Set this color as the foreground color of ``style_set``."""
        return self.for_fg().add_to(style_set)

    def _color_key(self) -> tuple[object, ...]:
        return self.to_color()._color_key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorKind):
            return NotImplemented
        return self._color_key() == other._color_key()

    def __hash__(self) -> int:
        return hash(self._color_key())
