# topmark:header:start
#
#   project      : fluent-ansi
#   file         : targeted_color.py
#   file_relpath : src/fluent_ansi/targeted_color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""A color paired with the target it applies to.

`TargetedColor` values are usually built with ``color.for_fg()`` and
friends, and folded straight into a style:

    ```python
    from fluent_ansi import Color, Style

    assert Style().color(Color.RED.for_bg()) == Style().bg(Color.RED)
    assert str(Color.indexed(42).for_underline()) == "\\x1b[58;5;42m"
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from fluent_ansi.builder import StyleElement
from fluent_ansi.color import Color, ColorLike, as_color
from fluent_ansi.color_target import ColorTarget
from fluent_ansi.errors import StyleElementError

if TYPE_CHECKING:
    from fluent_ansi.rendering import CodeWriter

_S = TypeVar("_S")


@dataclass(frozen=True, init=False)
class TargetedColor(StyleElement):
    """A `Color` for a specific `ColorTarget`.

    Attributes:
        color_value (Color): The canonical color.
        target (ColorTarget): Where the color applies.
    """

    color_value: Color
    target: ColorTarget

    def __init__(self, color: ColorLike, target: ColorTarget) -> None:
        if not isinstance(target, ColorTarget):
            raise StyleElementError(f"Expected a ColorTarget, got {target!r}")
        object.__setattr__(self, "color_value", as_color(color))
        object.__setattr__(self, "target", target)

    @classmethod
    def new_for_fg(cls, color: ColorLike) -> TargetedColor:
        """Create a foreground color."""
        return cls(color, ColorTarget.FOREGROUND)

    @classmethod
    def new_for_bg(cls, color: ColorLike) -> TargetedColor:
        """Create a background color."""
        return cls(color, ColorTarget.BACKGROUND)

    @classmethod
    def new_for_underline(cls, color: ColorLike) -> TargetedColor:
        """Create an underline color."""
        return cls(color, ColorTarget.UNDERLINE)

    def get_color(self) -> Color:
        """Return the color."""
        return self.color_value

    def get_target(self) -> ColorTarget:
        """Return the target."""
        return self.target

    def write_color_codes(self, writer: CodeWriter) -> None:
        """Write the SGR parameters of the color for its target."""
        self.color_value.write_color_codes(self.target, writer)

    def add_to(self, style_set: _S) -> _S:
        """Set the color at its target in ``style_set``; other fields are kept."""
        return style_set.set_color(self.target, self.color_value)  # type: ignore[attr-defined]


__all__ = ["ColorTarget", "TargetedColor"]
