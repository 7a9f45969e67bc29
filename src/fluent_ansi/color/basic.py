# topmark:header:start
#
#   project      : fluent-ansi
#   file         : basic.py
#   file_relpath : src/fluent_ansi/color/basic.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The 8 basic, non-bright terminal colors.

These are also available as constants on `fluent_ansi.color.Color`
(``Color.RED is BasicColor.RED``). See the 3-bit and 4-bit section of
https://en.wikipedia.org/wiki/ANSI_escape_code for the code tables.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from fluent_ansi.color.kind import ColorKind

if TYPE_CHECKING:
    from fluent_ansi.color.color import Color
    from fluent_ansi.color.simple import SimpleColor
    from fluent_ansi.color_target import ColorTarget
    from fluent_ansi.rendering import CodeWriter


class BasicColor(ColorKind, Enum):
    """Basic hues, valued by their offset in the SGR color tables."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7

    def code_offset(self) -> int:
        """Return the offset added to the 30/40/90/100 SGR bases."""
        return self.value

    def bright(self) -> SimpleColor:
        """Return the bright variant of this color."""
        from fluent_ansi.color.simple import SimpleColor

        return SimpleColor.new_bright(self)

    def to_simple_color(self) -> SimpleColor:
        """Return this color as a non-bright `SimpleColor`."""
        from fluent_ansi.color.simple import SimpleColor

        return SimpleColor.new(self)

    def to_color(self) -> Color:
        """Convert into ``Color(SimpleColor(self))``."""
        return self.to_simple_color().to_color()

    def write_color_codes(self, target: ColorTarget, writer: CodeWriter) -> None:
        """Write the SGR parameters of this color for ``target``."""
        self.to_simple_color().write_color_codes(target, writer)
