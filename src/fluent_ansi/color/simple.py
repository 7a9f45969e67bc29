# topmark:header:start
#
#   project      : fluent-ansi
#   file         : simple.py
#   file_relpath : src/fluent_ansi/color/simple.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The 16-color palette: 8 basic hues, each with a bright variant.

Foreground and background use the dedicated SGR ranges (30-37, 40-47,
90-97, 100-107). There is no such range for underline colors, so the
underline target goes through the 256-color path with the palette position
(``0..7``, or ``8..15`` when bright).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from fluent_ansi.color.basic import BasicColor
from fluent_ansi.color.indexed import IndexedColor
from fluent_ansi.color.kind import ColorKind
from fluent_ansi.color_target import ColorTarget
from fluent_ansi.errors import ColorValueError

if TYPE_CHECKING:
    from fluent_ansi.color.color import Color
    from fluent_ansi.rendering import CodeWriter

FG_BASE: int = 30
BG_BASE: int = 40
FG_BRIGHT_BASE: int = 90
BG_BRIGHT_BASE: int = 100
BRIGHT_PALETTE_OFFSET: int = 8


@dataclass(frozen=True, eq=False)
class SimpleColor(ColorKind):
    """A basic hue, optionally bright.

    Attributes:
        basic (BasicColor): The hue.
        is_bright (bool): Whether the bright variant is used.
    """

    basic: BasicColor
    is_bright: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.basic, BasicColor):
            raise ColorValueError(f"Expected a BasicColor, got {self.basic!r}")

    @classmethod
    def new(cls, basic: BasicColor) -> SimpleColor:
        """Create a non-bright simple color."""
        return cls(basic)

    @classmethod
    def new_bright(cls, basic: BasicColor) -> SimpleColor:
        """Create a bright simple color."""
        return cls(basic, is_bright=True)

    def bright(self) -> SimpleColor:
        """Return the bright variant of this color."""
        return replace(self, is_bright=True)

    def get_basic_color(self) -> BasicColor:
        """Return the hue of this color."""
        return self.basic

    @property
    def palette_index(self) -> int:
        """Position in the 16-color palette (``0..15``)."""
        offset = self.basic.code_offset()
        return offset + BRIGHT_PALETTE_OFFSET if self.is_bright else offset

    def to_color(self) -> Color:
        """Wrap into a `Color`."""
        from fluent_ansi.color.color import Color

        return Color(self)

    def write_color_codes(self, target: ColorTarget, writer: CodeWriter) -> None:
        """Write the SGR parameters of this color for ``target``."""
        offset = self.basic.code_offset()
        match target:
            case ColorTarget.FOREGROUND:
                writer.write_code((FG_BRIGHT_BASE if self.is_bright else FG_BASE) + offset)
            case ColorTarget.BACKGROUND:
                writer.write_code((BG_BRIGHT_BASE if self.is_bright else BG_BASE) + offset)
            case ColorTarget.UNDERLINE:
                IndexedColor(self.palette_index).write_color_codes(target, writer)

    def _color_key(self) -> tuple[object, ...]:
        return ("simple", self.basic.value, self.is_bright)
