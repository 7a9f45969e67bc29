# topmark:header:start
#
#   project      : fluent-ansi
#   file         : rgb.py
#   file_relpath : src/fluent_ansi/color/rgb.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""24-bit true colors (``38;2;R;G;B`` and friends)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fluent_ansi.color.kind import ColorKind, check_component

if TYPE_CHECKING:
    from fluent_ansi.color.color import Color
    from fluent_ansi.color_target import ColorTarget
    from fluent_ansi.rendering import CodeWriter

RGB_COLOR_MODE: int = 2


@dataclass(frozen=True, eq=False)
class RGBColor(ColorKind):
    """An RGB color; each component is in ``0..255``."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        check_component("r", self.r)
        check_component("g", self.g)
        check_component("b", self.b)

    @classmethod
    def new(cls, r: int, g: int, b: int) -> RGBColor:
        """Create an RGB color."""
        return cls(r, g, b)

    def to_color(self) -> Color:
        """Wrap into a `Color`."""
        from fluent_ansi.color.color import Color

        return Color(self)

    def write_color_codes(self, target: ColorTarget, writer: CodeWriter) -> None:
        """Write ``<target>;2;<r>;<g>;<b>``."""
        writer.write_code(target.extended_code)
        writer.write_code(RGB_COLOR_MODE)
        writer.write_code(self.r)
        writer.write_code(self.g)
        writer.write_code(self.b)

    def _color_key(self) -> tuple[object, ...]:
        return ("rgb", self.r, self.g, self.b)


RGB = RGBColor
