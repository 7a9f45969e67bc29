# topmark:header:start
#
#   project      : fluent-ansi
#   file         : indexed.py
#   file_relpath : src/fluent_ansi/color/indexed.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colors from the 256-color palette (``38;5;N``, ``48;5;N``, ``58;5;N``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fluent_ansi.color.kind import ColorKind, check_component

if TYPE_CHECKING:
    from fluent_ansi.color.color import Color
    from fluent_ansi.color_target import ColorTarget
    from fluent_ansi.rendering import CodeWriter

INDEXED_COLOR_MODE: int = 5


@dataclass(frozen=True, eq=False)
class IndexedColor(ColorKind):
    """An 8-bit color, addressed by its palette index (``0..255``)."""

    index: int

    def __post_init__(self) -> None:
        check_component("index", self.index)

    @classmethod
    def new(cls, index: int) -> IndexedColor:
        """Create an indexed color."""
        return cls(index)

    def get_index(self) -> int:
        """Return the palette index."""
        return self.index

    def to_color(self) -> Color:
        """Wrap into a `Color`."""
        from fluent_ansi.color.color import Color

        return Color(self)

    def write_color_codes(self, target: ColorTarget, writer: CodeWriter) -> None:
        """Write ``<target>;5;<index>``."""
        writer.write_code(target.extended_code)
        writer.write_code(INDEXED_COLOR_MODE)
        writer.write_code(self.index)

    def _color_key(self) -> tuple[object, ...]:
        return ("indexed", self.index)
