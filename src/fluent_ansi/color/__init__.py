# topmark:header:start
#
#   project      : fluent-ansi
#   file         : __init__.py
#   file_relpath : src/fluent_ansi/color/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color kinds and the `Color` sum type.

Kinds, from the most restricted to the most general:

    * `BasicColor`: the 8 basic hues (also ``Color.RED`` etc.).
    * `SimpleColor`: a basic hue with an optional bright variant (16 colors).
    * `IndexedColor`: the 256-color palette (``Color.indexed(n)``).
    * `RGBColor` (alias `RGB`): 24-bit true color (``Color.rgb(r, g, b)``).

All of them convert into `Color` and share the `ColorKind` capabilities.
"""

from __future__ import annotations

from fluent_ansi.color.basic import BasicColor
from fluent_ansi.color.color import Color, ColorLike, ColorVariant, as_color
from fluent_ansi.color.indexed import IndexedColor
from fluent_ansi.color.kind import ColorKind
from fluent_ansi.color.rgb import RGB, RGBColor
from fluent_ansi.color.simple import SimpleColor

__all__ = [
    "RGB",
    "BasicColor",
    "Color",
    "ColorKind",
    "ColorLike",
    "ColorVariant",
    "IndexedColor",
    "RGBColor",
    "SimpleColor",
    "as_color",
]
