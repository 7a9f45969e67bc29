# topmark:header:start
#
#   project      : fluent-ansi
#   file         : __init__.py
#   file_relpath : src/fluent_ansi/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""fluent-ansi package.

Immutable, composable ANSI text styles. Styles are built fluently from
effects and colors, and render as SGR escape sequences:

    ```python
    from fluent_ansi import Color, Style, Styled

    error = Style().bold().fg(Color.RED)
    assert str(error) == "\\x1b[1;31m"
    assert str(error.applied_to("oops")) == "\\x1b[1;31moops\\x1b[0m"
    assert str(Styled("plain")) == "plain"
    ```

The library only produces text; it never queries or drives the terminal.
"""

from __future__ import annotations

from fluent_ansi.attributes import AttributeValue, StyleAttribute
from fluent_ansi.builder import StyleBuilder, StyleElement
from fluent_ansi.color import (
    RGB,
    BasicColor,
    Color,
    ColorKind,
    ColorLike,
    IndexedColor,
    RGBColor,
    SimpleColor,
)
from fluent_ansi.color_target import ColorTarget
from fluent_ansi.constants import FLUENT_ANSI_VERSION
from fluent_ansi.effect import UNDERLINE, Effect, Underline, UnderlineStyle
from fluent_ansi.errors import (
    ColorValueError,
    FluentAnsiError,
    StyleElementError,
    ThemeError,
    UnknownTokenError,
)
from fluent_ansi.reset import RESET, Reset
from fluent_ansi.style import Style
from fluent_ansi.styled import Styled
from fluent_ansi.targeted_color import TargetedColor

__version__: str = FLUENT_ANSI_VERSION

__all__ = [
    "RESET",
    "RGB",
    "UNDERLINE",
    "AttributeValue",
    "BasicColor",
    "Color",
    "ColorKind",
    "ColorLike",
    "ColorTarget",
    "ColorValueError",
    "Effect",
    "FluentAnsiError",
    "IndexedColor",
    "RGBColor",
    "Reset",
    "SimpleColor",
    "Style",
    "StyleAttribute",
    "StyleBuilder",
    "StyleElement",
    "StyleElementError",
    "Styled",
    "TargetedColor",
    "ThemeError",
    "Underline",
    "UnderlineStyle",
    "UnknownTokenError",
    "__version__",
]
