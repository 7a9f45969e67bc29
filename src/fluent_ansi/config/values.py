# topmark:header:start
#
#   project      : fluent-ansi
#   file         : values.py
#   file_relpath : src/fluent_ansi/config/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse and format the user-facing tokens of themes.

Color tokens:

| Token                 | Color                               |
|-----------------------|-------------------------------------|
| ``"red"``             | ``BasicColor.RED``                  |
| ``"bright-red"``      | ``BasicColor.RED.bright()``         |
| ``196`` or ``"196"``  | ``IndexedColor(196)``               |
| ``"#ff8000"``         | ``RGBColor(255, 128, 0)``           |
| ``[255, 128, 0]``     | ``RGBColor(255, 128, 0)``           |

Palette indexes given as strings must be ASCII digits.
Effect and underline style tokens are member names or values, matched
case-insensitively with ``-`` and spaces folded to ``_`` (``"curly-underline"``,
``"Double Underline"``, ``"dotted"``).
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from fluent_ansi.color import BasicColor, Color, ColorKind, IndexedColor, RGBColor, SimpleColor, as_color
from fluent_ansi.config.logging import get_logger
from fluent_ansi.core.enum_mixins import enum_from_token, norm_token
from fluent_ansi.effect import Effect, UnderlineStyle
from fluent_ansi.errors import ColorValueError, UnknownTokenError

if TYPE_CHECKING:
    from fluent_ansi.color import ColorLike
    from fluent_ansi.config.logging import FluentAnsiLogger

logger: FluentAnsiLogger = get_logger(__name__)

BRIGHT_PREFIX: Final[str] = "bright_"

_HEX_COLOR_RE: Final[re.Pattern[str]] = re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")

ColorToken = str | int | list[int]


def _parse_color_name(token: str) -> Color:
    name: str = norm_token(token)
    bright: bool = name.startswith(BRIGHT_PREFIX)
    if bright:
        name = name[len(BRIGHT_PREFIX) :]
    basic: BasicColor | None = enum_from_token(BasicColor, name)
    if basic is None:
        raise ColorValueError(f"Unknown color name: {token!r}")
    return (basic.bright() if bright else basic).to_color()


def _parse_color_text(token: str) -> Color:
    text: str = token.strip()
    match = _HEX_COLOR_RE.match(text)
    if match is not None:
        r, g, b = (int(part, 16) for part in match.groups())
        return RGBColor(r, g, b).to_color()
    if text.isascii() and text.isdigit():
        return IndexedColor(int(text)).to_color()
    return _parse_color_name(text)


def parse_color(value: object) -> Color:
    """Parse a color token (see the module docstring for the accepted forms).

    Args:
        value (object): A string, an integer palette index, a list of three
            RGB components, or any color kind (returned in canonical form).

    Returns:
        Color: The canonical color.

    Raises:
        ColorValueError: If ``value`` cannot be interpreted as a color.
    """
    logger.trace("parse_color: %r", value)
    match value:
        case ColorKind():
            return as_color(value)
        case bool():
            raise ColorValueError(f"Not a color: {value!r}")
        case int():
            return IndexedColor(value).to_color()
        case str():
            return _parse_color_text(value)
        case [r, g, b]:
            return RGBColor(r, g, b).to_color()
        case _:
            raise ColorValueError(f"Not a color: {value!r}")


def format_color(color: ColorLike) -> ColorToken:
    """Return the token ``parse_color`` reads back as ``color``.

    Args:
        color (ColorLike): Any color kind.

    Returns:
        ColorToken: A name (``"red"``, ``"bright-red"``), a palette index, or
        a ``"#rrggbb"`` string.
    """
    variant = as_color(color).value
    match variant:
        case SimpleColor():
            name: str = variant.basic.name.lower()
            return f"bright-{name}" if variant.is_bright else name
        case IndexedColor():
            return variant.index
        case RGBColor():
            return f"#{variant.r:02x}{variant.g:02x}{variant.b:02x}"


def parse_effect(token: str) -> Effect:
    """Parse an effect name such as ``"bold"`` or ``"curly-underline"``.

    Raises:
        UnknownTokenError: If ``token`` names no effect.
    """
    effect: Effect | None = enum_from_token(Effect, token)
    if effect is None:
        valid: str = ", ".join(format_effect(e) for e in Effect.all())
        raise UnknownTokenError(f"Unknown effect: {token!r} (expected one of: {valid})")
    return effect


def format_effect(effect: Effect) -> str:
    """Return the token ``parse_effect`` reads back as ``effect``."""
    return effect.name.lower()


def parse_underline_style(token: str) -> UnderlineStyle:
    """Parse an underline style name such as ``"curly"``.

    Raises:
        UnknownTokenError: If ``token`` names no underline style.
    """
    underline_style: UnderlineStyle | None = enum_from_token(UnderlineStyle, token)
    if underline_style is None:
        valid: str = ", ".join(u.value for u in UnderlineStyle.all())
        raise UnknownTokenError(f"Unknown underline style: {token!r} (expected one of: {valid})")
    return underline_style
