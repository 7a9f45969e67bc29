# topmark:header:start
#
#   project      : fluent-ansi
#   file         : attributes.py
#   file_relpath : src/fluent_ansi/attributes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic attribute access for ``Style.set``, ``Style.get`` and ``Style.unset``.

An attribute is one of a closed set of descriptors, each with its own value
type and default:

| Attribute          | Value                    | Default |
|--------------------|--------------------------|---------|
| `Effect`           | ``bool``                 | False   |
| `UnderlineStyle`   | ``bool``                 | False   |
| `Underline`        | ``UnderlineStyle`` or None | None  |
| `ColorTarget`      | ``Color`` or None        | None    |

Each operation dispatches with a single ``match`` over that union.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias, Union

from fluent_ansi.color_target import ColorTarget
from fluent_ansi.effect import Effect, Underline, UnderlineStyle
from fluent_ansi.errors import StyleElementError

if TYPE_CHECKING:
    from fluent_ansi.color import Color
    from fluent_ansi.style import Style

StyleAttribute: TypeAlias = Union[Effect, UnderlineStyle, Underline, ColorTarget]
AttributeValue: TypeAlias = Union[bool, UnderlineStyle, "Color", None]


def _check_flag(attr: StyleAttribute, value: object) -> bool:
    if not isinstance(value, bool):
        raise StyleElementError(f"{attr!r} takes a bool value, got {value!r}")
    return value


def set_attribute(style: Style, attr: StyleAttribute, value: AttributeValue) -> Style:
    """Return ``style`` with ``attr`` set to ``value``.

    Raises:
        StyleElementError: If ``attr`` is not an attribute, or ``value`` does
            not fit the attribute.
    """
    match attr:
        case Effect():
            return style.set_effect(attr, _check_flag(attr, value))
        case UnderlineStyle():
            return style.set_effect(attr.to_effect(), _check_flag(attr, value))
        case Underline():
            if value is not None and not isinstance(value, UnderlineStyle):
                raise StyleElementError(f"Underline takes an UnderlineStyle or None, got {value!r}")
            return style.set_underline_style(value)
        case ColorTarget():
            return style.set_color(attr, value)  # type: ignore[arg-type]
        case _:
            raise StyleElementError(f"Not a style attribute: {attr!r}")


def get_attribute(style: Style, attr: StyleAttribute) -> AttributeValue:
    """Return the value of ``attr`` in ``style``.

    Raises:
        StyleElementError: If ``attr`` is not an attribute.
    """
    match attr:
        case Effect():
            return style.get_effect(attr)
        case UnderlineStyle():
            return style.get_effect(attr.to_effect())
        case Underline():
            return style.get_underline_style()
        case ColorTarget():
            return style.get_color(attr)
        case _:
            raise StyleElementError(f"Not a style attribute: {attr!r}")


def attribute_default(attr: StyleAttribute) -> AttributeValue:
    """Return the value ``unset`` assigns to ``attr``.

    Raises:
        StyleElementError: If ``attr`` is not an attribute.
    """
    match attr:
        case Effect() | UnderlineStyle():
            return False
        case Underline() | ColorTarget():
            return None
        case _:
            raise StyleElementError(f"Not a style attribute: {attr!r}")
