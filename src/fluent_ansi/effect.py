# topmark:header:start
#
#   project      : fluent-ansi
#   file         : effect.py
#   file_relpath : src/fluent_ansi/effect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text effects and underline styles.

`Effect` enumerates every supported text effect; its ``.value`` is the SGR
parameter (a tuple for colon-qualified codes such as ``4:3``). The
declaration order is significant: it fixes the bit layout of
`fluent_ansi.encoded_effects.EncodedEffects` and the order in which
effects are rendered.

Five effects form the underline family, mirrored by `UnderlineStyle`. At
most one of them is active in a style: setting one clears the others.

`Underline` is the attribute descriptor for "the current underline style",
usable with ``Style.set``/``Style.get``/``Style.unset``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final, TypeVar

from fluent_ansi.builder import StyleElement

if TYPE_CHECKING:
    from fluent_ansi.rendering import SgrCode

_S = TypeVar("_S")


class Effect(StyleElement, Enum):
    """Supported text styling effects, valued by their SGR parameter."""

    BOLD = 1
    FAINT = 2
    ITALIC = 3
    UNDERLINE = 4
    CURLY_UNDERLINE = (4, 3)
    DOTTED_UNDERLINE = (4, 4)
    DASHED_UNDERLINE = (4, 5)
    BLINK = 5
    REVERSE = 7
    CONCEAL = 8
    STRIKETHROUGH = 9
    DOUBLE_UNDERLINE = 21
    OVERLINE = 53

    @classmethod
    def all(cls) -> tuple[Effect, ...]:
        """Return every effect in declaration order."""
        return tuple(cls)

    def get_code(self) -> SgrCode:
        """Return the SGR parameter of this effect.

        Returns:
            SgrCode: An ``int``, or a ``(code, sub_code)`` tuple for the
            colon-qualified underline styles.
        """
        return self.value

    def bit_mask(self) -> int:
        """Return the bit of this effect in the packed effect set."""
        return _BIT_MASKS[self]

    @property
    def is_underline(self) -> bool:
        """Whether this effect belongs to the underline family."""
        return self in _UNDERLINE_EFFECTS

    def to_underline_style(self) -> UnderlineStyle | None:
        """Return the matching underline style, or None for other effects."""
        return _UNDERLINE_EFFECTS.get(self)

    def add_to(self, style_set: _S) -> _S:
        """Set this effect in ``style_set``."""
        return style_set.set_effect(self, True)  # type: ignore[attr-defined]


class UnderlineStyle(StyleElement, Enum):
    """Mutually exclusive underline styles (a subset of `Effect`)."""

    SOLID = "solid"
    CURLY = "curly"
    DOTTED = "dotted"
    DASHED = "dashed"
    DOUBLE = "double"

    @classmethod
    def all(cls) -> tuple[UnderlineStyle, ...]:
        """Return every underline style in declaration order."""
        return tuple(cls)

    def to_effect(self) -> Effect:
        """Return the effect for this underline style."""
        return _EFFECTS_BY_UNDERLINE[self]

    def add_to(self, style_set: _S) -> _S:
        """Make this the underline style of ``style_set``."""
        return style_set.set_underline_style(self)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Underline:
    """Attribute descriptor for the current underline style.

    ``style.get(UNDERLINE)`` returns the active `UnderlineStyle` (or None);
    ``style.set(UNDERLINE, UnderlineStyle.CURLY)`` replaces it.
    """


UNDERLINE: Final[Underline] = Underline()

_EFFECTS_BY_UNDERLINE: Final[dict[UnderlineStyle, Effect]] = {
    UnderlineStyle.SOLID: Effect.UNDERLINE,
    UnderlineStyle.CURLY: Effect.CURLY_UNDERLINE,
    UnderlineStyle.DOTTED: Effect.DOTTED_UNDERLINE,
    UnderlineStyle.DASHED: Effect.DASHED_UNDERLINE,
    UnderlineStyle.DOUBLE: Effect.DOUBLE_UNDERLINE,
}

_UNDERLINE_EFFECTS: Final[dict[Effect, UnderlineStyle]] = {
    effect: underline_style for underline_style, effect in _EFFECTS_BY_UNDERLINE.items()
}

# One bit per effect, indexed by declaration order.
_BIT_MASKS: Final[dict[Effect, int]] = {effect: 1 << i for i, effect in enumerate(Effect)}
