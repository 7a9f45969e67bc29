# topmark:header:start
#
#   project      : fluent-ansi
#   file         : encoded_effects.py
#   file_relpath : src/fluent_ansi/encoded_effects.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Packed bit representation of the effects active in a style.

Each `fluent_ansi.effect.Effect` owns one bit (``1 << declaration index``),
so the thirteen effects fit in 16 bits. Underline-family effects are never
toggled directly: enabling one goes through `EncodedEffects.set_underline`,
which clears all five underline bits before setting the requested one. That
keeps at most one underline bit set whatever the order of calls.

This type is internal; styles expose it only through effect queries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fluent_ansi.effect import Effect, UnderlineStyle

if TYPE_CHECKING:
    from collections.abc import Iterator

_UNDERLINE_MASK: int = sum(style.to_effect().bit_mask() for style in UnderlineStyle)


@dataclass(frozen=True)
class EncodedEffects:
    """Immutable bit set of active effects."""

    bits: int = 0

    def set(self, effect: Effect, value: bool) -> EncodedEffects:
        """Return a copy with ``effect`` enabled or disabled.

        Args:
            effect (Effect): The effect to change.
            value (bool): True to enable the effect, False to disable it.

        Returns:
            EncodedEffects: The updated effect set.
        """
        if value:
            return self._add(effect)
        return self._remove(effect)

    def _add(self, effect: Effect) -> EncodedEffects:
        underline_style = effect.to_underline_style()
        if underline_style is not None:
            return self.set_underline(underline_style)
        return self._set_bit(effect)

    def _remove(self, effect: Effect) -> EncodedEffects:
        return self._clear_bit(effect)

    def set_underline(self, underline_style: UnderlineStyle | None) -> EncodedEffects:
        """Replace the underline style (None removes any underline)."""
        encoded = self.remove_underline()
        if underline_style is None:
            return encoded
        return encoded._set_bit(underline_style.to_effect())

    def remove_underline(self) -> EncodedEffects:
        """Return a copy with every underline-family bit cleared."""
        return EncodedEffects(self.bits & ~_UNDERLINE_MASK)

    def get(self, effect: Effect) -> bool:
        """Return whether ``effect`` is active."""
        return self.bits & effect.bit_mask() != 0

    def get_underline(self) -> UnderlineStyle | None:
        """Return the active underline style, if any."""
        for underline_style in UnderlineStyle.all():
            if self.get(underline_style.to_effect()):
                return underline_style
        return None

    def get_effects(self) -> Iterator[Effect]:
        """Yield the active effects in declaration order."""
        for effect in Effect:
            if self.get(effect):
                yield effect

    def _set_bit(self, effect: Effect) -> EncodedEffects:
        return EncodedEffects(self.bits | effect.bit_mask())

    def _clear_bit(self, effect: Effect) -> EncodedEffects:
        return EncodedEffects(self.bits & ~effect.bit_mask())

    def __bool__(self) -> bool:
        return self.bits != 0
