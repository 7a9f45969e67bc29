# topmark:header:start
#
#   project      : fluent-ansi
#   file         : test_encoded_effects.py
#   file_relpath : tests/style/test_encoded_effects.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the packed effect set."""

from __future__ import annotations

from fluent_ansi import Effect, UnderlineStyle
from fluent_ansi.encoded_effects import EncodedEffects


def test_empty() -> None:
    """The empty set has no effect and no underline."""
    encoded = EncodedEffects()
    assert not encoded
    assert list(encoded.get_effects()) == []
    assert encoded.get_underline() is None


def test_set_and_clear() -> None:
    """Setting and clearing a regular effect flips exactly one bit."""
    encoded = EncodedEffects().set(Effect.BOLD, True).set(Effect.OVERLINE, True)
    assert encoded.get(Effect.BOLD)
    assert encoded.get(Effect.OVERLINE)
    assert not encoded.get(Effect.ITALIC)

    cleared = encoded.set(Effect.BOLD, False)
    assert not cleared.get(Effect.BOLD)
    assert cleared.get(Effect.OVERLINE)
    assert encoded.get(Effect.BOLD)


def test_underline_effects_replace_each_other() -> None:
    """Setting an underline effect clears the other underline bits only."""
    encoded = (
        EncodedEffects()
        .set(Effect.ITALIC, True)
        .set(Effect.CURLY_UNDERLINE, True)
        .set(Effect.DOTTED_UNDERLINE, True)
    )
    assert list(encoded.get_effects()) == [Effect.ITALIC, Effect.DOTTED_UNDERLINE]
    assert encoded.get_underline() is UnderlineStyle.DOTTED


def test_set_underline_and_remove_underline() -> None:
    """`set_underline(None)` and `remove_underline()` clear the underline family."""
    encoded = EncodedEffects().set(Effect.BOLD, True).set_underline(UnderlineStyle.DOUBLE)
    assert encoded.get(Effect.DOUBLE_UNDERLINE)

    assert encoded.set_underline(None) == EncodedEffects().set(Effect.BOLD, True)
    assert encoded.remove_underline() == encoded.set_underline(None)
    assert encoded.set_underline(UnderlineStyle.SOLID).get_underline() is UnderlineStyle.SOLID


def test_clearing_an_inactive_underline_keeps_the_active_one() -> None:
    """Clearing an underline effect that is not set changes nothing."""
    encoded = EncodedEffects().set(Effect.CURLY_UNDERLINE, True)
    assert encoded.set(Effect.UNDERLINE, False) == encoded


def test_get_effects_is_restartable_and_ordered() -> None:
    """Effects are yielded in declaration order, on every call."""
    encoded = EncodedEffects().set(Effect.OVERLINE, True).set(Effect.BOLD, True).set(Effect.BLINK, True)
    expected = [Effect.BOLD, Effect.BLINK, Effect.OVERLINE]
    assert list(encoded.get_effects()) == expected
    assert list(encoded.get_effects()) == expected
