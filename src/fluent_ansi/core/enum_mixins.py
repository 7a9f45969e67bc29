# topmark:header:start
#
#   project      : fluent-ansi
#   file         : enum_mixins.py
#   file_relpath : src/fluent_ansi/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic Enum utilities for fluent-ansi (typing-friendly, UI-agnostic).

Provided:
    - ``norm_token(s)``:
        Normalize an identifier-like string (case-insensitive, ``-`` and
        spaces folded to ``_``).
    - ``enum_from_token(enum_cls, raw)``:
        Lookup by normalized member name, or by normalized ``str`` value.

Example:
    ```python
    from fluent_ansi import Effect, UnderlineStyle
    from fluent_ansi.core.enum_mixins import enum_from_token

    assert enum_from_token(Effect, "Curly-Underline") is Effect.CURLY_UNDERLINE
    assert enum_from_token(UnderlineStyle, "dotted") is UnderlineStyle.DOTTED
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

_E = TypeVar("_E", bound=Enum)


def norm_token(s: str) -> str:
    """Normalize an identifier-like string to match member names and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


def enum_from_token(enum_cls: type[_E], raw: str | None) -> _E | None:
    """Parse a user token into an enum member.

    Matches against:
      - the member name (``.name``)
      - the member value, when it is a string

    Matching is case-insensitive and normalizes '-', ' ' to '_' via `norm_token()`.

    Args:
        enum_cls (type[_E]): The Enum class to search.
        raw (str | None): The user token.

    Returns:
        _E | None: The matching member, or ``None`` on miss.
    """
    if raw is None:
        return None
    token: str = norm_token(raw)
    for member in enum_cls:
        if token == norm_token(member.name):
            return member
        if isinstance(member.value, str) and token == norm_token(member.value):
            return member
    return None
