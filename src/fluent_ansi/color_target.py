# topmark:header:start
#
#   project      : fluent-ansi
#   file         : color_target.py
#   file_relpath : src/fluent_ansi/color_target.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The channel a color is rendered on."""

from __future__ import annotations

from enum import Enum


class ColorTarget(Enum):
    """Where a color applies: foreground, background or underline.

    Also usable as a style attribute: ``style.get(ColorTarget.BACKGROUND)``
    returns the background color (or None).
    """

    FOREGROUND = "foreground"
    BACKGROUND = "background"
    UNDERLINE = "underline"

    @property
    def extended_code(self) -> int:
        """SGR parameter introducing an indexed or RGB color for this target."""
        return {
            ColorTarget.FOREGROUND: 38,
            ColorTarget.BACKGROUND: 48,
            ColorTarget.UNDERLINE: 58,
        }[self]
