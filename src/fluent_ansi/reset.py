# topmark:header:start
#
#   project      : fluent-ansi
#   file         : reset.py
#   file_relpath : src/fluent_ansi/reset.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The reset sequence ``ESC[0m``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from fluent_ansi.constants import RESET_CODE
from fluent_ansi.rendering import render_to_string, write_escape_sequence
from fluent_ansi.style import EMPTY_STYLE, Style

if TYPE_CHECKING:
    from fluent_ansi.rendering import TextSink


@dataclass(frozen=True)
class Reset:
    """Clears every effect and color. Equal to the empty `Style`."""

    def to_style(self) -> Style:
        """Return the empty style."""
        return EMPTY_STYLE

    def write_to(self, sink: TextSink) -> None:
        """Write ``ESC[0m`` into ``sink``."""
        write_escape_sequence(sink, lambda writer: writer.write_code(RESET_CODE))

    def __str__(self) -> str:
        return render_to_string(self.write_to)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Reset):
            return True
        if isinstance(other, Style):
            return other.is_empty()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(EMPTY_STYLE)


RESET: Final[Reset] = Reset()
