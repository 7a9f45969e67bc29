# topmark:header:start
#
#   project      : fluent-ansi
#   file         : rendering.py
#   file_relpath : src/fluent_ansi/rendering.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Code-sequence writer for SGR escape sequences.

Styles render by writing numeric SGR parameters through a `CodeWriter`,
which joins them with ``;`` and writes them straight into a text sink.
Colon-qualified parameters (``4:3`` and friends) are written from tuples.

The sink is anything with a ``write(str)`` method (``io.StringIO``,
``sys.stdout``, an open file). Exceptions raised by the sink propagate to
the caller unchanged.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Protocol

from fluent_ansi.constants import CODE_SEPARATOR, CSI, SGR_END, SUB_PARAMETER_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Callable

SgrCode = int | tuple[int, ...]


class TextSink(Protocol):
    """Output sink accepting text, compatible with `typing.TextIO.write`."""

    def write(self, text: str, /) -> object:
        """Write ``text`` to the sink."""
        ...


class CodeWriter:
    """Write SGR parameters into a sink, separating them with ``;``.

    Args:
        sink (TextSink): Destination of the rendered parameters.
    """

    def __init__(self, sink: TextSink) -> None:
        self._sink = sink
        self._any = False

    def write_code(self, code: SgrCode) -> None:
        """Write one SGR parameter.

        Args:
            code (SgrCode): A plain parameter, or a tuple rendered with
                sub-parameter notation (``(4, 3)`` becomes ``4:3``).
        """
        if self._any:
            self._sink.write(CODE_SEPARATOR)
        if isinstance(code, tuple):
            self._sink.write(SUB_PARAMETER_SEPARATOR.join(str(part) for part in code))
        else:
            self._sink.write(str(code))
        self._any = True


def write_escape_sequence(sink: TextSink, write_codes: Callable[[CodeWriter], None]) -> None:
    """Write ``CSI <codes> m`` into ``sink``.

    Args:
        sink (TextSink): Destination of the escape sequence.
        write_codes (Callable[[CodeWriter], None]): Callback writing the parameters.
    """
    sink.write(CSI)
    write_codes(CodeWriter(sink))
    sink.write(SGR_END)


def render_to_string(write_to: Callable[[TextSink], None]) -> str:
    """Run a ``write_to`` method against an in-memory buffer and return the text."""
    buffer = io.StringIO()
    write_to(buffer)
    return buffer.getvalue()
