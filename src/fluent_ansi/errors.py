# topmark:header:start
#
#   project      : fluent-ansi
#   file         : errors.py
#   file_relpath : src/fluent_ansi/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by fluent-ansi.

Building and rendering styles is total: every effect and color target is a
closed enum. The exceptions below guard the Python-side boundaries instead:

    * `ColorValueError`: a color component outside ``0..255`` (or not an
      integer), or a color token that cannot be parsed.
    * `StyleElementError`: a value handed to ``add()``/``set()``/``get()``
      that is not a style element, attribute or color.
    * `UnknownTokenError`: an effect or underline style name that cannot be
      parsed.
    * `ThemeError`: a malformed theme configuration.

Errors raised by an output sink passed to ``write_to()`` are never wrapped;
they reach the caller unchanged.
"""

from __future__ import annotations


class FluentAnsiError(Exception):
    """Base class for all fluent-ansi errors."""


class ColorValueError(FluentAnsiError, ValueError):
    """Error for invalid color components or color tokens."""


class StyleElementError(FluentAnsiError, TypeError):
    """Error for values that cannot be folded into, or queried from, a style."""


class UnknownTokenError(FluentAnsiError, ValueError):
    """Error for unrecognized effect or underline style names."""


class ThemeError(FluentAnsiError):
    """Error for invalid theme configuration (missing/invalid/malformed)."""
