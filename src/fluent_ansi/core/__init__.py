# topmark:header:start
#
#   project      : fluent-ansi
#   file         : __init__.py
#   file_relpath : src/fluent_ansi/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UI-agnostic helpers shared by the configuration layer.

Included modules:

- ``enum_mixins``
  Token normalization and Enum lookup helpers used to parse user-supplied
  effect, underline style and color names.
"""

from __future__ import annotations
