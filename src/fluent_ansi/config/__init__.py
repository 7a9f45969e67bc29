# topmark:header:start
#
#   project      : fluent-ansi
#   file         : __init__.py
#   file_relpath : src/fluent_ansi/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for fluent-ansi.

Modules:

- ``logging``: TRACE level, colored log formatting and ``FLUENT_ANSI_LOG_LEVEL``.
- ``values``: parsing and formatting of color, effect and underline style tokens.
- ``theme``: named styles parsed from TOML text (a theme or a ``pyproject.toml``).

The submodules are imported explicitly (``from fluent_ansi.config.theme import
Theme``) so that ``fluent_ansi.config.logging`` stays importable from the core
modules without pulling in the style model.
"""

from __future__ import annotations
