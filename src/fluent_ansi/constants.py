# topmark:header:start
#
#   project      : fluent-ansi
#   file         : constants.py
#   file_relpath : src/fluent_ansi/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""fluent-ansi Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    FLUENT_ANSI_VERSION: str = get_version("fluent-ansi")
except PackageNotFoundError:  # pragma: no cover - source checkout without install
    FLUENT_ANSI_VERSION = "0.0.0"

# Control Sequence Introducer (ESC + '[') and the SGR final byte.
CSI: str = "\x1b["
SGR_END: str = "m"

# Parameter rendered for the empty style (full reset).
RESET_CODE: int = 0

CODE_SEPARATOR: str = ";"
SUB_PARAMETER_SEPARATOR: str = ":"

# Environment variable consulted by `fluent_ansi.config.logging`.
LOG_LEVEL_ENV_VAR: str = "FLUENT_ANSI_LOG_LEVEL"

# Table names looked up in theme documents.
THEME_STYLES_KEY: str = "styles"
PYPROJECT_TOOL_KEYS: tuple[str, ...] = ("fluent-ansi", "fluent_ansi")
