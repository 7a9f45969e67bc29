# topmark:header:start
#
#   project      : fluent-ansi
#   file         : theme.py
#   file_relpath : src/fluent_ansi/config/theme.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named styles loaded from TOML.

A theme maps names to `Style` values. It is parsed from the text of a standalone
TOML document or of a ``pyproject.toml`` holding a ``[tool.fluent-ansi]`` table:

```toml
[styles.error]
effects = ["bold"]
underline = "curly"
fg = "red"
bg = "bright-black"
underline_color = 196

[styles.path]
fg = "#5f87ff"
```

Parsing is done with `tomlkit`; color, effect and underline style tokens
are handled by `fluent_ansi.config.values`. Any malformed entry raises
`ThemeError` naming the source and the offending key.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final, TypeVar, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from fluent_ansi.color_target import ColorTarget
from fluent_ansi.config.logging import get_logger
from fluent_ansi.config.values import (
    format_color,
    format_effect,
    parse_color,
    parse_effect,
    parse_underline_style,
)
from fluent_ansi.constants import PYPROJECT_TOOL_KEYS, THEME_STYLES_KEY
from fluent_ansi.errors import FluentAnsiError, ThemeError
from fluent_ansi.style import Style

if TYPE_CHECKING:
    from fluent_ansi.config.logging import FluentAnsiLogger
    from fluent_ansi.styled import Styled

logger: FluentAnsiLogger = get_logger(__name__)

_C = TypeVar("_C")

TomlTable = dict[str, Any]

KEY_EFFECTS: Final[str] = "effects"
KEY_UNDERLINE: Final[str] = "underline"
KEY_FG: Final[str] = "fg"
KEY_BG: Final[str] = "bg"
KEY_UNDERLINE_COLOR: Final[str] = "underline_color"

_COLOR_KEYS: Final[dict[str, ColorTarget]] = {
    KEY_FG: ColorTarget.FOREGROUND,
    KEY_BG: ColorTarget.BACKGROUND,
    KEY_UNDERLINE_COLOR: ColorTarget.UNDERLINE,
}
_STYLE_KEYS: Final[frozenset[str]] = frozenset({KEY_EFFECTS, KEY_UNDERLINE, *_COLOR_KEYS})


# --- TOML table -> Style ---


def style_from_table(table: object, *, where: str) -> Style:
    """Build a `Style` from one ``[styles.<name>]`` table.

    Args:
        table (object): The unwrapped TOML table.
        where (str): Location used in error messages (``"theme.toml: styles.error"``).

    Returns:
        Style: The described style.

    Raises:
        ThemeError: If the table holds unknown keys or unparseable values.
    """
    if not isinstance(table, Mapping):
        raise ThemeError(f"{where}: expected a table, got {type(table).__name__}")
    entries: Mapping[str, object] = cast("Mapping[str, object]", table)

    unknown: list[str] = sorted(set(entries) - _STYLE_KEYS)
    if unknown:
        raise ThemeError(f"{where}: unknown key(s): {', '.join(unknown)}")

    style = Style()
    key: str = KEY_EFFECTS
    try:
        effects: object = entries.get(KEY_EFFECTS, [])
        if not isinstance(effects, list):
            raise ThemeError(f"{where}.{KEY_EFFECTS}: expected a list of effect names")
        for token in cast("list[object]", effects):
            if not isinstance(token, str):
                raise ThemeError(f"{where}.{KEY_EFFECTS}: expected an effect name, got {token!r}")
            style = style.effect(parse_effect(token))

        key = KEY_UNDERLINE
        underline: object = entries.get(KEY_UNDERLINE)
        if underline is not None:
            if not isinstance(underline, str):
                raise ThemeError(f"{where}.{KEY_UNDERLINE}: expected an underline style name")
            style = style.underline_style(parse_underline_style(underline))

        for key, target in _COLOR_KEYS.items():
            raw: object = entries.get(key)
            if raw is not None:
                style = style.set_color(target, parse_color(raw))
    except ThemeError:
        raise
    except FluentAnsiError as exc:
        raise ThemeError(f"{where}.{key}: {exc}") from exc

    logger.trace("%s -> %r", where, style)
    return style


def style_to_table(style: Style) -> TomlTable:
    """Return the TOML table ``style_from_table`` reads back as ``style``."""
    table: TomlTable = {}
    effects: list[str] = [format_effect(e) for e in style.get_effects() if not e.is_underline]
    if effects:
        table[KEY_EFFECTS] = effects
    underline_style = style.get_underline_style()
    if underline_style is not None:
        table[KEY_UNDERLINE] = underline_style.value
    for key, target in _COLOR_KEYS.items():
        color = style.get_color(target)
        if color is not None:
            table[key] = format_color(color)
    return table


# --- Theme ---


@dataclass(frozen=True)
class Theme:
    """An immutable set of named styles.

    Attributes:
        styles (dict[str, Style]): Styles by name, in declaration order.
        source (str): Where the theme was read from (used in error messages).
    """

    styles: dict[str, Style] = field(default_factory=lambda: {})
    source: str = "<theme>"

    def names(self) -> tuple[str, ...]:
        """Return the style names, in declaration order."""
        return tuple(self.styles)

    def get(self, name: str) -> Style:
        """Return the style called ``name``.

        Raises:
            ThemeError: If the theme defines no such style.
        """
        try:
            return self.styles[name]
        except KeyError:
            known: str = ", ".join(self.names()) or "(none)"
            raise ThemeError(f"{self.source}: unknown style {name!r} (known: {known})") from None

    def apply(self, name: str, content: _C) -> Styled[_C]:
        """Apply the style called ``name`` to ``content``."""
        return self.get(name).applied_to(content)

    def __contains__(self, name: object) -> bool:
        return name in self.styles

    def __len__(self) -> int:
        return len(self.styles)

    def __hash__(self) -> int:
        # `styles` is a dict, so the generated field hash cannot be used.
        return hash((tuple(self.styles.items()), self.source))

    # --- Loading ---

    @classmethod
    def from_table(cls, data: Mapping[str, object], *, source: str = "<theme>") -> Theme:
        """Build a theme from an unwrapped TOML document.

        ``data`` is either a theme document (with a ``[styles]`` table) or a
        ``pyproject.toml`` document holding one under ``[tool.fluent-ansi]``.

        Raises:
            ThemeError: If the document is malformed.
        """
        root: Mapping[str, object] = data
        tool: object = data.get("tool")
        if THEME_STYLES_KEY not in data and isinstance(tool, Mapping):
            tables: Mapping[str, object] = cast("Mapping[str, object]", tool)
            for tool_key in PYPROJECT_TOOL_KEYS:
                section: object = tables.get(tool_key)
                if isinstance(section, Mapping):
                    logger.debug("%s: using [tool.%s]", source, tool_key)
                    root = cast("Mapping[str, object]", section)
                    break
            else:
                raise ThemeError(f"{source}: no [tool.{PYPROJECT_TOOL_KEYS[0]}] table")

        styles_any: object = root.get(THEME_STYLES_KEY, {})
        if not isinstance(styles_any, Mapping):
            raise ThemeError(f"{source}: [{THEME_STYLES_KEY}] must be a table")
        styles_table: Mapping[str, object] = cast("Mapping[str, object]", styles_any)
        if not styles_table:
            logger.debug("%s: theme defines no styles", source)

        styles: dict[str, Style] = {
            name: style_from_table(table, where=f"{source}: {THEME_STYLES_KEY}.{name}")
            for name, table in styles_table.items()
        }
        logger.debug("%s: loaded %d style(s)", source, len(styles))
        return cls(styles=styles, source=source)

    @classmethod
    def from_toml_text(cls, text: str, *, source: str = "<string>") -> Theme:
        """Parse a theme from TOML text.

        Raises:
            ThemeError: If ``text`` is not valid TOML or not a valid theme.
        """
        try:
            doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        except TomlkitParseError as exc:
            raise ThemeError(f"{source}: invalid TOML: {exc}") from exc
        data_any: Any = doc.unwrap()
        return cls.from_table(cast("TomlTable", data_any), source=source)

    # --- Rendering ---

    def to_table(self) -> TomlTable:
        """Return the theme as a TOML-compatible dict."""
        return {THEME_STYLES_KEY: {name: style_to_table(style) for name, style in self.styles.items()}}

    def to_toml(self) -> str:
        """Serialize the theme to TOML text that `from_toml_text` reads back."""
        return cast("str", cast("Any", tomlkit).dumps(self.to_table()))
