# topmark:header:start
#
#   project      : fluent-ansi
#   file         : styled.py
#   file_relpath : src/fluent_ansi/styled.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Content paired with a `Style`.

`Styled` exposes the whole `Style` API; every setter returns a new `Styled`
with the same content and the updated style. Rendering wraps the content in
the style's escape sequence and a reset:

    ```python
    from fluent_ansi import Color, Styled

    assert str(Styled("hi").bold()) == "\\x1b[1mhi\\x1b[0m"
    assert str(Styled("hi")) == "hi"
    assert f"{Color.RED.applied_to(7):>3}" == "\\x1b[31m  7\\x1b[0m"
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from fluent_ansi.builder import StyleBuilder, fold_element
from fluent_ansi.rendering import render_to_string
from fluent_ansi.style import EMPTY_STYLE, Style

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from fluent_ansi.attributes import AttributeValue, StyleAttribute
    from fluent_ansi.color import Color, ColorLike
    from fluent_ansi.color_target import ColorTarget
    from fluent_ansi.effect import Effect, UnderlineStyle
    from fluent_ansi.rendering import TextSink

C = TypeVar("C")
D = TypeVar("D")


@dataclass(frozen=True)
class Styled(StyleBuilder["Styled[C]"], Generic[C]):
    """Some content with a style.

    Attributes:
        content (C): The styled value; rendered with ``str()`` (or
            ``format()`` when a format spec is given).
        style (Style): The style applied to the content.
    """

    content: C
    style: Style = EMPTY_STYLE

    @classmethod
    def new(cls, content: C) -> Styled[C]:
        """Wrap ``content`` with an empty style."""
        return cls(content)

    # --- Content and style ---

    def get_content(self) -> C:
        """Return the content."""
        return self.content

    def with_content(self, content: D) -> Styled[D]:
        """Return a `Styled` with the same style and new content."""
        return Styled(content, self.style)

    def into_content(self) -> C:
        """Drop the style and return the content."""
        return self.content

    def get_style(self) -> Style:
        """Return the style."""
        return self.style

    def with_style(self, style: Style) -> Styled[C]:
        """Return a `Styled` with the same content and ``style``."""
        return replace(self, style=style)

    def _modify_style(self, update: Callable[[Style], Style]) -> Styled[C]:
        return replace(self, style=update(self.style))

    # --- Style API ---

    def set_effect(self, effect: Effect | UnderlineStyle, value: bool) -> Styled[C]:
        """Enable or disable an effect (see `Style.set_effect`)."""
        return self._modify_style(lambda style: style.set_effect(effect, value))

    def get_effect(self, effect: Effect | UnderlineStyle) -> bool:
        """Return whether ``effect`` is active."""
        return self.style.get_effect(effect)

    def get_effects(self) -> Iterator[Effect]:
        """Yield the active effects, in declaration order."""
        return self.style.get_effects()

    def set_underline_style(self, underline_style: UnderlineStyle | None) -> Styled[C]:
        """Replace the underline style; None removes any underline."""
        return self._modify_style(lambda style: style.set_underline_style(underline_style))

    def get_underline_style(self) -> UnderlineStyle | None:
        """Return the active underline style, if any."""
        return self.style.get_underline_style()

    def set_color(self, target: ColorTarget, color: ColorLike | None) -> Styled[C]:
        """Replace the color of ``target``; None clears it."""
        return self._modify_style(lambda style: style.set_color(target, color))

    def get_color(self, target: ColorTarget) -> Color | None:
        """Return the color of ``target``, if any."""
        return self.style.get_color(target)

    def set(self, attr: StyleAttribute, value: AttributeValue) -> Styled[C]:
        """Set ``attr`` to ``value`` (see `Style.set`)."""
        return self._modify_style(lambda style: style.set(attr, value))

    def get(self, attr: StyleAttribute) -> AttributeValue:
        """Return the value of ``attr``."""
        return self.style.get(attr)

    def unset(self, attr: StyleAttribute) -> Styled[C]:
        """Reset ``attr`` to its default."""
        return self._modify_style(lambda style: style.unset(attr))

    def add(self, element: Any) -> Styled[C]:
        """Fold a style element into the style."""
        return fold_element(self, element)

    # --- Rendering ---

    def _write_content(self, sink: TextSink, text: str) -> None:
        if self.style.is_empty():
            sink.write(text)
            return
        self.style.write_to(sink)
        sink.write(text)
        EMPTY_STYLE.write_to(sink)

    def write_to(self, sink: TextSink) -> None:
        """Write the styled content into ``sink``.

        The content is written verbatim when the style is empty; otherwise
        it is enclosed in the style's escape sequence and ``ESC[0m``.
        """
        self._write_content(sink, str(self.content))

    def __str__(self) -> str:
        return render_to_string(self.write_to)

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        text = format(self.content, format_spec)
        return render_to_string(lambda sink: self._write_content(sink, text))
