# topmark:header:start
#
#   project      : fluent-ansi
#   file         : color.py
#   file_relpath : src/fluent_ansi/color/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The `Color` sum type.

`Color` wraps exactly one variant: a `SimpleColor` (16 colors), an
`IndexedColor` (256 colors) or an `RGBColor` (true color). Every color kind
converts into it via ``to_color()``; a `BasicColor` becomes a non-bright
`SimpleColor`.

Example:
    ```python
    from fluent_ansi.color import BasicColor, Color, SimpleColor

    assert Color.RED is BasicColor.RED
    assert Color.RED.to_color() == Color(SimpleColor(BasicColor.RED))
    assert Color.indexed(42).to_color().value == Color.indexed(42)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, TypeAlias, Union

from fluent_ansi.color.basic import BasicColor
from fluent_ansi.color.indexed import IndexedColor
from fluent_ansi.color.kind import ColorKind
from fluent_ansi.color.rgb import RGBColor
from fluent_ansi.color.simple import SimpleColor
from fluent_ansi.errors import StyleElementError

if TYPE_CHECKING:
    from fluent_ansi.color_target import ColorTarget
    from fluent_ansi.rendering import CodeWriter

ColorVariant: TypeAlias = Union[SimpleColor, IndexedColor, RGBColor]
ColorLike: TypeAlias = Union[BasicColor, SimpleColor, IndexedColor, RGBColor, "Color"]


@dataclass(frozen=True, eq=False)
class Color(ColorKind):
    """Any supported color.

    Attributes:
        value (ColorVariant): The wrapped variant. Any other color kind passed
            here is normalized to its variant (``Color(BasicColor.RED)`` wraps
            ``SimpleColor(BasicColor.RED)``).
    """

    value: ColorVariant

    BLACK: ClassVar[BasicColor] = BasicColor.BLACK
    RED: ClassVar[BasicColor] = BasicColor.RED
    GREEN: ClassVar[BasicColor] = BasicColor.GREEN
    YELLOW: ClassVar[BasicColor] = BasicColor.YELLOW
    BLUE: ClassVar[BasicColor] = BasicColor.BLUE
    MAGENTA: ClassVar[BasicColor] = BasicColor.MAGENTA
    CYAN: ClassVar[BasicColor] = BasicColor.CYAN
    WHITE: ClassVar[BasicColor] = BasicColor.WHITE

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, (SimpleColor, IndexedColor, RGBColor)):
            return
        if isinstance(value, ColorKind):
            object.__setattr__(self, "value", value.to_color().value)
            return
        raise StyleElementError(f"Expected a color, got {value!r}")

    @staticmethod
    def indexed(index: int) -> IndexedColor:
        """Create a color from the 256-color palette."""
        return IndexedColor(index)

    @staticmethod
    def rgb(r: int, g: int, b: int) -> RGBColor:
        """Create a true color from its red, green and blue components."""
        return RGBColor(r, g, b)

    @staticmethod
    def none() -> None:
        """Return None; reads well in ``style.set_color(target, Color.none())``."""
        return None

    def to_color(self) -> Color:
        """Return this color."""
        return self

    def write_color_codes(self, target: ColorTarget, writer: CodeWriter) -> None:
        """Write the SGR parameters of the wrapped variant for ``target``."""
        self.value.write_color_codes(target, writer)

    def _color_key(self) -> tuple[object, ...]:
        return self.value._color_key()


def as_color(value: ColorLike) -> Color:
    """Convert any color kind into a `Color`.

    Args:
        value (ColorLike): A `BasicColor`, `SimpleColor`, `IndexedColor`,
            `RGBColor` or `Color`.

    Returns:
        Color: The canonical color.

    Raises:
        StyleElementError: If ``value`` is not a color.
    """
    if isinstance(value, ColorKind):
        return value.to_color()
    raise StyleElementError(f"Expected a color, got {value!r}")
