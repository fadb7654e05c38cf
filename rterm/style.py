"""Character styling and colour palettes for terminal output."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0


@dataclass(frozen=True)
class Style:
    """Text attributes set by SGR escape sequences."""

    fg: Color = Color()
    bg: Color = Color()
    fg_set: bool = False
    bg_set: bool = False
    bold: bool = False
    dim: bool = False
    italic: bool = False
    underline: bool = False
    inverse: bool = False
    strikethrough: bool = False


@dataclass(frozen=True)
class StyledChar:
    """A single character together with its style."""

    char: str
    style: Style = Style()


@dataclass
class StyledLine:
    """A line of styled characters."""

    chars: list[StyledChar] = field(default_factory=list)

    def plain_text(self) -> str:
        """Return the line's characters without styling."""
        return "".join(c.char for c in self.chars)


ANSI_PALETTE: tuple[Color, ...] = (
    Color(0, 0, 0, 255),
    Color(170, 0, 0, 255),
    Color(0, 170, 0, 255),
    Color(170, 85, 0, 255),
    Color(0, 0, 170, 255),
    Color(170, 0, 170, 255),
    Color(0, 170, 170, 255),
    Color(170, 170, 170, 255),
    Color(85, 85, 85, 255),
    Color(255, 85, 85, 255),
    Color(85, 255, 85, 255),
    Color(255, 255, 85, 255),
    Color(85, 85, 255, 255),
    Color(255, 85, 255, 255),
    Color(85, 255, 255, 255),
    Color(255, 255, 255, 255),
)


def ansi_color(index: int) -> Color:
    """Return a colour from the 16-colour palette; out of range gives white."""
    if not 0 <= index <= 15:
        return ANSI_PALETTE[7]
    return ANSI_PALETTE[index]


def color256(index: int) -> Color:
    """Return a colour from the xterm 256-colour palette."""
    if index < 16:
        return ansi_color(index)
    if index < 232:
        index -= 16
        b = ((index % 6) * 51) & 0xFF
        g = (((index // 6) % 6) * 51) & 0xFF
        r = ((index // 36) * 51) & 0xFF
        return Color(r, g, b, 255)
    level = (8 + (index - 232) * 10) & 0xFF
    return Color(level, level, level, 255)