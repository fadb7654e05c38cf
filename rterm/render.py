"""Presentation logic for blocks: spans, highlights, colours and labels."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

from rterm.style import Color, Style, StyledLine
from rterm.theme import Theme


class BlockAction(Enum):
    """An action the user triggered on a block."""

    NONE = 0
    COPY = 1
    APPEND = 2


@dataclass(frozen=True)
class BlockResult:
    """An action on a block together with the block's command."""

    action: BlockAction = BlockAction.NONE
    command: str = ""


@dataclass(frozen=True)
class Span:
    """A run of characters sharing one style and highlight state."""

    text: str
    style: Style
    highlight: bool = False


def highlight_mask(line: StyledLine, term: str) -> list[bool]:
    """Mark the characters of ``line`` covered by case-insensitive matches of ``term``."""
    mask = [False] * len(line.chars)
    if not term:
        return mask
    haystack = line.plain_text().lower()
    needle = term.lower()
    if not needle:
        return mask
    start = haystack.find(needle)
    while start >= 0:
        end = start + len(needle)
        for j in range(start, min(end, len(mask))):
            mask[j] = True
        start = haystack.find(needle, end)
    return mask


def line_spans(line: StyledLine, term: str = "") -> list[Span]:
    """Group consecutive characters with equal style and highlight into spans."""
    if not line.chars:
        return []
    mask = highlight_mask(line, term)
    return [
        Span("".join(ch.char for ch, _ in group), style, hl)
        for (style, hl), group in itertools.groupby(
            zip(line.chars, mask), key=lambda pair: (pair[0].style, pair[1])
        )
    ]


def trim_trailing_empty(lines: list[StyledLine]) -> list[StyledLine]:
    """Return ``lines`` without the empty lines at its end."""
    end = len(lines)
    while end > 0 and not lines[end - 1].chars:
        end -= 1
    return lines[:end]


def span_color(theme: Theme, style: Style) -> Color:
    """Return the text colour for ``style`` drawn on ``theme``."""
    fg = style.fg if style.fg_set else theme.fg
    if style.dim:
        fg = replace(fg, a=128)
    if style.inverse:
        fg = style.bg if style.bg_set else theme.bg
    return fg


def status_label(theme: Theme, done: bool, exit_code: int) -> tuple[str, Color]:
    """Return the status text and its colour for a block."""
    if not done:
        return " ...", theme.running_color
    if exit_code == 0:
        return " ok", theme.success_color
    return f" E{exit_code}", theme.error_color


def _home_dir() -> str | None:
    try:
        return str(Path.home())
    except RuntimeError:
        return None


def shorten_path(path: str, home: str | None = None) -> str:
    """Abbreviate ``path``: home becomes ``~`` and deep paths are elided.

    When ``home`` is None the current user's home directory is used.
    """
    if not path:
        return "~"
    if home is None:
        home = _home_dir()
    if home and path.startswith(home):
        path = "~" + path[len(home):]
    parts = path.split("/")
    if len(parts) <= 4:
        return path
    return parts[0] + "/" + parts[1] + "/.../" + "/".join(parts[-2:])