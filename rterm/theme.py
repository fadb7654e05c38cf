"""Colours and font settings for the default dark terminal theme."""

from __future__ import annotations

from dataclasses import dataclass

from rterm.style import Color


@dataclass(frozen=True)
class Theme:
    """Terminal colours, button colours and text sizing."""

    bg: Color = Color(30, 30, 30, 255)
    fg: Color = Color(204, 204, 204, 255)
    header_bg: Color = Color(42, 42, 42, 255)
    editor_bg: Color = Color(38, 38, 38, 255)
    divider_color: Color = Color(60, 60, 60, 255)
    success_color: Color = Color(85, 255, 85, 255)
    error_color: Color = Color(255, 85, 85, 255)
    running_color: Color = Color(255, 255, 85, 255)
    prompt_color: Color = Color(85, 255, 255, 255)

    button_color: Color = Color(130, 130, 130, 255)
    button_hover: Color = Color(200, 200, 200, 255)
    search_bg: Color = Color(50, 50, 50, 255)
    search_match_bg: Color = Color(100, 80, 0, 255)
    collapse_color: Color = Color(130, 130, 130, 255)
    separator_color: Color = Color(150, 150, 150, 255)
    hint_color: Color = Color(100, 100, 100, 255)

    font_size: float = 14.0
    mono: str = "Go Mono"

    def hex(self, color: Color) -> str:
        """Return ``color`` as ``#rrggbb``, or ``#rrggbbaa`` when not opaque."""
        text = f"#{color.r:02x}{color.g:02x}{color.b:02x}"
        if color.a != 255:
            text += f"{color.a:02x}"
        return text