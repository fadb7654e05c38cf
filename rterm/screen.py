"""A small VT escape-sequence interpreter that builds styled lines."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum, auto

from rterm.style import (
    ANSI_PALETTE,
    Style,
    StyledChar,
    StyledLine,
    ansi_color,
    color256,
)


class _State(Enum):
    GROUND = auto()
    ESCAPE = auto()
    CSI_PARAM = auto()
    OSC_STRING = auto()


def _decode_rune(data: bytes, i: int) -> tuple[str, int] | None:
    """Decode one UTF-8 character at ``i``; None when the bytes are invalid."""
    lead = data[i]
    if lead < 0x80:
        return chr(lead), 1
    if 0xC2 <= lead <= 0xDF:
        size = 2
    elif 0xE0 <= lead <= 0xEF:
        size = 3
    elif 0xF0 <= lead <= 0xF4:
        size = 4
    else:
        return None
    if i + size > len(data):
        return None
    try:
        return data[i : i + size].decode("utf-8"), size
    except UnicodeDecodeError:
        return None


class Screen:
    """Terminal output state for one command: lines, cursor and style."""

    def __init__(self, width: int) -> None:
        self.width = width
        self.lines: list[StyledLine] = [StyledLine()]
        self._row = 0
        self._col = 0
        self._style = Style()
        self._state = _State.GROUND
        self._params: list[int] = []
        self._cur_param = 0
        self._has_param = False
        self._osc = bytearray()

    def cursor(self) -> tuple[int, int]:
        """Return the cursor position as (row, column)."""
        return self._row, self._col

    def process(self, data: bytes | bytearray | memoryview) -> None:
        """Feed raw terminal output bytes into the interpreter."""
        data = bytes(data)
        i = 0
        while i < len(data):
            b = data[i]
            if self._state is _State.GROUND and b >= 0x20 and b != 0x7F:
                decoded = _decode_rune(data, i)
                if decoded is not None:
                    char, size = decoded
                    self._put_char(char)
                    i += size
                    continue
            self._process_byte(b)
            i += 1

    def snapshot(self) -> list[StyledLine]:
        """Return an independent copy of the current lines."""
        return [StyledLine(list(line.chars)) for line in self.lines]

    def _process_byte(self, b: int) -> None:
        handler = {
            _State.GROUND: self._ground,
            _State.ESCAPE: self._escape,
            _State.CSI_PARAM: self._csi_param,
            _State.OSC_STRING: self._osc_string,
        }[self._state]
        handler(b)

    def _ground(self, b: int) -> None:
        if b == 0x1B:
            self._state = _State.ESCAPE
        elif b == 0x0A:
            self._new_line()
        elif b == 0x0D:
            self._col = 0
        elif b == 0x09:
            nxt = (self._col // 8 + 1) * 8
            if self.width > 0 and nxt > self.width:
                nxt = self.width
            for _ in range(max(0, nxt - self._col)):
                self._put_char(" ")
        elif b == 0x08:
            if self._col > 0:
                self._col -= 1
        elif 0x20 <= b <= 0x7E:
            self._put_char(chr(b))

    def _escape(self, b: int) -> None:
        if b == ord("["):
            self._state = _State.CSI_PARAM
            self._params = []
            self._cur_param = 0
            self._has_param = False
        elif b == ord("]"):
            self._state = _State.OSC_STRING
            self._osc = bytearray()
        else:
            self._state = _State.GROUND

    def _csi_param(self, b: int) -> None:
        if ord("0") <= b <= ord("9"):
            self._cur_param = self._cur_param * 10 + (b - ord("0"))
            self._has_param = True
        elif b == ord(";"):
            self._params.append(self._cur_param)
            self._cur_param = 0
            self._has_param = False
        elif 0x40 <= b <= 0x7E:
            if self._has_param or self._params:
                self._params.append(self._cur_param)
            self._dispatch_csi(chr(b))
            self._state = _State.GROUND
        elif not 0x20 <= b <= 0x2F:
            self._state = _State.GROUND

    def _osc_string(self, b: int) -> None:
        if b in (0x07, 0x1B):
            self._state = _State.GROUND
        else:
            self._osc.append(b)

    def _param(self, index: int, default: int) -> int:
        if index < len(self._params) and self._params[index] > 0:
            return self._params[index]
        return default

    def _dispatch_csi(self, final: str) -> None:
        if final == "m":
            self._sgr()
        elif final == "J":
            self._erase_display()
        elif final == "K":
            self._erase_line()
        elif final == "A":
            self._row = max(0, self._row - self._param(0, 1))
        elif final == "B":
            self._row += self._param(0, 1)
        elif final == "C":
            self._col += self._param(0, 1)
        elif final == "D":
            self._col = max(0, self._col - self._param(0, 1))
        elif final in ("H", "f"):
            self._row = max(0, self._param(0, 1) - 1)
            self._col = max(0, self._param(1, 1) - 1)

    def _sgr(self) -> None:
        if not self._params:
            self._style = Style()
            return
        flags = {
            1: {"bold": True},
            2: {"dim": True},
            3: {"italic": True},
            4: {"underline": True},
            7: {"inverse": True},
            9: {"strikethrough": True},
            22: {"bold": False, "dim": False},
            23: {"italic": False},
            24: {"underline": False},
            27: {"inverse": False},
            29: {"strikethrough": False},
            39: {"fg_set": False},
            49: {"bg_set": False},
        }
        i = 0
        while i < len(self._params):
            p = self._params[i]
            if p == 0:
                self._style = Style()
            elif p in flags:
                self._style = replace(self._style, **flags[p])
            elif 30 <= p <= 37:
                self._style = replace(self._style, fg=ansi_color(p - 30), fg_set=True)
            elif p == 38:
                i = self._extended_color(i, foreground=True)
            elif 40 <= p <= 47:
                self._style = replace(self._style, bg=ansi_color(p - 40), bg_set=True)
            elif p == 48:
                i = self._extended_color(i, foreground=False)
            elif 90 <= p <= 97:
                self._style = replace(self._style, fg=ansi_color(p - 90 + 8), fg_set=True)
            elif 100 <= p <= 107:
                self._style = replace(self._style, bg=ansi_color(p - 100 + 8), bg_set=True)
            i += 1

    def _set_color(self, color, foreground: bool) -> None:
        if foreground:
            self._style = replace(self._style, fg=color, fg_set=True)
        else:
            self._style = replace(self._style, bg=color, bg_set=True)

    def _extended_color(self, i: int, foreground: bool) -> int:
        params = self._params
        if i + 1 >= len(params):
            return i
        mode = params[i + 1]
        if mode == 5 and i + 2 < len(params):
            self._set_color(color256(params[i + 2]), foreground)
            return i + 2
        if mode == 2 and i + 4 < len(params):
            r, g, b = (v & 0xFF for v in params[i + 2 : i + 5])
            self._set_color(replace(ANSI_PALETTE[0], r=r, g=g, b=b), foreground)
            return i + 4
        return i + 1

    def _erase_display(self) -> None:
        mode = self._param(0, 0)
        if mode == 0:
            self._clear_line_from(self._row, self._col)
            for i in range(self._row + 1, len(self.lines)):
                self.lines[i] = StyledLine()
        elif mode == 1:
            for i in range(min(self._row, len(self.lines))):
                self.lines[i] = StyledLine()
            self._clear_line_to(self._row, self._col)
        elif mode == 2:
            self.lines = [StyledLine()]
            self._row = 0
            self._col = 0

    def _erase_line(self) -> None:
        mode = self._param(0, 0)
        if mode == 0:
            self._clear_line_from(self._row, self._col)
        elif mode == 1:
            self._clear_line_to(self._row, self._col)
        elif mode == 2 and self._row < len(self.lines):
            self.lines[self._row] = StyledLine()

    def _clear_line_from(self, row: int, col: int) -> None:
        if row >= len(self.lines):
            return
        line = self.lines[row]
        if col < len(line.chars):
            del line.chars[col:]

    def _clear_line_to(self, row: int, col: int) -> None:
        if row >= len(self.lines):
            return
        line = self.lines[row]
        for i in range(min(col, len(line.chars))):
            line.chars[i] = StyledChar(" ")

    def _ensure_line(self, row: int) -> None:
        while len(self.lines) <= row:
            self.lines.append(StyledLine())

    def _put_char(self, char: str) -> None:
        self._ensure_line(self._row)
        chars = self.lines[self._row].chars
        if len(chars) <= self._col:
            chars.extend(StyledChar(" ") for _ in range(self._col + 1 - len(chars)))
        chars[self._col] = StyledChar(char, self._style)
        self._col += 1
        if self.width > 0 and self._col >= self.width:
            self._col = 0
            self._row += 1
            self._ensure_line(self._row)

    def _new_line(self) -> None:
        self._row += 1
        self._col = 0
        self._ensure_line(self._row)