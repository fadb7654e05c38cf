"""In-memory command history with up/down navigation."""

from __future__ import annotations


class History:
    """Command history; navigating up saves the text being edited."""

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._pos = 0
        self._saved = ""

    def add(self, cmd: str) -> None:
        """Record a command, skipping empties and consecutive duplicates."""
        if not cmd:
            return
        if not self._entries or self._entries[-1] != cmd:
            self._entries.append(cmd)
        self._pos = len(self._entries)

    def previous(self, current_text: str) -> str | None:
        """Return the previous command, or None at the top.

        ``current_text`` is saved on the first step up so that ``next``
        can restore it.
        """
        if not self._entries or self._pos <= 0:
            return None
        if self._pos == len(self._entries):
            self._saved = current_text
        self._pos -= 1
        return self._entries[self._pos]

    def next(self) -> str | None:
        """Return the next command, the saved text at the bottom, or None."""
        if self._pos >= len(self._entries):
            return None
        self._pos += 1
        if self._pos == len(self._entries):
            return self._saved
        return self._entries[self._pos]

    def entries(self) -> list[str]:
        """Return a copy of all recorded commands."""
        return list(self._entries)