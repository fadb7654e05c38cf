"""The command input line with history recall."""

from __future__ import annotations

from rterm.history import History


class CommandInput:
    """Single-line command input with a caret and command history."""

    def __init__(self) -> None:
        self.text = ""
        self.caret = 0
        self.history = History()

    def set_text(self, text: str) -> None:
        """Replace the input and move the caret to its end."""
        self.text = text
        self.caret = len(text)

    def append_text(self, text: str) -> None:
        """Append ``text``, separated by a space from existing content."""
        current = self.text
        if current and not current.endswith(" "):
            current += " "
        self.set_text(current + text)

    def history_up(self) -> str | None:
        """Recall the previous command into the input; None at the top."""
        cmd = self.history.previous(self.text)
        if cmd is not None:
            self.set_text(cmd)
        return cmd

    def history_down(self) -> str | None:
        """Recall the next command, or the saved text at the bottom."""
        cmd = self.history.next()
        if cmd is not None:
            self.set_text(cmd)
        return cmd

    def submit(self) -> str:
        """Return the current text and clear the input."""
        cmd = self.text
        self.set_text("")
        return cmd

    def add_history(self, cmd: str) -> None:
        """Record a command in the history."""
        self.history.add(cmd)