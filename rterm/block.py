"""A single command execution together with its captured output."""

from __future__ import annotations

import threading
from datetime import datetime

from rterm.screen import Screen
from rterm.style import StyledLine


class Block:
    """One command, its working directory, exit status and output screen.

    ``exit_code`` is -1 while the command is still running.
    """

    def __init__(self, id: int, command: str, cwd: str, cols: int) -> None:
        self.id = id
        self.command = command
        self.cwd = cwd
        self.start_time = datetime.now()
        self.end_time: datetime | None = None
        self.exit_code = -1
        self._lock = threading.Lock()
        self._screen = Screen(cols)
        self._done = False

    def append_output(self, data: bytes) -> None:
        """Feed raw terminal output bytes into this block."""
        with self._lock:
            self._screen.process(data)

    def finish(self, exit_code: int) -> None:
        """Mark the block as complete with the given exit code."""
        with self._lock:
            self.exit_code = exit_code
            self.end_time = datetime.now()
            self._done = True

    def done(self) -> bool:
        """Report whether the command has finished."""
        with self._lock:
            return self._done

    def output_lines(self) -> list[StyledLine]:
        """Return a snapshot of the current output lines."""
        with self._lock:
            return self._screen.snapshot()

    def plain_output(self) -> str:
        """Return the output as plain text, lines joined by newlines."""
        with self._lock:
            lines = self._screen.snapshot()
        return "\n".join(line.plain_text() for line in lines)