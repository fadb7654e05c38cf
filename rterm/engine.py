"""Runs commands in a pseudo-terminal and records them as blocks."""

from __future__ import annotations

import contextlib
import fcntl
import os
import pty
import struct
import subprocess
import termios
import threading
from collections.abc import Callable
from pathlib import Path

from rterm.block import Block
from rterm.session import Session

_READ_SIZE = 4096
_ROWS, _COLS = 24, 80


class Engine:
    """Executes commands, handling ``cd`` itself and the rest through ``sh``."""

    def __init__(self, session: Session, invalidate: Callable[[], None] | None) -> None:
        self.session = session
        try:
            self.cwd = os.getcwd()
        except OSError:
            self.cwd = "/"
        self._invalidate_callback = invalidate

    def _invalidate(self) -> None:
        """Ask the display to redraw, if a callback was given."""
        if self._invalidate_callback is not None:
            self._invalidate_callback()

    def execute(self, command: str) -> Block:
        """Start ``command`` and return the block that tracks it.

        ``cd`` completes before this returns; other commands run in a
        background thread.
        """
        trimmed = command.strip()
        if trimmed == "cd" or trimmed.startswith("cd "):
            return self._change_directory(command, trimmed)
        block = self.session.add_block(command, self.cwd)
        worker = threading.Thread(
            target=self._run, args=(block, trimmed, self.cwd), daemon=True
        )
        worker.start()
        return block

    def _fail(self, block: Block, message: str, code: int) -> Block:
        block.append_output(message.encode("utf-8"))
        block.finish(code)
        self._invalidate()
        return block

    def _change_directory(self, raw: str, trimmed: str) -> Block:
        block = self.session.add_block(raw, self.cwd)
        target = trimmed[2:].strip()
        if target in ("", "~"):
            try:
                target = str(Path.home())
            except RuntimeError as err:
                return self._fail(block, f"cd: {err}\n", 1)
        elif target.startswith("~/"):
            try:
                home = str(Path.home())
            except RuntimeError:
                home = ""
            target = os.path.join(home, target[2:])

        if not os.path.isabs(target):
            target = os.path.join(self.cwd, target)
        target = os.path.normpath(target)

        try:
            is_dir = Path(target).stat() is not None and Path(target).is_dir()
        except OSError as err:
            return self._fail(block, f"cd: {err}\n", 1)
        if not is_dir:
            return self._fail(block, f"cd: {target}: Not a directory\n", 1)

        self.cwd = target
        block.finish(0)
        self._invalidate()
        return block

    def _run(self, block: Block, command: str, cwd: str) -> None:
        env = dict(os.environ, TERM="xterm-256color", COLORTERM="truecolor")
        master, slave = pty.openpty()
        with contextlib.suppress(OSError):
            fcntl.ioctl(
                master, termios.TIOCSWINSZ, struct.pack("HHHH", _ROWS, _COLS, 0, 0)
            )
        try:
            proc = subprocess.Popen(
                ["sh", "-c", command],
                cwd=cwd,
                env=env,
                stdin=slave,
                stdout=slave,
                stderr=slave,
                start_new_session=True,
                close_fds=True,
            )
        except OSError as err:
            os.close(slave)
            os.close(master)
            self._fail(block, f"error: {err}\n", 127)
            return
        os.close(slave)

        try:
            while True:
                try:
                    chunk = os.read(master, _READ_SIZE)
                except OSError:
                    break
                if not chunk:
                    break
                block.append_output(chunk)
                self._invalidate()
        finally:
            os.close(master)

        code = proc.wait()
        block.finish(code if code >= 0 else -1)
        self._invalidate()