"""The ordered list of command blocks in a terminal session."""

from __future__ import annotations

import itertools
import threading

from rterm.block import Block


class Session:
    """Holds every block run in this session, in execution order."""

    def __init__(self, cols: int) -> None:
        self.cols = cols
        self._lock = threading.Lock()
        self._blocks: list[Block] = []
        self._ids = itertools.count(1)

    def add_block(self, command: str, cwd: str) -> Block:
        """Create a block for ``command``, append it and return it."""
        with self._lock:
            block = Block(next(self._ids), command, cwd, self.cols)
            self._blocks.append(block)
        return block

    def blocks(self) -> list[Block]:
        """Return a copy of the list of blocks."""
        with self._lock:
            return list(self._blocks)

    def __len__(self) -> int:
        with self._lock:
            return len(self._blocks)