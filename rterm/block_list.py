"""Per-block view state for the scrolling list of command blocks."""

from __future__ import annotations

from dataclasses import dataclass

from rterm.render import BlockAction, BlockResult


@dataclass
class BlockState:
    """UI state of one block that persists between frames."""

    collapsed: bool = False


class BlockList:
    """Tracks collapse state, the search term and actions raised on blocks."""

    def __init__(self) -> None:
        self.search_term = ""
        self._states: dict[int, BlockState] = {}
        self._pending: list[BlockResult] = []

    def set_search_term(self, term: str) -> None:
        """Set the term that block output is highlighted with."""
        self.search_term = term

    def state_for(self, block_id: int) -> BlockState:
        """Return the state of a block, creating it on first use."""
        return self._states.setdefault(block_id, BlockState())

    def toggle(self, block_id: int) -> bool:
        """Flip a block between collapsed and expanded; return the new state."""
        state = self.state_for(block_id)
        state.collapsed = not state.collapsed
        return state.collapsed

    def collapse_all(self) -> None:
        """Collapse every block that has been shown."""
        for state in self._states.values():
            state.collapsed = True

    def expand_all(self) -> None:
        """Expand every block that has been shown."""
        for state in self._states.values():
            state.collapsed = False

    def record_action(self, action: BlockAction, command: str) -> None:
        """Queue an action raised on a block; ``NONE`` is ignored."""
        if action is not BlockAction.NONE:
            self._pending.append(BlockResult(action, command))

    def take_actions(self) -> list[BlockResult]:
        """Return the queued actions in order and clear the queue."""
        actions, self._pending = self._pending, []
        return actions