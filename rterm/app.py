"""The top-level application: input, search, block list and command engine."""

from __future__ import annotations

import argparse
import sys
import threading
from collections.abc import Callable
from enum import Enum

from rterm.block import Block
from rterm.block_list import BlockList
from rterm.editor import CommandInput
from rterm.engine import Engine
from rterm.render import (
    BlockAction,
    BlockResult,
    shorten_path,
    status_label,
    trim_trailing_empty,
)
from rterm.search import SearchBar
from rterm.session import Session
from rterm.theme import Theme

_COLS = 80
_POLL_SECONDS = 0.1


class Focus(Enum):
    """Which input currently receives keyboard input."""

    EDITOR = "editor"
    SEARCH = "search"


class App:
    """Ties the session, engine and interface state together."""

    def __init__(self, invalidate: Callable[[], None] | None = None) -> None:
        self.theme = Theme()
        self.session = Session(_COLS)
        self.editor = CommandInput()
        self.block_list = BlockList()
        self.search = SearchBar()
        self.engine = Engine(self.session, invalidate)
        self.focus = Focus.EDITOR
        self.clipboard = ""

    def handle_shortcut(self, name: str, ctrl: bool, shift: bool) -> bool:
        """Handle a global key press; return whether it was consumed.

        Ctrl+F toggles the search bar, Ctrl+Shift+C collapses and
        Ctrl+Shift+E expands every block, Escape closes an open search.
        """
        if name == "F" and ctrl and not shift:
            self.search.toggle()
            self.focus = Focus.SEARCH if self.search.visible else Focus.EDITOR
            return True
        if name == "C" and ctrl and shift:
            self.block_list.collapse_all()
            return True
        if name == "E" and ctrl and shift:
            self.block_list.expand_all()
            return True
        if name == "Escape" and self.search.visible and self.focus is Focus.SEARCH:
            self.search.hide()
            self.focus = Focus.EDITOR
            return True
        return False

    def submit(self) -> Block | None:
        """Run the text in the command input; None when it was empty."""
        cmd = self.editor.submit()
        if not cmd:
            return None
        self.editor.add_history(cmd)
        return self.engine.execute(cmd)

    def apply_actions(self) -> list[BlockResult]:
        """Carry out the actions queued on blocks and return them."""
        actions = self.block_list.take_actions()
        for result in actions:
            if result.action is BlockAction.COPY:
                self.clipboard = result.command
            elif result.action is BlockAction.APPEND:
                self.editor.append_text(result.command)
        return actions

    def search_term(self) -> str:
        """Refresh the match count and highlight term; return the active term."""
        self.search.update(self.session)
        term = self.search.term()
        self.block_list.set_search_term(term)
        return term


def _wait(block: Block, changed: threading.Event) -> None:
    while not block.done():
        changed.wait(_POLL_SECONDS)
        changed.clear()


def _render(app: App, block: Block) -> str:
    status, _ = status_label(app.theme, block.done(), block.exit_code)
    header = f"{shorten_path(block.cwd)} > {block.command} [{status.strip()}]"
    body = [line.plain_text() for line in trim_trailing_empty(block.output_lines())]
    return "\n".join([header, *body])


def main(argv: list[str] | None = None) -> int:
    """Read commands line by line, run each one and print its block."""
    parser = argparse.ArgumentParser(
        prog="rterm", description="Run shell commands as output blocks."
    )
    parser.parse_args(argv)

    changed = threading.Event()
    app = App(invalidate=changed.set)
    while True:
        try:
            line = input(f"{shorten_path(app.engine.cwd)} > ")
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        app.editor.set_text(line)
        block = app.submit()
        if block is None:
            continue
        try:
            _wait(block, changed)
        except KeyboardInterrupt:
            print()
            continue
        print(_render(app, block))
        sys.stdout.flush()


if __name__ == "__main__":
    raise SystemExit(main())