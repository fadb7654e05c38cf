"""The search bar and case-insensitive match counting across blocks."""

from __future__ import annotations

from rterm.session import Session


def count_matches(session: Session, term: str) -> int:
    """Count non-overlapping case-insensitive matches in commands and output."""
    if not term:
        return 0
    needle = term.lower()
    return sum(
        block.command.lower().count(needle) + block.plain_output().lower().count(needle)
        for block in session.blocks()
    )


class SearchBar:
    """Search input state: visibility, text and the latest match count."""

    def __init__(self) -> None:
        self.visible = False
        self.text = ""
        self.match_count = 0

    def toggle(self) -> None:
        """Show or hide the bar; hiding clears the text and the count."""
        if self.visible:
            self.hide()
        else:
            self.show()

    def show(self) -> None:
        """Make the bar visible, keeping any existing text."""
        self.visible = True

    def hide(self) -> None:
        """Hide the bar and clear the search term."""
        self.visible = False
        self.text = ""
        self.match_count = 0

    def set_text(self, text: str) -> None:
        """Replace the text in the search input."""
        self.text = text

    def term(self) -> str:
        """Return the active search term, empty while hidden."""
        return self.text if self.visible else ""

    def update(self, session: Session) -> int:
        """Recount matches of the current term in ``session`` and return the count."""
        if not self.visible:
            return self.match_count
        self.match_count = count_matches(session, self.term())
        return self.match_count

    def match_label(self) -> str:
        """Return the match-count text shown beside the input."""
        if not self.term():
            return ""
        if self.match_count <= 0:
            return "no matches"
        suffix = "" if self.match_count == 1 else "es"
        return f"{self.match_count} match{suffix}"