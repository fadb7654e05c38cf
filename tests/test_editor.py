from rterm.editor import CommandInput


def test_set_text_moves_caret_to_end():
    ed = CommandInput()
    ed.set_text("héllo")
    assert ed.text == "héllo"
    assert ed.caret == len("héllo")


def test_append_text_adds_separator():
    ed = CommandInput()
    ed.append_text("ls")
    assert ed.text == "ls"
    ed.append_text("-la")
    assert ed.text == "ls -la"
    assert ed.caret == len(ed.text)


def test_append_text_after_trailing_space():
    ed = CommandInput()
    ed.set_text("git ")
    ed.append_text("status")
    assert ed.text == "git status"


def test_submit_returns_and_clears():
    ed = CommandInput()
    ed.set_text("echo hi")
    assert ed.submit() == "echo hi"
    assert ed.text == ""
    assert ed.caret == 0


def test_history_navigation_restores_draft():
    ed = CommandInput()
    ed.add_history("first")
    ed.add_history("second")
    ed.set_text("draft")
    assert ed.history_up() == "second"
    assert ed.history_up() == "first"
    assert ed.history_up() is None
    assert ed.text == "first"
    assert ed.history_down() == "second"
    assert ed.history_down() == "draft"
    assert ed.text == "draft"
    assert ed.history_down() is None


def test_history_up_with_empty_history_leaves_text():
    ed = CommandInput()
    ed.set_text("keep")
    assert ed.history_up() is None
    assert ed.text == "keep"


def test_add_history_deduplicates_consecutive():
    ed = CommandInput()
    ed.add_history("ls")
    ed.add_history("ls")
    ed.add_history("")
    assert ed.history.entries() == ["ls"]