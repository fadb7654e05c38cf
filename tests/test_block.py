from rterm.block import Block


def test_new_block_is_running():
    block = Block(7, "ls -l", "/tmp", 80)
    assert block.id == 7
    assert block.command == "ls -l"
    assert block.cwd == "/tmp"
    assert block.exit_code == -1
    assert block.done() is False
    assert block.end_time is None


def test_finish_sets_exit_code_and_time():
    block = Block(1, "false", "/", 80)
    block.finish(1)
    assert block.done() is True
    assert block.exit_code == 1
    assert block.end_time is not None
    assert block.end_time >= block.start_time


def test_plain_output_joins_lines():
    block = Block(1, "echo", "/", 80)
    block.append_output(b"line1\r\nline2")
    assert block.plain_output() == "line1\nline2"


def test_output_accumulates_across_calls():
    block = Block(1, "echo", "/", 80)
    block.append_output(b"hel")
    block.append_output(b"lo")
    assert block.output_lines()[0].plain_text() == "hello"


def test_output_lines_is_a_snapshot():
    block = Block(1, "echo", "/", 80)
    block.append_output(b"first")
    snap = block.output_lines()
    block.append_output(b"\nsecond")
    assert len(snap) == 1
    assert snap[0].plain_text() == "first"
    assert len(block.output_lines()) == 2


def test_columns_limit_line_width():
    block = Block(1, "echo", "/", 3)
    block.append_output(b"abcdef")
    lines = block.output_lines()
    assert lines[0].plain_text() == "abc"
    assert lines[1].plain_text() == "def"


def test_escape_sequences_do_not_appear_in_plain_output():
    block = Block(1, "ls", "/", 80)
    block.append_output(b"\x1b[31mred\x1b[0m")
    assert block.plain_output() == "red"