import threading

from rterm.session import Session


def test_ids_start_at_one_and_increase():
    session = Session(80)
    first = session.add_block("a", "/")
    second = session.add_block("b", "/")
    assert first.id == 1
    assert second.id == first.id + 1


def test_blocks_keep_order_and_values():
    session = Session(80)
    session.add_block("one", "/x")
    session.add_block("two", "/y")
    blocks = session.blocks()
    assert [b.command for b in blocks] == ["one", "two"]
    assert [b.cwd for b in blocks] == ["/x", "/y"]
    assert len(session) == 2


def test_empty_session():
    session = Session(80)
    assert len(session) == 0
    assert session.blocks() == []


def test_blocks_returns_a_copy():
    session = Session(80)
    session.add_block("one", "/")
    snapshot = session.blocks()
    snapshot.clear()
    assert len(session) == 1
    assert len(session.blocks()) == 1


def test_blocks_use_session_width():
    session = Session(2)
    block = session.add_block("x", "/")
    block.append_output(b"abcd")
    assert [line.plain_text() for line in block.output_lines()[:2]] == ["ab", "cd"]


def test_concurrent_adds_give_unique_ids():
    session = Session(80)

    def worker():
        for _ in range(50):
            session.add_block("cmd", "/")

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    ids = [b.id for b in session.blocks()]
    assert len(ids) == 200
    assert sorted(ids) == list(range(1, 201))