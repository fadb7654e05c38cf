from rterm.render import (
    BlockAction,
    BlockResult,
    Span,
    highlight_mask,
    line_spans,
    shorten_path,
    span_color,
    status_label,
    trim_trailing_empty,
)
from rterm.screen import Screen
from rterm.style import Color, Style, StyledChar, StyledLine, ansi_color
from rterm.theme import Theme


def _line(raw: bytes) -> StyledLine:
    screen = Screen(80)
    screen.process(raw)
    return screen.snapshot()[0]


def test_highlight_mask_empty_term_is_all_false():
    line = _line(b"hello")
    assert highlight_mask(line, "") == [False] * 5


def test_highlight_mask_is_case_insensitive():
    line = _line(b"hello world")
    mask = highlight_mask(line, "O")
    assert [i for i, hit in enumerate(mask) if hit] == [4, 7]


def test_highlight_mask_covers_whole_match():
    line = _line(b"abcabc")
    mask = highlight_mask(line, "bc")
    assert mask == [False, True, True, False, True, True]


def test_highlight_mask_matches_are_not_overlapping():
    line = _line(b"aaa")
    mask = highlight_mask(line, "aa")
    assert mask == [True, True, False]


def test_line_spans_empty_line():
    assert line_spans(StyledLine(), "x") == []


def test_line_spans_split_on_style():
    line = _line(b"\x1b[31mred\x1b[0mnormal")
    spans = line_spans(line)
    assert [s.text for s in spans] == ["red", "normal"]
    assert spans[0].style.fg == ansi_color(1)
    assert spans[1].style == Style()


def test_line_spans_split_on_highlight_and_join_back():
    line = _line(b"one two one")
    spans = line_spans(line, "two")
    assert "".join(s.text for s in spans) == line.plain_text()
    assert [s.highlight for s in spans] == [False, True, False]
    assert spans[1].text == "two"


def test_single_span_for_uniform_line():
    line = _line(b"plain")
    assert line_spans(line) == [Span("plain", Style(), False)]


def test_trim_trailing_empty():
    screen = Screen(80)
    screen.process(b"a\nb\n\n")
    lines = screen.snapshot()
    trimmed = trim_trailing_empty(lines)
    assert [l.plain_text() for l in trimmed] == ["a", "b"]


def test_trim_trailing_empty_all_empty():
    assert trim_trailing_empty([StyledLine(), StyledLine()]) == []


def test_span_color_default_uses_theme_fg():
    theme = Theme()
    assert span_color(theme, Style()) == theme.fg


def test_span_color_explicit_fg_and_dim():
    theme = Theme()
    red = ansi_color(1)
    assert span_color(theme, Style(fg=red, fg_set=True)) == red
    dimmed = span_color(theme, Style(fg=red, fg_set=True, dim=True))
    assert dimmed.a == 128
    assert (dimmed.r, dimmed.g, dimmed.b) == (red.r, red.g, red.b)


def test_span_color_inverse():
    theme = Theme()
    assert span_color(theme, Style(inverse=True)) == theme.bg
    blue = ansi_color(4)
    assert span_color(theme, Style(inverse=True, bg=blue, bg_set=True)) == blue


def test_status_label():
    theme = Theme()
    assert status_label(theme, False, -1) == (" ...", theme.running_color)
    assert status_label(theme, True, 0) == (" ok", theme.success_color)
    assert status_label(theme, True, 2) == (" E2", theme.error_color)


def test_shorten_path_empty():
    assert shorten_path("", "/home/user") == "~"


def test_shorten_path_replaces_home():
    assert shorten_path("/home/user/src", "/home/user") == "~/src"


def test_shorten_path_elides_deep_paths():
    assert shorten_path("/home/user/a/b/c/d", "/home/user") == "~/a/.../c/d"
    assert shorten_path("/opt/x/y/z/w", "/home/user") == "/opt/.../z/w"


def test_shorten_path_short_path_unchanged():
    assert shorten_path("/usr/local/bin", "/home/user") == "/usr/local/bin"


def test_block_result_defaults():
    result = BlockResult()
    assert result.action is BlockAction.NONE
    assert result.command == ""
    copy = BlockResult(BlockAction.COPY, "ls")
    assert copy.action is BlockAction.COPY and copy.command == "ls"


def test_span_holds_styled_char_style():
    ch = StyledChar("x", Style(bold=True))
    spans = line_spans(StyledLine([ch]))
    assert spans == [Span("x", Style(bold=True), False)]
    assert span_color(Theme(), spans[0].style) == Theme().fg
    assert isinstance(span_color(Theme(), spans[0].style), Color)