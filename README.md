# rterm

rterm runs shell commands as *blocks*. Each block keeps the command, the
directory it ran in, its exit status and its output, parsed from the raw
terminal byte stream into styled lines. Blocks can be searched, collapsed
and expanded, and their commands copied or appended to the input line.

It needs a POSIX system (it uses a pseudo-terminal) and Python 3.10 or later.
It has no dependencies outside the standard library.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## The `rterm` command

    rterm

`rterm` shows a prompt made of the current directory (shortened, see below)
followed by ` > `, and reads one command per line. Empty lines are skipped.
For every other line it runs the command, waits for it to finish and prints
the block:

    ~/projects > ls [ok]
    README.md
    rterm

The header holds the directory, the command and a status: `ok` for exit
code 0, `E<code>` otherwise (for example `[E1]`). The output follows as plain
text, with trailing empty lines removed.

- `cd` is handled by rterm itself, so the new directory carries over to the
  commands that follow. `cd` alone or `cd ~` goes to your home directory,
  `~/` at the start of a path is expanded, relative paths are taken from the
  current directory. A missing path or one that is not a directory gives a
  `cd: ...` message and status `E1`.
- Every other command runs through `sh -c` in a pseudo-terminal of 24 rows
  by 80 columns, in the current directory, with `TERM=xterm-256color` and
  `COLORTERM=truecolor` added to the environment. If the shell cannot be
  started the block shows `error: ...` and status `E127`. A command ended by
  a signal gets exit code -1.
- Ctrl+C while a command runs stops waiting for it and returns to the prompt;
  the command itself keeps running in the background.
- Ctrl+D or Ctrl+C at the prompt ends rterm.

### What the command does not do

The `rterm` command is a line-by-line console. It has no window: output is
printed as plain text without colours, and there is no on-screen search bar,
collapsing of blocks, `[cp]`/`[>>]` buttons or Up/Down history recall at the
prompt. Those behaviours exist as state in the library (`rterm.app.App` and
the modules below), for a front end to drive; none is included.

## Using it as a library

### Parsing terminal output

    from rterm.screen import Screen

    screen = Screen(80)
    screen.process(b"\x1b[31mred\x1b[0m plain\r\nnext line")
    for line in screen.snapshot():
        print(line.plain_text())
    print(screen.cursor())   # (row, column)

`Screen.process` accepts UTF-8 bytes and understands:

- SGR: reset, bold, dim, italic, underline, inverse, strikethrough and their
  resets; 16 colours (30–37, 40–47, 90–97, 100–107); 256 colours
  (`38;5;n`, `48;5;n`); truecolour (`38;2;r;g;b`, `48;2;r;g;b`); default
  colours (39, 49).
- Cursor movement (`A`, `B`, `C`, `D`, `H`, `f`), erase in display (`J`) and
  erase in line (`K`).
- Line feed, carriage return, backspace, tabs to every eighth column, and
  wrapping at the given width (a width of 0 disables wrapping).
- OSC strings and other escape sequences are skipped.

`snapshot()` returns independent copies of the lines: lists of
`rterm.style.StyledChar`, each with a `char` and a frozen `Style`.
`rterm.style` also has `Color`, `ansi_color(index)` and `color256(index)`.

### Sessions, blocks and running commands

    import time
    from rterm.session import Session
    from rterm.engine import Engine

    session = Session(80)
    engine = Engine(session, invalidate=None)
    block = engine.execute("echo hello")
    while not block.done():
        time.sleep(0.05)
    print(block.exit_code, block.plain_output())

- `Session(cols)` holds blocks in order; `add_block`, `blocks()` and
  `len(session)`. Block ids count up from 1.
- `Block` has `id`, `command`, `cwd`, `start_time`, `end_time` and
  `exit_code` (-1 until finished), plus `append_output`, `finish`, `done`,
  `output_lines` and `plain_output`. It is safe to read while a command is
  still writing to it.
- `Engine(session, invalidate)` tracks the working directory in `cwd`;
  `execute(command)` returns the block at once. `cd` finishes before it
  returns, other commands run in a background thread. `invalidate`, if
  given, is called whenever a block receives output or finishes.

### Interface state

- `rterm.history.History`: command history with `add`, `previous`, `next`
  and `entries`. Consecutive duplicates and empty commands are not
  recorded; stepping down past the newest entry returns the text that was
  being edited.
- `rterm.editor.CommandInput`: the input line (`text`, `caret`) with
  `set_text`, `append_text` (adds a separating space when needed),
  `history_up`, `history_down`, `submit` and `add_history`.
- `rterm.search.SearchBar` and `count_matches(session, term)`:
  case-insensitive, non-overlapping matches across commands and output;
  `match_label()` gives `no matches`, `1 match` or `N matches`.
- `rterm.block_list.BlockList`: per-block collapsed state (`toggle`,
  `collapse_all`, `expand_all`), the highlight term and queued
  `BlockResult` actions (`record_action`, `take_actions`).
- `rterm.render`: `line_spans` groups a line into `Span`s of equal style and
  search highlight, `highlight_mask`, `trim_trailing_empty`, `span_color`
  (applying dim and inverse against a theme), `status_label` (` ...`,
  ` ok` or ` E<code>` with a colour) and `shorten_path`, which replaces the
  home directory with `~` and shortens paths of more than four components
  to `first/second/.../last-two`.
- `rterm.theme.Theme`: the dark colour scheme, font size and font name;
  `hex(color)` formats a colour as `#rrggbb` (or `#rrggbbaa`).
- `rterm.app.App`: ties these together. `handle_shortcut(name, ctrl, shift)`
  handles Ctrl+F (toggle search), Ctrl+Shift+C (collapse all),
  Ctrl+Shift+E (expand all) and Escape (close search); `submit()` runs the
  input line and records it in history; `apply_actions()` copies a
  command to `app.clipboard` or appends it to the input; `search_term()`
  refreshes the match count and highlight term.