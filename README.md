# vtterm

Building blocks for a VT100/xterm-style terminal emulator, in pure Python
with no dependencies.

## What is inside

- `vtterm.pos`: `TermPos`, a mutable (x, y) cell position. Positions compare
  row first, then column (reading order); `set_to(x, y)` moves one.
- `vtterm.utf8char`: `UTF8Char`, one character kept as its UTF-8 bytes
  (built from `bytes` or a `str`), with `is_full_width()`, `is_space()`,
  `is_alnum()` and `to_lower()`. The module-level `byte_count()` gives the
  length of a UTF-8 sequence from its lead byte.
- `vtterm.attributes`: `Attributes` (flag bits such as bold, underline and
  inverse, plus indexed or direct 24-bit foreground, background and underline
  colours), `RGBColor`, `TerminalCell`, `TerminalLine`, `AttributesRun` and
  `HistoryLine`, the flag constants (`BOLD`, `UNDERLINE`, `INVERSE`, ...)
  and the helpers `forecolored()` and `backcolored()`.
- `vtterm.parse_cases`: `ParseCase`, the actions a byte can trigger in an
  escape-sequence parser.
- `vtterm.ground_tables`: 256-entry byte-to-action tables for plain text in
  UTF-8, ISO 8859, Windows code pages and Shift-JIS (`GroundTableKind`,
  `ground_table()`, `ground_action()`).
- `vtterm.csi_tables`: tables for the bytes after `ESC [` and `ESC [ ?`
  (`csi_table()`, `dec_table()`, `csi_action()`, `dec_action()`).
- `vtterm.escape_tables`: tables for the bytes after `ESC`, for skipped
  sequences, for `ESC #`, and for ignored strings and the escapes inside
  them (`EscapeTableKind`, `escape_table()`, `escape_action()`).
- `vtterm.charsets`: the DEC Special Graphics line-drawing set
  (`LINE_DRAW_GLYPHS`, `LINE_DRAW_GRAPH_SET`, `line_draw_replacement()`,
  `translate_line_draw()`).
- `vtterm.keymap`: `KeyCase`, key code constants, the escape sequences that
  special keys send (`UP_ARROW_KEY_CODE`, `DELETE_KEY_CODE`, ...) and
  `is_key_down()` for a key-state bitmap.

Functions that take a byte value raise `ValueError` for anything outside
0–255.

## Installing

```
pip install .
```

## Examples

```python
from vtterm.ground_tables import GroundTableKind, ground_action
from vtterm.csi_tables import csi_action
from vtterm.parse_cases import ParseCase

assert ground_action(GroundTableKind.UTF8, 0x1B) == ParseCase.ESC
assert csi_action(ord("m")) == ParseCase.SGR
```

```python
from vtterm.attributes import Attributes

attrs = Attributes()
attrs.set_direct_foreground(255, 128, 0)
attrs.set_under(1)
assert attrs.is_fore_set() and attrs.is_under()
```

```python
from vtterm.charsets import translate_line_draw

print(translate_line_draw("lqqk"))  # ┌──┐
```

## What it does not do

The package supplies data types and lookup tables only. It has no parser
loop that walks input through the tables, no screen buffer or scrollback,
no rendering or window, no pseudo-terminal or shell, and no command to run.

## Running the tests

```
pip install .[test]
pytest
```