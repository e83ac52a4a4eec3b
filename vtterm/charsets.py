"""The DEC Special Graphics character set used for line drawing.

When this set is designated, printable ASCII characters from 0x20 to 0x7F
are shown as box-drawing and symbol glyphs. Positions without a glyph fall
through to the ordinary ASCII character.
"""

from __future__ import annotations

from types import MappingProxyType

_FIRST = 0x20
_LAST = 0x7F

# Glyphs combine xterm's definitions with the extended characters of the
# curses alternate character set.
_LINE_DRAW_GLYPHS = {
    "+": "\u2192",  # right arrow
    ",": "\u2190",  # left arrow
    "-": "\u2191",  # up arrow
    ".": "\u2193",  # down arrow
    "0": "\u25ae",  # solid block
    "_": "\u25ae",  # black vertical rectangle
    "`": "\u25c6",  # diamond
    "a": "\u2592",  # checker board
    "b": "\u2409",  # symbol for horizontal tabulation
    "c": "\u240c",  # symbol for form feed
    "d": "\u240d",  # symbol for carriage return
    "e": "\u240a",  # symbol for line feed
    "f": "\u00b0",  # degree
    "g": "\u00b1",  # plus/minus
    "h": "\u2424",  # symbol for newline
    "i": "\u2603",  # lantern
    "j": "\u2518",  # lower right corner
    "k": "\u2510",  # upper right corner
    "l": "\u250c",  # upper left corner
    "m": "\u2514",  # lower left corner
    "n": "\u253c",  # crossing lines
    "o": "\u23ba",  # scan line 1
    "p": "\u23bb",  # scan line 3
    "q": "\u2500",  # horizontal line
    "r": "\u23bc",  # scan line 7
    "s": "\u23bd",  # scan line 9
    "t": "\u251c",  # left tee
    "u": "\u2524",  # right tee
    "v": "\u2534",  # bottom tee
    "w": "\u252c",  # top tee
    "x": "\u2502",  # vertical line
    "y": "\u2264",  # less than or equal
    "z": "\u2265",  # greater than or equal
    "{": "\u03c0",  # pi
    "|": "\u2260",  # not equal
    "}": "\u00a3",  # pound sterling
    "~": "\u00b7",  # bullet
}

LINE_DRAW_GLYPHS = MappingProxyType(_LINE_DRAW_GLYPHS)

# The 96-entry set indexed from 0x20; None means "use the ASCII character".
LINE_DRAW_GRAPH_SET: tuple[str | None, ...] = tuple(
    _LINE_DRAW_GLYPHS.get(chr(code)) for code in range(_FIRST, _LAST + 1)
)

_TRANSLATION = str.maketrans(_LINE_DRAW_GLYPHS)


def line_draw_replacement(char: str) -> str | None:
    """The glyph shown for ``char`` in the line-drawing set.

    Returns None when the character has no glyph of its own and is shown
    as itself.
    """
    if not isinstance(char, str):
        raise TypeError(f"expected a single character, got {type(char).__name__}")
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    code = ord(char)
    if not _FIRST <= code <= _LAST:
        return None
    return LINE_DRAW_GRAPH_SET[code - _FIRST]


def translate_line_draw(text: str) -> str:
    """Render ``text`` as it appears with the line-drawing set selected."""
    if not isinstance(text, str):
        raise TypeError(f"expected text, got {type(text).__name__}")
    return text.translate(_TRANSLATION)