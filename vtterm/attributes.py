"""Character attributes, screen cells and lines of the terminal buffer."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import NamedTuple, Sequence

from vtterm.utf8char import UTF8Char

A_WIDTH = 0x8000
BOLD = 0x4000
UNDERLINE = 0x2000
INVERSE = 0x1000
MOUSE = 0x0800
FORESET = 0x0400
BACKSET = 0x0200
FONT = 0x0100
RESERVE = 0x0080
DUMPCR = 0x0040
UNDERSET = 0x0020
FORECOLOR = 0xFF0000
BACKCOLOR = 0xFF000000
CHAR_ATTRIBUTES = 0xFFFF7720

DIRECT_COLOR = 0x80000000
_MASK32 = 0xFFFFFFFF

# Packed size of one attributes run: five 32-bit attribute fields and two
# 16-bit counters.
ATTRIBUTES_RUN_SIZE = 24


def forecolored(index: int) -> int:
    """The state bits that select indexed foreground colour ``index``."""
    return (index << 16) & _MASK32


def backcolored(index: int) -> int:
    """The state bits that select indexed background colour ``index``."""
    return (index << 24) & _MASK32


class RGBColor(NamedTuple):
    """An opaque-by-default RGBA colour."""

    red: int
    green: int
    blue: int
    alpha: int = 255


def _pack_direct(red: int, green: int, blue: int) -> int:
    for component in (red, green, blue):
        if not 0 <= component <= 0xFF:
            raise ValueError(f"colour component out of range: {component}")
    return DIRECT_COLOR | (red << 16) | (green << 8) | blue


def _unpack_direct(value: int) -> RGBColor:
    return RGBColor((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


@dataclass
class Attributes:
    """Rendering attributes of a character: flag bits and colours."""

    state: int = 0
    foreground: int = 0
    background: int = 0
    underline: int = 0
    underline_style: int = 0

    def reset(self) -> None:
        """Clear every attribute."""
        self.state = 0
        self.foreground = 0
        self.background = 0
        self.underline = 0
        self.underline_style = 0

    def _has(self, flag: int) -> bool:
        return (self.state & flag) == flag

    def is_width(self) -> bool:
        return self._has(A_WIDTH)

    def is_bold(self) -> bool:
        return self._has(BOLD)

    def is_under(self) -> bool:
        return self._has(UNDERLINE)

    def is_inverse(self) -> bool:
        return self._has(INVERSE)

    def is_mouse(self) -> bool:
        return self._has(MOUSE)

    def is_fore_set(self) -> bool:
        return self._has(FORESET)

    def is_back_set(self) -> bool:
        return self._has(BACKSET)

    def is_under_set(self) -> bool:
        return self._has(UNDERSET)

    def is_font(self) -> bool:
        return self._has(FONT)

    def is_cr(self) -> bool:
        return self._has(DUMPCR)

    def set_direct_foreground(self, red: int, green: int, blue: int) -> None:
        """Use a true-colour foreground."""
        self.foreground = _pack_direct(red, green, blue)
        self.state = (self.state & ~FORECOLOR & _MASK32) | FORESET

    def set_direct_background(self, red: int, green: int, blue: int) -> None:
        """Use a true-colour background."""
        self.background = _pack_direct(red, green, blue)
        self.state = (self.state & ~BACKCOLOR & _MASK32) | BACKSET

    def set_direct_underline(self, red: int, green: int, blue: int) -> None:
        """Use a true-colour underline."""
        self.underline = _pack_direct(red, green, blue)
        self.state |= UNDERSET

    def set_indexed_foreground(self, index: int) -> None:
        """Use palette entry ``index`` as foreground."""
        self.state = (self.state & ~FORECOLOR & _MASK32) | FORESET | forecolored(index)
        self.foreground = 0

    def set_indexed_background(self, index: int) -> None:
        """Use palette entry ``index`` as background."""
        self.state = (self.state & ~BACKCOLOR & _MASK32) | BACKSET | backcolored(index)
        self.background = 0

    def set_indexed_underline(self, index: int) -> None:
        """Use palette entry ``index`` as underline colour."""
        self.state |= UNDERSET
        self.underline = index & _MASK32

    def set_under(self, style: int) -> None:
        """Turn underlining on with the given style."""
        self.underline_style = style
        self.state |= UNDERLINE

    def unset_foreground(self) -> None:
        self.state &= ~FORESET & _MASK32
        self.foreground = 0

    def unset_background(self) -> None:
        self.state &= ~BACKSET & _MASK32
        self.background = 0

    def unset_underline(self) -> None:
        self.state &= ~UNDERSET & _MASK32
        self.underline = 0

    def unset_under(self) -> None:
        self.underline_style = 0
        self.state &= ~UNDERLINE & _MASK32

    def foreground_color(self, indexed_colors: Sequence[RGBColor]) -> RGBColor:
        """The foreground colour, resolving palette indices."""
        if self.foreground & DIRECT_COLOR:
            return _unpack_direct(self.foreground)
        return indexed_colors[(self.state & FORECOLOR) >> 16]

    def background_color(self, indexed_colors: Sequence[RGBColor]) -> RGBColor:
        """The background colour, resolving palette indices."""
        if self.background & DIRECT_COLOR:
            return _unpack_direct(self.background)
        return indexed_colors[(self.state & BACKCOLOR) >> 24]

    def underline_color(self, indexed_colors: Sequence[RGBColor]) -> RGBColor:
        """The underline colour, resolving palette indices."""
        if self.underline & DIRECT_COLOR:
            return _unpack_direct(self.underline)
        return indexed_colors[self.underline]

    def __iand__(self, value: int) -> Attributes:
        self.state &= value & _MASK32
        return self

    def __ior__(self, value: int) -> Attributes:
        self.state = (self.state | value) & _MASK32
        return self

    def __and__(self, value: int) -> int:
        return self.state & value & _MASK32

    def __or__(self, value: int) -> int:
        return (self.state | value) & _MASK32


@dataclass
class TerminalCell:
    """One screen cell: a character and its attributes."""

    character: UTF8Char = field(default_factory=UTF8Char)
    attributes: Attributes = field(default_factory=Attributes)

    def differs_from(self, attributes: Attributes) -> bool:
        """Whether ``attributes`` would render this cell differently."""
        return (
            (self.attributes.state & CHAR_ATTRIBUTES) != (attributes.state & CHAR_ATTRIBUTES)
            or self.attributes.foreground != attributes.foreground
            or self.attributes.background != attributes.background
        )


@dataclass
class TerminalLine:
    """A line of the visible screen."""

    cells: list[TerminalCell] = field(default_factory=list)
    length: int = 0
    soft_break: bool = False
    attributes: Attributes = field(default_factory=Attributes)

    def clear(self, attributes: Attributes | None = None, count: int = 0) -> None:
        """Empty the line and give the first ``count`` cells ``attributes``."""
        attributes = attributes if attributes is not None else Attributes()
        self.length = 0
        self.attributes = replace(attributes)
        self.soft_break = False
        for cell in self.cells[:count]:
            cell.attributes = replace(attributes)


@dataclass
class AttributesRun:
    """A stretch of characters in a history line sharing attributes."""

    attributes: Attributes = field(default_factory=Attributes)
    offset: int = 0
    length: int = 0

    def __post_init__(self) -> None:
        for name in ("offset", "length"):
            if not 0 <= getattr(self, name) <= 0xFFFF:
                raise ValueError(f"{name} out of range")


@dataclass
class HistoryLine:
    """A line that has scrolled into history, stored compactly."""

    attributes_runs: list[AttributesRun] = field(default_factory=list)
    chars: bytes = b""
    soft_break: bool = False
    attributes: Attributes = field(default_factory=Attributes)

    def __post_init__(self) -> None:
        if len(self.attributes_runs) > 0xFFFF:
            raise ValueError("too many attribute runs")
        if len(self.chars) > 0x7FFF:
            raise ValueError("line too long")

    @property
    def byte_length(self) -> int:
        return len(self.chars)

    def buffer_size(self) -> int:
        """Bytes the packed runs and characters take up."""
        return len(self.attributes_runs) * ATTRIBUTES_RUN_SIZE + self.byte_length