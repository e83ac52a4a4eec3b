"""Ground-state tables: the parser's action for each byte outside a sequence.

There is one table per input encoding family. The C0 control area is the
same in every table; the tables differ in DEL and in the upper half, where
multi-byte lead bytes, C1 controls or graphic characters live.
"""

from __future__ import annotations

from enum import Enum
from functools import cache

from vtterm.parse_cases import ParseCase


class GroundTableKind(Enum):
    """The encoding family a ground table serves."""

    UTF8 = "utf8"
    ISO8859 = "iso8859"
    WINCP = "wincp"
    SJIS = "sjis"


_C0_ACTIONS = {
    0x07: ParseCase.BELL,
    0x08: ParseCase.BS,
    0x09: ParseCase.TAB,
    0x0A: ParseCase.LF,
    0x0B: ParseCase.LF,
    0x0C: ParseCase.LF,
    0x0D: ParseCase.CR,
    0x0E: ParseCase.LS1,
    0x0F: ParseCase.LS0,
    0x1B: ParseCase.ESC,
}

_ISO8859_C1_ACTIONS = {
    0x8E: ParseCase.SS2,
    0x8F: ParseCase.SS3,
    0x9B: ParseCase.CSI_STATE,
}


def _low_half(delete_action: ParseCase) -> list[ParseCase]:
    controls = [_C0_ACTIONS.get(byte, ParseCase.IGNORE) for byte in range(0x20)]
    printable = [ParseCase.PRINT] * (0x7F - 0x20)
    return controls + printable + [delete_action]


def _high_half(kind: GroundTableKind) -> list[ParseCase]:
    def action(byte: int) -> ParseCase:
        if kind is GroundTableKind.UTF8:
            if byte < 0xC0:
                return ParseCase.UTF8_INSTRING
            if byte < 0xE0:
                return ParseCase.UTF8_2BYTE
            return ParseCase.UTF8_3BYTE
        if kind is GroundTableKind.ISO8859:
            if byte < 0xA0:
                return _ISO8859_C1_ACTIONS.get(byte, ParseCase.IGNORE)
            return ParseCase.PRINT_GR
        if kind is GroundTableKind.WINCP:
            return ParseCase.PRINT_GR
        if 0xA0 <= byte < 0xE0:
            return ParseCase.SJIS_KANA
        return ParseCase.SJIS_INSTRING

    return [action(byte) for byte in range(0x80, 0x100)]


@cache
def _build(kind: GroundTableKind) -> tuple[ParseCase, ...]:
    delete_action = ParseCase.IGNORE if kind is GroundTableKind.UTF8 else ParseCase.PRINT
    return tuple(_low_half(delete_action) + _high_half(kind))


def ground_table(kind: GroundTableKind | str) -> tuple[ParseCase, ...]:
    """The 256-entry action table for the given encoding family."""
    return _build(GroundTableKind(kind))


def ground_action(kind: GroundTableKind | str, byte: int) -> ParseCase:
    """The action the ground state takes for ``byte``."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte value: {byte}")
    return ground_table(kind)[byte]