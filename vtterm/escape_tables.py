"""Tables for the bytes that follow ``ESC`` and for the states that skip input.

* ``ESC``: the byte after an escape selects a command or a further state.
* ``ESC_IGNORE``: an unsupported sequence is skipped up to its final byte.
* ``SCR``: the byte after ``ESC #`` (screen alignment and friends).
* ``IGNORE``: a string (DCS, PM, APC) is skipped until it is terminated.
* ``IGNORE_ESC``: an escape met while skipping a string; ``\\`` ends the string.

C1 bytes are ignored in every table and bytes from 0xA0 up return to ground.
"""

from __future__ import annotations

from enum import Enum
from functools import cache

from vtterm.parse_cases import ParseCase


class EscapeTableKind(Enum):
    """The parser state a table serves."""

    ESC = "esc"
    ESC_IGNORE = "esc_ignore"
    SCR = "scr"
    IGNORE = "ignore"
    IGNORE_ESC = "ignore_esc"


_COMMON_C0_ACTIONS = {
    0x07: ParseCase.BELL,
    0x08: ParseCase.BS,
    0x09: ParseCase.TAB,
    0x0D: ParseCase.CR,
    0x0E: ParseCase.LS1,
    0x0F: ParseCase.LS0,
    0x1B: ParseCase.ESC,
}

_VERTICAL_MOTION_BYTES = (0x0A, 0x0B, 0x0C)

_ESC_FINAL_ACTIONS = {
    "7": ParseCase.DECSC,
    "8": ParseCase.DECRC,
    "D": ParseCase.INDEX,
    "E": ParseCase.NEXT_LINE,
    "H": ParseCase.HTS,
    "M": ParseCase.RI,
    "N": ParseCase.SS2,
    "O": ParseCase.SS3,
    "P": ParseCase.IGNORE_STATE,
    "T": ParseCase.XTERM_TITLE,
    "Z": ParseCase.DA1,
    "[": ParseCase.CSI_STATE,
    "]": ParseCase.OSC,
    "^": ParseCase.IGNORE_STATE,
    "_": ParseCase.IGNORE_STATE,
    "c": ParseCase.RIS,
    "n": ParseCase.LS2,
    "o": ParseCase.LS3,
    "|": ParseCase.LS3R,
    "}": ParseCase.LS2R,
    "~": ParseCase.LS1R,
}

_SCR_FINAL_ACTIONS = {
    "8": ParseCase.DECALN,
}

_IGNORE_CONTROL_ACTIONS = {
    0x18: ParseCase.GROUND_STATE,
    0x1A: ParseCase.GROUND_STATE,
    0x1B: ParseCase.IGNORE_ESC,
}


def _controls(line_motion: ParseCase) -> list[ParseCase]:
    actions = {byte: line_motion for byte in _VERTICAL_MOTION_BYTES}
    actions.update(_COMMON_C0_ACTIONS)
    return [actions.get(byte, ParseCase.IGNORE) for byte in range(0x20)]


def _finals(actions: dict[str, ParseCase]) -> list[ParseCase]:
    return [actions.get(chr(byte), ParseCase.GROUND_STATE) for byte in range(0x30, 0x80)]


def _high_half() -> list[ParseCase]:
    return [ParseCase.IGNORE] * 0x20 + [ParseCase.GROUND_STATE] * 0x60


def _esc_intermediates() -> list[ParseCase]:
    actions = {0x23: ParseCase.SCR_STATE}
    actions.update({byte: ParseCase.SCS_STATE for byte in range(0x28, 0x30)})
    return [actions.get(byte, ParseCase.ESC_IGNORE) for byte in range(0x20, 0x30)]


def _low_half(kind: EscapeTableKind) -> list[ParseCase]:
    if kind is EscapeTableKind.ESC:
        return _controls(ParseCase.LF) + _esc_intermediates() + _finals(_ESC_FINAL_ACTIONS)
    if kind is EscapeTableKind.ESC_IGNORE:
        return _controls(ParseCase.VMOT) + [ParseCase.IGNORE] * 0x10 + _finals({})
    if kind is EscapeTableKind.SCR:
        return (
            _controls(ParseCase.VMOT)
            + [ParseCase.ESC_IGNORE] * 0x10
            + _finals(_SCR_FINAL_ACTIONS)
        )
    if kind is EscapeTableKind.IGNORE:
        return [_IGNORE_CONTROL_ACTIONS.get(byte, ParseCase.IGNORE) for byte in range(0x80)]
    # A backslash after ESC is the string terminator.
    return [
        ParseCase.GROUND_STATE if byte == 0x5C else ParseCase.IGNORE_STATE
        for byte in range(0x80)
    ]


@cache
def _build(kind: EscapeTableKind) -> tuple[ParseCase, ...]:
    return tuple(_low_half(kind) + _high_half())


def escape_table(kind: EscapeTableKind | str) -> tuple[ParseCase, ...]:
    """The 256-entry action table for the given parser state."""
    return _build(EscapeTableKind(kind))


def escape_action(kind: EscapeTableKind | str, byte: int) -> ParseCase:
    """The action taken for ``byte`` in the given parser state."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte value: {byte}")
    return escape_table(kind)[byte]