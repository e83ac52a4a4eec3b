"""Tables for the bytes that follow ``ESC [`` (CSI) and ``ESC [ ?`` (DEC private).

Inside a control sequence, digits and separators collect parameters and a
final byte selects the command. C0 controls keep their usual meaning. C1
bytes are ignored, and bytes from 0xA0 up abort the sequence.
"""

from __future__ import annotations

from functools import cache

from vtterm.parse_cases import ParseCase

_SEQUENCE_C0_ACTIONS = {
    0x07: ParseCase.BELL,
    0x08: ParseCase.BS,
    0x09: ParseCase.TAB,
    0x0D: ParseCase.CR,
    0x0E: ParseCase.LS1,
    0x0F: ParseCase.LS0,
    0x1B: ParseCase.ESC,
}

_VERTICAL_MOTION_BYTES = (0x0A, 0x0B, 0x0C)

_CSI_FINAL_ACTIONS = {
    "@": ParseCase.ICH,
    "A": ParseCase.CUU,
    "B": ParseCase.CUD,
    "C": ParseCase.CUF,
    "D": ParseCase.CUB,
    "E": ParseCase.CNL,
    "F": ParseCase.CPL,
    "G": ParseCase.HPA,
    "H": ParseCase.CUP,
    "I": ParseCase.CFT,
    "J": ParseCase.ED,
    "K": ParseCase.EL,
    "L": ParseCase.IL,
    "M": ParseCase.DL,
    "P": ParseCase.DCH,
    "S": ParseCase.SU,
    "T": ParseCase.SD,
    "X": ParseCase.ECH,
    "Z": ParseCase.CBT,
    "b": ParseCase.REP,
    "c": ParseCase.DA1,
    "d": ParseCase.VPA,
    "f": ParseCase.CUP,
    "g": ParseCase.TBC,
    "h": ParseCase.SET,
    "l": ParseCase.RST,
    "m": ParseCase.SGR,
    "n": ParseCase.CPR,
    "q": ParseCase.DECSCUSR_ETC,
    "r": ParseCase.DECSTBM,
    "x": ParseCase.DECREQTPARM,
}

_DEC_FINAL_ACTIONS = {
    "h": ParseCase.DECSET,
    "l": ParseCase.DECRST,
}


def _controls(line_motion: ParseCase) -> list[ParseCase]:
    actions = {byte: line_motion for byte in _VERTICAL_MOTION_BYTES}
    actions.update(_SEQUENCE_C0_ACTIONS)
    return [actions.get(byte, ParseCase.IGNORE) for byte in range(0x20)]


def _high_half() -> list[ParseCase]:
    return [ParseCase.IGNORE] * 0x20 + [ParseCase.GROUND_STATE] * 0x60


def _finals(actions: dict[str, ParseCase]) -> list[ParseCase]:
    return [actions.get(chr(byte), ParseCase.GROUND_STATE) for byte in range(0x40, 0x80)]


@cache
def _build_csi() -> tuple[ParseCase, ...]:
    intermediates = [ParseCase.CSI_SP] + [ParseCase.ESC_IGNORE] * 0x0F
    parameters = [ParseCase.ESC_DIGIT] * 10 + [ParseCase.ESC_SEMI] * 2
    privates = [ParseCase.IGNORE] * 3 + [ParseCase.DEC_STATE]
    return tuple(
        _controls(ParseCase.ESC_IGNORE)
        + intermediates
        + parameters
        + privates
        + _finals(_CSI_FINAL_ACTIONS)
        + _high_half()
    )


@cache
def _build_dec() -> tuple[ParseCase, ...]:
    intermediates = [ParseCase.ESC_IGNORE] * 0x10
    parameters = [ParseCase.ESC_DIGIT] * 10 + [ParseCase.IGNORE, ParseCase.ESC_SEMI]
    privates = [ParseCase.GROUND_STATE] * 4
    return tuple(
        _controls(ParseCase.VMOT)
        + intermediates
        + parameters
        + privates
        + _finals(_DEC_FINAL_ACTIONS)
        + _high_half()
    )


def csi_table() -> tuple[ParseCase, ...]:
    """The 256-entry action table for bytes after ``ESC [``."""
    return _build_csi()


def dec_table() -> tuple[ParseCase, ...]:
    """The 256-entry action table for bytes after ``ESC [ ?``."""
    return _build_dec()


def _check_byte(byte: int) -> None:
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte value: {byte}")


def csi_action(byte: int) -> ParseCase:
    """The action taken for ``byte`` inside a CSI sequence."""
    _check_byte(byte)
    return _build_csi()[byte]


def dec_action(byte: int) -> ParseCase:
    """The action taken for ``byte`` inside a DEC private sequence."""
    _check_byte(byte)
    return _build_dec()[byte]