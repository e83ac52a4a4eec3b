"""Key codes and the escape sequences sent for special keys."""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence


class KeyCase(IntEnum):
    """How a key press is translated for the shell."""

    IGNORE = 0
    FUNCTION = 1
    UP_ARROW = 2
    DOWN_ARROW = 3
    RIGHT_ARROW = 4
    LEFT_ARROW = 5
    RET_ENTR = 6


F1_KEY = 0x02
F2_KEY = 0x03
F3_KEY = 0x04
F4_KEY = 0x05
F5_KEY = 0x06
F6_KEY = 0x07
F7_KEY = 0x08
F8_KEY = 0x09
F9_KEY = 0x0A
F10_KEY = 0x0B
F11_KEY = 0x0C
F12_KEY = 0x0D

RETURN_KEY = 0x47
ENTER_KEY = 0x5B

LEFT_ARROW_KEY = 0x61
RIGHT_ARROW_KEY = 0x63
UP_ARROW_KEY = 0x57
DOWN_ARROW_KEY = 0x62

HOME_KEY = 0x20
INSERT_KEY = 0x1F
END_KEY = 0x35
PAGE_UP_KEY = 0x21
PAGE_DOWN_KEY = 0x36

LEFT_ARROW_KEY_CODE = "\033OD"
RIGHT_ARROW_KEY_CODE = "\033OC"
UP_ARROW_KEY_CODE = "\033OA"
DOWN_ARROW_KEY_CODE = "\033OB"

SHIFT_LEFT_ARROW_KEY_CODE = "\033O2D"
SHIFT_RIGHT_ARROW_KEY_CODE = "\033O2C"
SHIFT_UP_ARROW_KEY_CODE = "\033O2A"
SHIFT_DOWN_ARROW_KEY_CODE = "\033O2B"

CTRL_LEFT_ARROW_KEY_CODE = "\033O5D"
CTRL_RIGHT_ARROW_KEY_CODE = "\033O5C"
CTRL_UP_ARROW_KEY_CODE = "\033O5A"
CTRL_DOWN_ARROW_KEY_CODE = "\033O5B"

DELETE_KEY_CODE = "\033[3~"
BACKSPACE_KEY_CODE = "\177"

HOME_KEY_CODE = "\033OH"
INSERT_KEY_CODE = "\033[2~"
END_KEY_CODE = "\033OF"
PAGE_UP_KEY_CODE = "\033[5~"
PAGE_DOWN_KEY_CODE = "\033[6~"

SHIFT_HOME_KEY_CODE = "\033O2H"
SHIFT_END_KEY_CODE = "\033O2F"

BEGIN_BRACKETED_PASTE_CODE = "\033[200~"
END_BRACKETED_PASTE_CODE = "\033[201~"


def is_key_down(key_states: Sequence[int], key: int) -> bool:
    """Whether ``key`` is pressed in a key-state bitmap.

    Each byte holds eight keys, the most significant bit first.
    """
    if key < 0:
        raise ValueError(f"invalid key code: {key}")
    return bool(key_states[key >> 3] & (1 << (7 - key % 8)))