"""A single character held as its UTF-8 bytes."""

from __future__ import annotations

import unicodedata


def byte_count(first_byte: int) -> int:
    """Number of bytes in a UTF-8 sequence, judged by its first byte.

    Invalid lead bytes are not recognised; they count as the nearest length.
    """
    if not 0 <= first_byte <= 0xFF:
        raise ValueError(f"not a byte value: {first_byte}")
    if first_byte < 0x80:
        return 1
    if first_byte < 0xE0:
        return 2
    return 3 if first_byte < 0xF0 else 4


class UTF8Char:
    """One character stored as the UTF-8 byte sequence it was read from."""

    __slots__ = ("bytes",)

    def __init__(self, data: bytes | str = b"\x00") -> None:
        if isinstance(data, str):
            if not data:
                raise ValueError("empty string")
            data = data[0].encode("utf-8")
        data = bytes(data)
        if not data:
            raise ValueError("empty byte sequence")
        count = byte_count(data[0])
        if len(data) < count:
            raise ValueError("truncated UTF-8 sequence")
        self.bytes: bytes = data[:count]

    @property
    def byte_count(self) -> int:
        """Length of the stored sequence."""
        return len(self.bytes)

    @property
    def char(self) -> str:
        """The decoded character, or U+FFFD for an invalid sequence."""
        return self.bytes.decode("utf-8", errors="replace")[:1]

    def is_full_width(self) -> bool:
        """True for characters of East Asian width Fullwidth or Wide."""
        return unicodedata.east_asian_width(self.char) in ("F", "W")

    def is_space(self) -> bool:
        """True for white-space characters."""
        return self.char.isspace()

    def is_alnum(self) -> bool:
        """True for letters and digits."""
        return self.char.isalnum()

    def to_lower(self) -> UTF8Char:
        """The lower-case form, using single-character case mappings only."""
        lowered = self.char.lower()
        if len(lowered) != 1:
            lowered = self.char
        return UTF8Char(lowered)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UTF8Char):
            return NotImplemented
        return self.bytes == other.bytes

    def __hash__(self) -> int:
        return hash(self.bytes)

    def __str__(self) -> str:
        return self.char

    def __repr__(self) -> str:
        return f"UTF8Char({self.bytes!r})"