import string

import pytest

from vtterm.charsets import (
    LINE_DRAW_GRAPH_SET,
    line_draw_replacement,
    translate_line_draw,
)


def _utf8(data: bytes) -> str:
    return data.decode("utf-8")


@pytest.mark.parametrize(
    "char, encoded",
    [
        ("q", b"\xE2\x94\x80"),
        ("x", b"\xE2\x94\x82"),
        ("l", b"\xE2\x94\x8C"),
        ("+", b"\xE2\x86\x92"),
        ("0", b"\xE2\x96\xAE"),
        ("_", b"\xE2\x96\xAE"),
        ("{", b"\xCF\x80"),
        ("}", b"\xC2\xA3"),
        ("~", b"\xC2\xB7"),
    ],
)
def test_replacement_matches_set(char, encoded):
    assert line_draw_replacement(char) == _utf8(encoded)


@pytest.mark.parametrize("char", ["A", " ", "!", "1", "/", "\x7f", "Z", "^"])
def test_characters_without_glyph_fall_through(char):
    assert line_draw_replacement(char) is None


@pytest.mark.parametrize("char", ["\x00", "\x1b", "\u00e9", "\u2500"])
def test_characters_outside_set_fall_through(char):
    assert line_draw_replacement(char) is None


def test_set_has_96_entries():
    looked_up = [line_draw_replacement(chr(code)) for code in range(0x20, 0x80)]
    assert len(looked_up) == 96
    assert looked_up == list(LINE_DRAW_GRAPH_SET)
    assert line_draw_replacement(chr(0x80)) is None
    assert line_draw_replacement(chr(0x1F)) is None


def test_set_agrees_with_lookup():
    for offset, glyph in enumerate(LINE_DRAW_GRAPH_SET):
        assert line_draw_replacement(chr(0x20 + offset)) == glyph


def test_every_glyph_is_single_non_ascii_character():
    glyphs = [
        glyph
        for glyph in (line_draw_replacement(chr(code)) for code in range(0x20, 0x80))
        if glyph is not None
    ]
    assert glyphs
    for glyph in glyphs:
        assert len(glyph) == 1
        assert ord(glyph) > 0x7F


def test_translate_box():
    expected = (
        _utf8(b"\xE2\x94\x8C")
        + _utf8(b"\xE2\x94\x80")
        + _utf8(b"\xE2\x94\x90")
    )
    assert translate_line_draw("lqk") == expected


def test_translate_leaves_other_text_alone():
    text = string.ascii_uppercase + string.digits[1:] + " !/"
    assert translate_line_draw(text) == text


def test_translate_preserves_length_and_matches_lookup():
    text = string.printable
    result = translate_line_draw(text)
    assert len(result) == len(text)
    for original, shown in zip(text, result):
        replacement = line_draw_replacement(original)
        assert shown == (replacement if replacement is not None else original)


def test_translate_empty():
    assert translate_line_draw("") == ""


@pytest.mark.parametrize("bad", ["", "ab"])
def test_replacement_rejects_non_single_character(bad):
    with pytest.raises(ValueError):
        line_draw_replacement(bad)


def test_replacement_rejects_non_string():
    with pytest.raises(TypeError):
        line_draw_replacement(0x71)


def test_translate_rejects_bytes():
    with pytest.raises(TypeError):
        translate_line_draw(b"lqk")