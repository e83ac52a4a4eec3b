import pytest

from vtterm.csi_tables import csi_action, csi_table, dec_action, dec_table
from vtterm.parse_cases import ParseCase


@pytest.mark.parametrize("table_fn", [csi_table, dec_table])
def test_tables_cover_every_byte(table_fn):
    table = table_fn()
    assert len(table) == 256
    assert all(isinstance(entry, ParseCase) for entry in table)


@pytest.mark.parametrize(
    "table_fn, action_fn", [(csi_table, csi_action), (dec_table, dec_action)]
)
def test_action_matches_table(table_fn, action_fn):
    table = table_fn()
    assert [action_fn(byte) for byte in range(256)] == list(table)


@pytest.mark.parametrize("action_fn", [csi_action, dec_action])
@pytest.mark.parametrize("byte", [-1, 256, 1000])
def test_out_of_range_byte_rejected(action_fn, byte):
    with pytest.raises(ValueError):
        action_fn(byte)


@pytest.mark.parametrize("table_fn", [csi_table, dec_table])
def test_c1_ignored_and_upper_half_aborts(table_fn):
    table = table_fn()
    assert set(table[0x80:0xA0]) == {ParseCase.IGNORE}
    assert set(table[0xA0:]) == {ParseCase.GROUND_STATE}


@pytest.mark.parametrize("table_fn", [csi_table, dec_table])
def test_digits_collect_parameters(table_fn):
    table = table_fn()
    assert set(table[ord("0") : ord("9") + 1]) == {ParseCase.ESC_DIGIT}
    assert table[ord(";")] == ParseCase.ESC_SEMI


@pytest.mark.parametrize("action_fn", [csi_action, dec_action])
def test_shared_controls(action_fn):
    assert action_fn(0x07) == ParseCase.BELL
    assert action_fn(0x08) == ParseCase.BS
    assert action_fn(0x09) == ParseCase.TAB
    assert action_fn(0x0D) == ParseCase.CR
    assert action_fn(0x1B) == ParseCase.ESC
    assert action_fn(0x00) == ParseCase.IGNORE


def test_csi_final_bytes():
    assert csi_action(ord("m")) == ParseCase.SGR
    assert csi_action(ord("H")) == ParseCase.CUP
    assert csi_action(ord("f")) == csi_action(ord("H"))
    assert csi_action(ord("J")) == ParseCase.ED
    assert csi_action(ord("r")) == ParseCase.DECSTBM
    assert csi_action(ord("x")) == ParseCase.DECREQTPARM


def test_csi_specials():
    assert csi_action(ord("?")) == ParseCase.DEC_STATE
    assert csi_action(ord(" ")) == ParseCase.CSI_SP
    assert csi_action(ord(":")) == ParseCase.ESC_SEMI
    assert csi_action(0x0A) == ParseCase.ESC_IGNORE
    assert csi_action(0x7F) == ParseCase.GROUND_STATE


def test_dec_final_bytes():
    assert dec_action(ord("h")) == ParseCase.DECSET
    assert dec_action(ord("l")) == ParseCase.DECRST
    assert dec_action(ord("m")) == ParseCase.GROUND_STATE
    assert dec_action(ord("?")) == ParseCase.GROUND_STATE


def test_dec_specials():
    assert dec_action(ord(":")) == ParseCase.IGNORE
    assert dec_action(ord(" ")) == ParseCase.ESC_IGNORE
    assert {dec_action(b) for b in (0x0A, 0x0B, 0x0C)} == {ParseCase.VMOT}


def test_dec_only_two_commands():
    commands = {
        entry
        for entry in dec_table()[0x40:0x80]
        if entry is not ParseCase.GROUND_STATE
    }
    assert commands == {ParseCase.DECSET, ParseCase.DECRST}


def test_tables_are_stable():
    first_csi = list(csi_table())
    second_csi = list(csi_table())
    assert first_csi == second_csi
    assert second_csi[ord("m")] is ParseCase.SGR
    first_dec = list(dec_table())
    second_dec = list(dec_table())
    assert first_dec == second_dec
    assert second_dec[ord("h")] is ParseCase.DECSET