import pytest

from vtterm.pos import TermPos


def test_default_is_origin():
    assert TermPos() == TermPos(0, 0)


def test_set_to_moves_position():
    pos = TermPos(3, 4)
    pos.set_to(7, 9)
    assert (pos.x, pos.y) == (7, 9)


def test_equality_and_inequality():
    assert TermPos(1, 2) == TermPos(1, 2)
    assert TermPos(1, 2) != TermPos(2, 1)
    assert not (TermPos(1, 2) != TermPos(1, 2))


def test_row_dominates_column():
    assert TermPos(50, 0) < TermPos(0, 1)
    assert TermPos(0, 1) > TermPos(50, 0)


def test_same_row_compares_columns():
    assert TermPos(2, 5) < TermPos(3, 5)
    assert TermPos(3, 5) >= TermPos(3, 5)
    assert TermPos(3, 5) <= TermPos(3, 5)
    assert not (TermPos(3, 5) < TermPos(3, 5))


@pytest.mark.parametrize(
    "a, b",
    [((0, 0), (1, 0)), ((4, 2), (0, 3)), ((9, 9), (9, 9)), ((1, 7), (0, 7))],
)
def test_ordering_is_consistent(a, b):
    p, q = TermPos(*a), TermPos(*b)
    assert (p < q) == (not (p >= q))
    assert (p > q) == (not (p <= q))
    assert (p <= q) == (q >= p)


def test_sorting_is_reading_order():
    positions = [TermPos(5, 1), TermPos(0, 2), TermPos(9, 0), TermPos(1, 1)]
    ordered = sorted(positions)
    assert [(p.x, p.y) for p in ordered] == [(9, 0), (1, 1), (5, 1), (0, 2)]


def test_comparison_with_other_type_fails():
    with pytest.raises(TypeError):
        TermPos(0, 0) < (0, 0)