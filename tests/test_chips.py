import pytest

from onyx.chips import (
    ANSI_DEFAULT,
    CARD_CHAR,
    CHIP_CHAR,
    CHIP_COLORS,
    GOLD,
    NUM_COLORS,
    ChipSet,
    card_str,
    chip_str,
)


def test_default_is_empty():
    cs = ChipSet()
    assert list(cs) == [0] * (NUM_COLORS + 1)
    assert cs.total() == 0
    assert str(cs) == ""


def test_from_costs_sets_gold_to_zero():
    costs = [1, 2, 3, 4, 5]
    cs = ChipSet.from_costs(costs)
    assert list(cs)[:NUM_COLORS] == costs
    assert cs[GOLD] == 0
    assert cs.total() == sum(costs)


def test_from_costs_rejects_wrong_length():
    with pytest.raises(ValueError):
        ChipSet.from_costs([1, 2, 3])


def test_too_many_values_rejected():
    with pytest.raises(ValueError):
        ChipSet([0] * 7)


def test_read_consumes_six_tokens():
    tokens = iter([1, 2, 3, 4, 5, 6, 7])
    cs = ChipSet.read(tokens)
    assert list(cs) == [1, 2, 3, 4, 5, 6]
    assert next(tokens) == 7


def test_read_short_input_raises():
    with pytest.raises(ValueError):
        ChipSet.read(iter([1, 2]))


def test_change_and_getitem():
    cs = ChipSet()
    cs.change(2, 3)
    cs.change(2, -1)
    cs.change(GOLD, 1)
    assert cs[2] == 2
    assert cs[GOLD] == 1
    assert cs.total() == cs[2] + cs[GOLD]


def test_index_out_of_range():
    with pytest.raises(IndexError):
        ChipSet()[NUM_COLORS + 1]
    with pytest.raises(IndexError):
        ChipSet().change(-1, 1)


def test_add_subtract_round_trip():
    a = ChipSet([3, 1, 0, 2, 4, 1])
    b = ChipSet([-1, 2, 5, 0, -3, 1])
    original = a.copy()
    a.add(b)
    assert a.total() == original.total() + b.total()
    a.subtract(b)
    assert a == original


def test_copy_is_independent():
    a = ChipSet([1, 1, 1, 1, 1, 1])
    b = a.copy()
    b.change(0, 5)
    assert a[0] == 1
    assert a != b


def test_clear():
    cs = ChipSet([1, 2, 3, 4, 5, 6])
    cs.clear()
    assert cs == ChipSet()


def test_mask_no_gold_matches_nonzero_colors():
    cs = ChipSet([1, 0, 2, 0, -1, 5])
    mask = cs.mask_no_gold()
    for color in range(NUM_COLORS):
        assert bool(mask & (1 << color)) == bool(cs[color])
    assert mask >> NUM_COLORS == 0


def test_mask_ignores_gold():
    assert ChipSet([0, 0, 0, 0, 0, 3]).mask_no_gold() == 0


def test_find_value():
    assert ChipSet([0, 0, 2, 0, 2, 0]).find_value(2) == 2
    with pytest.raises(ValueError):
        ChipSet().find_value(2)


def test_count_value_includes_gold():
    cs = ChipSet([1, 1, 0, 1, 0, 1])
    assert cs.count_value(1) == 4
    assert cs.count_value(0) + cs.count_value(1) == NUM_COLORS + 1


def test_chip_str_pinned():
    assert chip_str(0, 2) == "\x1b[91m◉◉\x1b[00m"


def test_negative_count_has_minus():
    s = chip_str(1, -3)
    assert s.startswith(CHIP_COLORS[1] + "-")
    assert s.count(CHIP_CHAR) == 3
    assert s.endswith(ANSI_DEFAULT)


def test_card_str_uses_card_symbol():
    s = card_str(4, 2)
    assert s.count(CARD_CHAR) == 2
    assert CHIP_CHAR not in s
    assert s.startswith(CHIP_COLORS[4])


def test_str_joins_nonzero_slots():
    cs = ChipSet([1, 0, 1, 0, 0, 0])
    assert str(cs) == chip_str(0, 1) + " " + chip_str(2, 1)


def test_as_cards_joins_nonzero_slots():
    cs = ChipSet([0, 2, 0, 0, 0, 1])
    assert cs.as_cards() == card_str(1, 2) + " " + card_str(GOLD, 1)