import pytest

from onyx.catalog import get_card
from onyx.chips import ENDGAME_POINTS, GOLD, INFIN, NOBLE_POINTS, ChipSet
from onyx.player import Player

# Card 1 costs three white (index 3) chips and gives a red bonus, no points.
WHITE = 3


def test_read_full_player():
    tokens = iter([1, 0, 0, 2, 0, 1, 2, 45, 1, 2, 10, 0, 1, 4])
    player = Player.read(tokens)
    assert player.chips == ChipSet([1, 0, 0, 2, 0, 1])
    assert player.cards[get_card(45).color] == 1
    assert player.cards[get_card(1).color] == 1
    assert 10 in player.reserve
    assert player.num_secret_reserve == 1
    assert player.num_nobles == 1
    assert player.points == get_card(45).points + get_card(1).points + NOBLE_POINTS
    assert next(tokens, None) is None


def test_read_truncated_input_raises():
    with pytest.raises(ValueError):
        Player.read(iter([0, 0, 0, 0, 0, 0, 2, 1]))


def test_affords_with_exact_chips():
    player = Player(chips=ChipSet([0, 0, 0, 3, 0, 0]))
    assert player.affords(1) == ChipSet([0, 0, 0, -3, 0, 0])


def test_affords_using_gold():
    player = Player(chips=ChipSet([0, 0, 0, 2, 0, 1]))
    assert player.affords(1) == ChipSet([0, 0, 0, -2, 0, -1])


def test_cannot_afford_without_enough_gold():
    player = Player(chips=ChipSet([0, 0, 0, 2, 0, 0]))
    assert player.affords(1) is None


def test_card_bonuses_reduce_cost():
    player = Player(chips=ChipSet([0, 0, 0, 2, 0, 0]), cards=ChipSet([0, 0, 0, 1, 0, 0]))
    assert player.affords(1) == ChipSet([0, 0, 0, -2, 0, 0])


def test_surplus_bonuses_cost_nothing():
    player = Player(cards=ChipSet([5, 5, 5, 5, 5, 0]))
    delta = player.affords(90)
    assert delta == ChipSet()


def test_affords_does_not_change_player():
    player = Player(chips=ChipSet([1, 1, 1, 3, 1, 2]), cards=ChipSet([0, 0, 0, 1, 0, 0]))
    before = (player.chips.copy(), player.cards.copy())
    player.affords(1)
    assert (player.chips, player.cards) == before


def test_gain_lose_round_trip():
    player = Player()
    player.gain_card(45)
    assert player.points == get_card(45).points
    assert player.cards.total() == 1
    player.lose_card(45)
    assert player == Player()


def test_static_eval_at_endgame():
    player = Player(points=ENDGAME_POINTS)
    assert player.static_eval() == INFIN * ENDGAME_POINTS


def test_static_eval_counts_gold_twice():
    plain = Player(chips=ChipSet([1, 0, 0, 0, 0, 0]))
    gold = Player(chips=ChipSet([0, 0, 0, 0, 0, 1]))
    assert gold.static_eval() == 2 * plain.static_eval()


def test_static_eval_penalises_reserve():
    player = Player()
    base = player.static_eval()
    player.reserve.toggle(5)
    assert player.static_eval() < base


def test_log_state_writes_points(capsys):
    player = Player(points=3, num_nobles=1)
    player.reserve.toggle(1)
    player.log_state()
    err = capsys.readouterr().err
    assert "Points: 3" in err
    assert "Reserve:" in err
    assert "[# 1]" in err


def test_gold_slot_index():
    player = Player(chips=ChipSet([0, 0, 0, 0, 0, 2]))
    assert player.chips[GOLD] == 2