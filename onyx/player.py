"""A player's holdings: chips, card bonuses, reserved cards and points."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from onyx import log
from onyx.bitset import BitSet
from onyx.catalog import get_card
from onyx.chips import (
    ENDGAME_POINTS,
    GOLD,
    INFIN,
    NOBLE_POINTS,
    NUM_COLORS,
    NUM_SLOTS,
    ChipSet,
    card_str,
    chip_str,
)


def _next_int(tokens: Iterator[int]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input while reading a player") from None


@dataclass
class Player:
    points: int = 0
    chips: ChipSet = field(default_factory=ChipSet)
    cards: ChipSet = field(default_factory=ChipSet)
    reserve: BitSet = field(default_factory=BitSet)
    num_secret_reserve: int = 0
    num_nobles: int = 0

    @classmethod
    def read(cls, tokens: Iterator[int]) -> Player:
        """Read chips, cards, reserve and nobles from an iterator of integers."""
        player = cls(chips=ChipSet.read(tokens))

        for _ in range(_next_int(tokens)):
            player.gain_card(_next_int(tokens))

        for _ in range(_next_int(tokens)):
            card_id = _next_int(tokens)
            if card_id > 0:
                player.reserve.toggle(card_id)
            else:
                player.num_secret_reserve += 1

        player.num_nobles = _next_int(tokens)
        player.points += player.num_nobles * NOBLE_POINTS
        for _ in range(player.num_nobles):
            _next_int(tokens)  # noble ids do not matter
        return player

    def affords(self, card_id: int) -> ChipSet | None:
        """The (non-positive) chip delta paying for the card, or None if unaffordable."""
        card = get_card(card_id)
        gold_in_hand = self.chips[GOLD]
        gold_needed = 0

        cost = self.cards.copy()
        cost.subtract(card.cost)

        for col in range(NUM_COLORS):
            needed = -cost[col]
            if needed < 0:
                cost.change(col, needed)
            else:
                have = self.chips[col]
                if have < needed:
                    cost.change(col, needed - have)
                    gold_needed += needed - have
                    if gold_needed > gold_in_hand:
                        return None

        cost.change(GOLD, -gold_needed)
        return cost

    def gain_card(self, card_id: int) -> None:
        card = get_card(card_id)
        self.cards.change(card.color, 1)
        self.points += card.points

    def lose_card(self, card_id: int) -> None:
        card = get_card(card_id)
        self.cards.change(card.color, -1)
        self.points -= card.points

    def static_eval(self) -> int:
        if self.points >= ENDGAME_POINTS:
            return INFIN * self.points
        return (
            self.points * 20
            + self.cards.total() * 10
            - self.reserve.popcount() * 10  # don't be hasty to reserve cards
            + self.chips.total()
            + self.chips[GOLD]  # gold is worth 2
        )

    def log_state(self) -> None:
        log.debug(f"    Points: {self.points}")
        log.debug(f"    Nobles: {self.num_nobles}")
        parts = "".join(
            card_str(color, self.cards[color]) + chip_str(color, self.chips[color]) + " "
            for color in range(NUM_SLOTS)
            if self.cards[color] or self.chips[color]
        )
        log.debug(f"    Cards and chips: {parts}")
        if self.reserve:
            log.debug("    Reserve:")
            for card_id in self.reserve:
                log.debug(f"    {get_card(card_id)}")