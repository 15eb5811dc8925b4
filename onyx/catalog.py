"""The fixed catalogue of development cards and nobles."""

from __future__ import annotations

from dataclasses import dataclass

from onyx.chips import (
    MAX_ID_PER_LEVEL,
    NUM_CARD_LEVELS,
    NUM_CARDS,
    NUM_NOBLES,
    ChipSet,
    card_str,
)

# red_cost, green_cost, blue_cost, white_cost, black_cost, bonus_color, points
_CARD_DATA = (
    (0, 0, 0, 3, 0, 0, 0),
    (3, 0, 0, 0, 0, 1, 0),
    (0, 0, 0, 0, 3, 2, 0),
    (0, 0, 3, 0, 0, 3, 0),
    (0, 3, 0, 0, 0, 4, 0),
    (0, 1, 2, 0, 0, 0, 0),
    (0, 0, 1, 2, 0, 1, 0),
    (0, 0, 0, 1, 2, 2, 0),
    (2, 0, 0, 0, 1, 3, 0),
    (1, 2, 0, 0, 0, 4, 0),
    (0, 0, 0, 4, 0, 0, 1),
    (0, 0, 0, 0, 4, 1, 1),
    (4, 0, 0, 0, 0, 2, 1),
    (0, 4, 0, 0, 0, 3, 1),
    (0, 0, 4, 0, 0, 4, 1),
    (2, 0, 0, 2, 0, 0, 0),
    (2, 0, 2, 0, 0, 1, 0),
    (0, 2, 0, 0, 2, 2, 0),
    (0, 0, 2, 0, 2, 3, 0),
    (0, 2, 0, 2, 0, 4, 0),
    (0, 1, 1, 1, 1, 0, 0),
    (1, 0, 1, 1, 1, 1, 0),
    (1, 1, 0, 1, 1, 2, 0),
    (1, 1, 1, 0, 1, 3, 0),
    (1, 1, 1, 1, 0, 4, 0),
    (0, 1, 1, 2, 1, 0, 0),
    (1, 0, 1, 1, 2, 1, 0),
    (2, 1, 0, 1, 1, 2, 0),
    (1, 2, 1, 0, 1, 3, 0),
    (1, 1, 2, 1, 0, 4, 0),
    (0, 1, 0, 2, 2, 0, 0),
    (2, 0, 1, 0, 2, 1, 0),
    (2, 2, 0, 1, 0, 2, 0),
    (0, 2, 2, 0, 1, 3, 0),
    (1, 0, 2, 2, 0, 4, 0),
    (1, 0, 0, 1, 3, 0, 0),
    (0, 1, 3, 1, 0, 1, 0),
    (1, 3, 1, 0, 0, 2, 0),
    (0, 0, 1, 3, 1, 3, 0),
    (3, 1, 0, 0, 1, 4, 0),
    (0, 0, 0, 0, 5, 0, 2),
    (0, 5, 0, 0, 0, 1, 2),
    (0, 0, 5, 0, 0, 2, 2),
    (5, 0, 0, 0, 0, 3, 2),
    (0, 0, 0, 5, 0, 4, 2),
    (6, 0, 0, 0, 0, 0, 3),
    (0, 6, 0, 0, 0, 1, 3),
    (0, 0, 6, 0, 0, 2, 3),
    (0, 0, 0, 6, 0, 3, 3),
    (0, 0, 0, 0, 6, 4, 3),
    (0, 0, 0, 3, 5, 0, 2),
    (0, 3, 5, 0, 0, 1, 2),
    (0, 0, 3, 5, 0, 2, 2),
    (5, 0, 0, 0, 3, 3, 2),
    (3, 5, 0, 0, 0, 4, 2),
    (0, 2, 4, 1, 0, 0, 2),
    (0, 0, 2, 4, 1, 1, 2),
    (1, 0, 0, 2, 4, 2, 2),
    (4, 1, 0, 0, 2, 3, 2),
    (2, 4, 1, 0, 0, 4, 2),
    (2, 0, 0, 2, 3, 0, 1),
    (0, 0, 3, 2, 2, 1, 1),
    (3, 2, 2, 0, 0, 2, 1),
    (2, 3, 0, 0, 2, 3, 1),
    (0, 2, 2, 3, 0, 4, 1),
    (2, 0, 3, 0, 3, 0, 1),
    (3, 2, 0, 3, 0, 1, 1),
    (0, 3, 2, 0, 3, 2, 1),
    (3, 0, 3, 2, 0, 3, 1),
    (0, 3, 0, 3, 2, 4, 1),
    (0, 7, 0, 0, 0, 0, 4),
    (0, 0, 7, 0, 0, 1, 4),
    (0, 0, 0, 7, 0, 2, 4),
    (0, 0, 0, 0, 7, 3, 4),
    (7, 0, 0, 0, 0, 4, 4),
    (3, 7, 0, 0, 0, 0, 5),
    (0, 3, 7, 0, 0, 1, 5),
    (0, 0, 3, 7, 0, 2, 5),
    (0, 0, 0, 3, 7, 3, 5),
    (7, 0, 0, 0, 3, 4, 5),
    (3, 6, 3, 0, 0, 0, 4),
    (0, 3, 6, 3, 0, 1, 4),
    (0, 0, 3, 6, 3, 2, 4),
    (3, 0, 0, 3, 6, 3, 4),
    (6, 3, 0, 0, 3, 4, 4),
    (0, 3, 5, 3, 3, 0, 3),
    (3, 0, 3, 5, 3, 1, 3),
    (3, 3, 0, 3, 5, 2, 3),
    (5, 3, 3, 0, 3, 3, 3),
    (3, 5, 3, 3, 0, 4, 3),
)

# red_cost, green_cost, blue_cost, white_cost, black_cost
_NOBLE_DATA = (
    (4, 4, 0, 0, 0),
    (0, 4, 4, 0, 0),
    (0, 0, 4, 4, 0),
    (0, 0, 0, 4, 4),
    (4, 0, 0, 0, 4),
    (3, 3, 3, 0, 0),
    (0, 3, 3, 3, 0),
    (0, 0, 3, 3, 3),
    (3, 0, 0, 3, 3),
    (3, 3, 0, 0, 3),
)


def card_level(card_id: int) -> int:
    """The level (1-based) that a card id belongs to."""
    if not 1 <= card_id <= NUM_CARDS:
        raise KeyError(f"no card with id {card_id}")
    return next(
        level
        for level in range(1, NUM_CARD_LEVELS + 1)
        if card_id <= MAX_ID_PER_LEVEL[level]
    )


@dataclass(frozen=True)
class Card:
    id: int
    cost: ChipSet
    color: int
    points: int
    level: int

    def __str__(self) -> str:
        return (
            f"[#{self.id:2d}]    {self.points}      "
            f"{card_str(self.color, 1)}    {self.cost}"
        )


@dataclass(frozen=True)
class Noble:
    id: int
    cost: ChipSet

    def __str__(self) -> str:
        return f"[#{self.id:2d}]    {self.cost.as_cards()}"


_CARDS = {
    card_id: Card(
        id=card_id,
        cost=ChipSet.from_costs(row[:5]),
        color=row[5],
        points=row[6],
        level=card_level(card_id),
    )
    for card_id, row in enumerate(_CARD_DATA, start=1)
}

_NOBLES = {
    noble_id: Noble(id=noble_id, cost=ChipSet.from_costs(row))
    for noble_id, row in enumerate(_NOBLE_DATA, start=1)
}

assert len(_CARDS) == NUM_CARDS and len(_NOBLES) == NUM_NOBLES


def get_card(card_id: int) -> Card:
    try:
        return _CARDS[card_id]
    except KeyError:
        raise KeyError(f"no card with id {card_id}") from None


def get_noble(noble_id: int) -> Noble:
    try:
        return _NOBLES[noble_id]
    except KeyError:
        raise KeyError(f"no noble with id {noble_id}") from None