"""Moves a player can make and their textual form."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from onyx.chips import ChipSet


class MoveType(IntEnum):
    TAKE_DIFFERENT = 1
    TAKE_SAME = 2
    RESERVE = 3
    BUY_FACEUP = 4
    BUY_RESERVE = 5


@dataclass
class Move:
    """A move; `delta` holds chips gained (+) or spent (-) by the player."""

    type: MoveType
    card_id: int = 0
    noble_pos: int = 0
    delta: ChipSet = field(default_factory=ChipSet)

    def __str__(self) -> str:
        return f"Move [type:{int(self.type)}  card:{self.card_id}  chips:{self.delta}]"