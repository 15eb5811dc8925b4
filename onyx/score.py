"""Per-player evaluation tuples compared from one player's point of view."""

from __future__ import annotations

from onyx.chips import MAX_PLAYERS


class Score:
    """One value per player; compared via a player's advantage over the rest."""

    __slots__ = ("num_players", "_values")

    def __init__(self, num_players: int) -> None:
        self.num_players = max(num_players, 2)
        self._values = [0] * MAX_PLAYERS

    def set(self, pos: int, val: int) -> None:
        self._values[pos] = val

    def pov(self, player: int) -> int:
        """The player's value times the player count, minus everyone's total."""
        return self._values[player] * self.num_players - sum(self._values)

    def better_than(self, other: Score, player: int) -> bool:
        return self.pov(player) > other.pov(player)

    def __str__(self) -> str:
        shown = self._values[: self.num_players]
        return "<" + ",".join(str(v) for v in shown) + ">"

    def __repr__(self) -> str:
        return f"Score({self})"