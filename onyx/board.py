"""Full game state: bank chips, face-up cards, nobles and players."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from onyx import log
from onyx.bitset import BitSet
from onyx.catalog import get_card, get_noble
from onyx.chips import (
    ENDGAME_POINTS,
    MAX_PLAYERS,
    NUM_CARD_LEVELS,
    NUM_COLORS,
    NUM_FACE_UP_CARDS_PER_LEVEL,
    ChipSet,
)
from onyx.move import Move, MoveType
from onyx.player import Player
from onyx.score import Score


def parse_tokens(text: str) -> Iterator[int]:
    """Split whitespace-separated integers into an iterator."""
    try:
        return iter([int(token) for token in text.split()])
    except ValueError:
        raise ValueError("input must consist of integers") from None


def _next_int(tokens: Iterator[int]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input while reading the board") from None


@dataclass
class Board:
    num_players: int = 2
    curr_player: int = 0
    chips: ChipSet = field(default_factory=ChipSet)
    cards: BitSet = field(default_factory=BitSet)
    nobles: BitSet = field(default_factory=BitSet)
    players: list[Player] = field(default_factory=list)
    num_finished_players: int = 0

    def __post_init__(self) -> None:
        if not 1 <= self.num_players <= MAX_PLAYERS:
            raise ValueError(f"unsupported number of players: {self.num_players}")
        if not 0 <= self.curr_player < self.num_players:
            raise ValueError(f"current player out of range: {self.curr_player + 1}")
        if not self.players:
            self.players = [Player() for _ in range(self.num_players)]
        elif len(self.players) != self.num_players:
            raise ValueError("the number of players does not match num_players")

    @classmethod
    def read(cls, tokens: Iterator[int]) -> Board:
        """Read a position in the protocol's order from an iterator of integers."""
        num_players = _next_int(tokens)
        curr_player = _next_int(tokens) - 1  # the protocol is 1-based
        _next_int(tokens)  # round number
        chips = ChipSet.read(tokens)

        cards = BitSet()
        for _ in range(NUM_CARD_LEVELS):
            _next_int(tokens)  # face-down cards left on this level
            for _ in range(NUM_FACE_UP_CARDS_PER_LEVEL):
                card_id = _next_int(tokens)
                if card_id:
                    cards.toggle(card_id)

        nobles = BitSet()
        for _ in range(_next_int(tokens)):
            nobles.toggle(_next_int(tokens))

        if not 1 <= num_players <= MAX_PLAYERS:
            raise ValueError(f"unsupported number of players: {num_players}")
        players = [Player.read(tokens) for _ in range(num_players)]
        return cls(
            num_players=num_players,
            curr_player=curr_player,
            chips=chips,
            cards=cards,
            nobles=nobles,
            players=players,
        )

    def is_game_over(self) -> bool:
        return self.curr_player == 0 and self.num_finished_players > 0

    def make_move(self, move: Move) -> None:
        player = self.players[self.curr_player]
        player.chips.add(move.delta)
        self.chips.subtract(move.delta)

        if move.type == MoveType.RESERVE:
            self.cards.toggle(move.card_id)
            player.reserve.toggle(move.card_id)
        elif move.type == MoveType.BUY_FACEUP:
            self.cards.toggle(move.card_id)
            player.gain_card(move.card_id)
        elif move.type == MoveType.BUY_RESERVE:
            player.reserve.toggle(move.card_id)
            player.gain_card(move.card_id)

        if player.points >= ENDGAME_POINTS:
            self.num_finished_players += 1
        self.curr_player = (self.curr_player + 1) % self.num_players

    def undo_move(self, move: Move) -> None:
        self.curr_player = (self.curr_player - 1) % self.num_players

        player = self.players[self.curr_player]
        if player.points >= ENDGAME_POINTS:
            self.num_finished_players -= 1
        player.chips.subtract(move.delta)
        self.chips.add(move.delta)

        if move.type == MoveType.RESERVE:
            self.cards.toggle(move.card_id)
            player.reserve.toggle(move.card_id)
        elif move.type == MoveType.BUY_FACEUP:
            self.cards.toggle(move.card_id)
            player.lose_card(move.card_id)
        elif move.type == MoveType.BUY_RESERVE:
            player.reserve.toggle(move.card_id)
            player.lose_card(move.card_id)

    def static_eval(self) -> Score:
        score = Score(self.num_players)
        for pos, player in enumerate(self.players):
            score.set(pos, player.static_eval())
        return score

    def translate_move(self, move: Move) -> list[int]:
        """The move as a list of protocol tokens."""
        if move.type == MoveType.TAKE_DIFFERENT:
            taken = [col for col in range(NUM_COLORS) if move.delta[col] == 1]
            return [int(MoveType.TAKE_DIFFERENT), move.delta.count_value(1), *taken]
        if move.type == MoveType.TAKE_SAME:
            return [int(MoveType.TAKE_SAME), move.delta.find_value(2)]
        if move.type == MoveType.RESERVE:
            return [int(MoveType.RESERVE), move.card_id]
        if move.type in (MoveType.BUY_FACEUP, MoveType.BUY_RESERVE):
            # The protocol does not tell the two kinds of purchase apart.
            return [int(MoveType.BUY_FACEUP), move.card_id]
        raise ValueError(f"unknown move type: {move}")

    def log_state(self) -> None:
        log.debug(f"======== Player to move: {self.curr_player + 1}")

        log.debug("======== Nobles:")
        for noble_id in self.nobles:
            log.debug(f"    {get_noble(noble_id)}")

        log.debug("======== Cards:")
        log.debug("      ID  points  color  cost")
        for card_id in self.cards:
            log.debug(f"    {get_card(card_id)}")

        log.debug("======== Chips:")
        log.debug(f"    {self.chips}")

        for pos, player in enumerate(self.players, start=1):
            log.debug(f"======== Player {pos}:")
            player.log_state()