"""Generation of every legal move for the player to move."""

from __future__ import annotations

from itertools import combinations

from onyx.board import Board
from onyx.chips import (
    GOLD,
    MAX_CHIPS,
    MAX_RESERVE,
    MAX_TAKE,
    NUM_COLORS,
    TAKE_TWO_LIMIT,
    ChipSet,
)
from onyx.move import Move, MoveType
from onyx.player import Player


def _take_different(board: Board, in_hand: int) -> list[Move]:
    available = [col for col in range(NUM_COLORS) if board.chips[col]]
    to_take = min(MAX_TAKE, len(available), MAX_CHIPS - in_hand)
    if to_take <= 0:
        return []
    moves = []
    for colors in combinations(available, to_take):
        delta = ChipSet()
        for col in colors:
            delta.change(col, 1)
        moves.append(Move(MoveType.TAKE_DIFFERENT, delta=delta))
    return moves


def _take_same(board: Board, in_hand: int) -> list[Move]:
    if in_hand + 2 > MAX_CHIPS:
        return []
    moves = []
    for col in range(NUM_COLORS):
        if board.chips[col] >= TAKE_TWO_LIMIT:
            delta = ChipSet()
            delta.change(col, 2)
            moves.append(Move(MoveType.TAKE_SAME, delta=delta))
    return moves


def _reserve(board: Board, player: Player, in_hand: int) -> list[Move]:
    reserved = player.reserve.popcount() + player.num_secret_reserve
    gain_gold = board.chips[GOLD] > 0
    room_for_chip = not gain_gold or in_hand < MAX_CHIPS
    if reserved >= MAX_RESERVE or not room_for_chip:
        return []
    moves = []
    for card_id in board.cards:
        delta = ChipSet()
        delta.change(GOLD, int(gain_gold))
        moves.append(Move(MoveType.RESERVE, card_id=card_id, delta=delta))
    return moves


def _buy(player: Player, card_ids, move_type: MoveType) -> list[Move]:
    moves = []
    for card_id in card_ids:
        delta = player.affords(card_id)
        if delta is not None:
            moves.append(Move(move_type, card_id=card_id, delta=delta))
    return moves


def generate_moves(board: Board) -> list[Move]:
    """All moves for the current player; a null move when nothing else is legal."""
    player = board.players[board.curr_player]
    in_hand = player.chips.total()
    moves = [
        *_take_different(board, in_hand),
        *_take_same(board, in_hand),
        *_reserve(board, player, in_hand),
        *_buy(player, board.cards, MoveType.BUY_FACEUP),
        *_buy(player, player.reserve, MoveType.BUY_RESERVE),
    ]
    if not moves:
        moves.append(Move(MoveType.TAKE_DIFFERENT))
    return moves