"""Minimax search for the best move."""

from __future__ import annotations

import random

from onyx.board import Board
from onyx.chips import ENDGAME_POINTS, INFIN, MINIMAX_DEPTH
from onyx.move import Move
from onyx.movegen import generate_moves
from onyx.score import Score

_WORST = -INFIN * ENDGAME_POINTS * 2


class Evaluator:
    """Searches a board to a fixed depth; counts the positions it visits."""

    def __init__(
        self,
        board: Board,
        depth: int = MINIMAX_DEPTH,
        rng: random.Random | None = None,
    ) -> None:
        if depth < 0:
            raise ValueError(f"search depth must not be negative: {depth}")
        self.board = board
        self.depth = depth
        self.rng = rng if rng is not None else random.Random()
        self.num_positions = 0

    def best_move(self) -> Move:
        """The current player's best move, chosen among shuffled candidates."""
        moves = generate_moves(self.board)
        self.rng.shuffle(moves)

        player = self.board.curr_player
        best_score = _WORST
        best = moves[0]
        for move in moves:
            self.board.make_move(move)
            value = self.minimax(self.depth).pov(player)
            if value > best_score:
                best_score = value
                best = move
            self.board.undo_move(move)
        return best

    def minimax(self, depth: int) -> Score:
        """The score reached with best play by everyone for `depth` more plies."""
        self.num_positions += 1
        board = self.board
        if not depth or board.is_game_over():
            return board.static_eval()

        player = board.curr_player
        best = Score(board.num_players)
        best_pov = _WORST
        for move in generate_moves(board):
            board.make_move(move)
            score = self.minimax(depth - 1)
            pov = score.pov(player)
            if pov > best_pov:
                best = score
                best_pov = pov
            board.undo_move(move)
        return best