"""Command line entry: read a position from stdin, print the chosen move."""

from __future__ import annotations

import argparse
import random
import sys

from onyx import log
from onyx.board import Board, parse_tokens
from onyx.chips import MINIMAX_DEPTH
from onyx.evaluator import Evaluator


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="onyx", description="Choose a move for the position read from stdin."
    )
    parser.add_argument("--depth", type=int, default=MINIMAX_DEPTH,
                        help="search depth in plies after the first move")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for shuffling the candidate moves")
    args = parser.parse_args(argv)

    try:
        board = Board.read(parse_tokens(sys.stdin.read()))
        evaluator = Evaluator(board, depth=args.depth, rng=random.Random(args.seed))
    except (ValueError, KeyError) as exc:
        log.error(f"invalid input: {exc}")
        return 1

    move = evaluator.best_move()
    print("".join(f"{token} " for token in board.translate_move(move)))
    log.report_positions(evaluator.num_positions)
    return 0


if __name__ == "__main__":
    sys.exit(main())