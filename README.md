# onyx

`onyx` is a game-playing agent for Splendor. It reads one game position from
standard input and prints the move it chooses to standard output. It picks
that move with a fixed-depth minimax search. The search scores each position
from the point of view of the player who is choosing. That score is the
player's own value times the number of players, minus the sum of everyone's
values.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Usage

```
onyx < position.txt
onyx --depth 2 --seed 7 < position.txt
```

Options:

- `--depth N` sets the search depth, in plies after the candidate move. The
  default is 4. A negative depth is rejected.
- `--seed N` seeds the shuffle of the candidate moves. The search visits the
  candidates in that shuffled order. When several moves score equally, the
  first one visited is kept, so a fixed seed gives a repeatable choice.

### Input

The input is a list of whitespace-separated integers, in this order:

1. The number of players (1 to 4), the player to move (1-based), and the
   round number. The round number is not used.
2. The chips on the board: six counts, one each for red, green, blue, white,
   black and gold.
3. The three card levels. Each level gives the number of face-down cards,
   which is not used, and then four face-up card ids (1 to 90). An id of `0`
   marks an empty slot.
4. The nobles: a count, then that many noble ids (1 to 10).
5. Then, for each player:
   - six chip counts;
   - a card count, then that many card ids;
   - a reserve count, then that many card ids, where a non-positive id stands
     for a card reserved face down;
   - a noble count, then that many noble ids. Each noble is worth 3 points.

If the input is malformed, `onyx` prints an error on standard error and exits
with status 1. Malformed input means it ends early, holds something that is
not an integer, gives an unknown card id or a player count out of range, or
names a player to move who is not in the game.

### Output

The chosen move is printed on one line as protocol tokens. Each token is
followed by a space.

| Move                           | Tokens                    |
|--------------------------------|---------------------------|
| take chips of different colors | `1 <count> <color> ...`   |
| take two chips of one color    | `2 <color>`               |
| reserve a card                 | `3 <card id>`             |
| buy a card                     | `4 <card id>`             |

A buy is always printed with type `4`, whether the card is face up or in the
player's reserve. Colors are numbered 0 to 4: red, green, blue, white, black.
The player may have no legal move at all. In that case the output is an empty
take, `1 0`.

When it finishes, the agent writes a one-line summary to standard error, for
example `kibitz 123k poziții evaluate`. This is the number of positions it
examined, rounded down to thousands (`k`) or millions (`M`).

## Library use

You can also drive the search from Python:

```python
import random

from onyx.board import Board, parse_tokens
from onyx.evaluator import Evaluator

with open("position.txt") as fh:
    board = Board.read(parse_tokens(fh.read()))

evaluator = Evaluator(board, depth=4, rng=random.Random(7))
move = evaluator.best_move()
print(board.translate_move(move))
print(evaluator.num_positions)
```

The package is split into these modules:

- `onyx.board`: `Board` holds the game state. `Board.make_move` and
  `Board.undo_move` apply a move and take it back. `Board.static_eval` scores
  the position, and `Board.log_state` dumps it to standard error.
- `onyx.movegen`: `generate_moves(board)` lists every legal move for the
  player to move.
- `onyx.evaluator`: `Evaluator` runs the minimax search.
- `onyx.player`: `Player` holds one player's chips, card bonuses, reserve and
  points. `Player.affords` returns the chips a purchase would cost, or `None`
  if the player cannot afford the card.
- `onyx.catalog`: `get_card` and `get_noble` look up the fixed cards and
  nobles.
- `onyx.move`: `Move` and `MoveType`.
- `onyx.score`: `Score`, one value per player.
- `onyx.chips`: `ChipSet` and the game constants.
- `onyx.bitset`: `BitSet`.
- `onyx.log`: colored logging to standard error.

## What it does not do

`onyx` chooses one move for one position and then exits. It does not run a
whole game, keep state between runs, or talk to a game server. Nobles are read
only for their points. A noble is never awarded during the search.