"""Game constants, coloured chip rendering and the ChipSet multiset of chips."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

MAX_PLAYERS = 4

NUM_COLORS = 5
GOLD = NUM_COLORS
NUM_SLOTS = NUM_COLORS + 1

MAX_CHIPS = 10
MAX_TAKE = 3
TAKE_TWO_LIMIT = 4

NUM_CARDS = 90
NUM_CARD_LEVELS = 3
NUM_FACE_UP_CARDS_PER_LEVEL = 4
MAX_ID_PER_LEVEL = (0, 40, 70, 90)

MAX_RESERVE = 3

NUM_NOBLES = 10
NOBLE_POINTS = 3

ENDGAME_POINTS = 15

MAX_MOVES = 50

MINIMAX_DEPTH = 4
INFIN = 10_000_000

CHIP_CHAR = "◉"
CARD_CHAR = "🂠"

ANSI_DEFAULT = "\x1b[00m"
# red, green, blue, white, black, gold
CHIP_COLORS = (
    "\x1b[91m",
    "\x1b[92m",
    "\x1b[94m",
    "\x1b[97m",
    "\x1b[90m",
    "\x1b[93m",
)


def _color_repeat(symbol: str, color: int, count: int) -> str:
    sign = "-" if count < 0 else ""
    return f"{CHIP_COLORS[color]}{sign}{symbol * abs(count)}{ANSI_DEFAULT}"


def chip_str(color: int, count: int) -> str:
    """Render `count` chips of `color`, with a leading minus when negative."""
    return _color_repeat(CHIP_CHAR, color, count)


def card_str(color: int, count: int) -> str:
    """Render `count` cards of `color`, with a leading minus when negative."""
    return _color_repeat(CARD_CHAR, color, count)


class ChipSet:
    """Quantities for the five colours plus gold; quantities may be negative."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[int] = ()) -> None:
        given = [int(v) for v in values]
        if len(given) > NUM_SLOTS:
            raise ValueError(f"a ChipSet holds at most {NUM_SLOTS} values")
        self._values = given + [0] * (NUM_SLOTS - len(given))

    @classmethod
    def from_costs(cls, costs: Iterable[int]) -> ChipSet:
        """Build from exactly NUM_COLORS values; gold is set to zero."""
        values = list(costs)
        if len(values) != NUM_COLORS:
            raise ValueError(f"expected {NUM_COLORS} costs, got {len(values)}")
        return cls(values)

    @classmethod
    def read(cls, tokens: Iterator[int]) -> ChipSet:
        """Consume NUM_COLORS + 1 integers (colours then gold) from an iterator."""
        values = []
        for _ in range(NUM_SLOTS):
            try:
                values.append(int(next(tokens)))
            except StopIteration:
                raise ValueError("unexpected end of input while reading chips") from None
        return cls(values)

    @staticmethod
    def _check(index: int) -> None:
        if not 0 <= index < NUM_SLOTS:
            raise IndexError(f"chip index out of range: {index}")

    def __getitem__(self, index: int) -> int:
        self._check(index)
        return self._values[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChipSet):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"ChipSet({self._values!r})"

    def change(self, index: int, diff: int) -> None:
        self._check(index)
        self._values[index] += diff

    def clear(self) -> None:
        self._values = [0] * NUM_SLOTS

    def copy(self) -> ChipSet:
        return ChipSet(self._values)

    def total(self) -> int:
        return sum(self._values)

    def add(self, other: ChipSet) -> None:
        self._values = [a + b for a, b in zip(self._values, other._values)]

    def subtract(self, other: ChipSet) -> None:
        self._values = [a - b for a, b in zip(self._values, other._values)]

    def mask_no_gold(self) -> int:
        """Bit mask of the colours (not gold) with a non-zero quantity."""
        mask = 0
        for color, qty in enumerate(self._values[:NUM_COLORS]):
            if qty:
                mask |= 1 << color
        return mask

    def find_value(self, val: int) -> int:
        """Index of the first slot holding `val`."""
        try:
            return self._values.index(val)
        except ValueError:
            raise ValueError(f"no slot holds the value {val}") from None

    def count_value(self, val: int) -> int:
        return self._values.count(val)

    def _render(self, render) -> str:
        return " ".join(
            render(color, qty) for color, qty in enumerate(self._values) if qty
        )

    def __str__(self) -> str:
        return self._render(chip_str)

    def as_cards(self) -> str:
        return self._render(card_str)