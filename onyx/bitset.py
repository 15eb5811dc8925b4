"""A small set of bit positions, iterated from the highest bit down."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

CAPACITY = 128


class BitSet:
    """A set of integers in range(CAPACITY), stored as the bits of one int."""

    __slots__ = ("x",)

    def __init__(self, bits: Iterable[int] = ()) -> None:
        self.x = 0
        for b in bits:
            self.toggle(b)

    def clear(self) -> None:
        self.x = 0

    def __bool__(self) -> bool:
        return self.x != 0

    def toggle(self, b: int) -> None:
        if not 0 <= b < CAPACITY:
            raise ValueError(f"bit out of range: {b}")
        self.x ^= 1 << b

    def popcount(self) -> int:
        return bin(self.x).count("1")

    def __len__(self) -> int:
        return self.popcount()

    def pop_highest(self) -> int:
        """Remove and return the highest set bit."""
        if not self.x:
            raise KeyError("pop from an empty BitSet")
        msb = self.x.bit_length() - 1
        self.x ^= 1 << msb
        return msb

    def __iter__(self) -> Iterator[int]:
        rest = self.x
        while rest:
            msb = rest.bit_length() - 1
            yield msb
            rest ^= 1 << msb

    def __contains__(self, b: object) -> bool:
        return isinstance(b, int) and 0 <= b < CAPACITY and bool(self.x >> b & 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.x == other.x

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"BitSet({list(self)!r})"

    def copy(self) -> BitSet:
        clone = BitSet()
        clone.x = self.x
        return clone