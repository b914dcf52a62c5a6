"""Immutable token sequences with constant-time suffixes.

Parsers consume a prefix of their input and hand the suffix on as leftover.
Slicing a tuple copies it, which makes a long chain of single-token parses
quadratic; ``Runes`` instead shares one backing tuple and moves a start index.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import overload


@dataclass(frozen=True, slots=True, eq=False)
class Runes[T]:
    """A logical suffix ``items[start:]`` of a backing tuple."""

    items: tuple[T, ...]
    start: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.start <= len(self.items):
            raise ValueError(
                f"start must be in [0, {len(self.items)}], got {self.start}",
            )

    def __len__(self) -> int:
        return len(self.items) - self.start

    def __bool__(self) -> bool:
        return self.start < len(self.items)

    def __iter__(self) -> Iterator[T]:
        for index in range(self.start, len(self.items)):
            yield self.items[index]

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        if isinstance(index, slice):
            return self.to_tuple()[index]
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("rune index out of range")
        return self.items[self.start + index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Runes):
            return len(self) == len(other) and all(
                a == b for a, b in zip(self, other)
            )
        if isinstance(other, (tuple, list)):
            return self.to_tuple() == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __repr__(self) -> str:
        return f"runes({list(self)!r})"

    def first(self) -> T:
        """Return the first rune. Raises ``IndexError`` on an empty view."""
        if not self:
            raise IndexError("first() of empty runes")
        return self.items[self.start]

    def rest(self, count: int = 1) -> Runes[T]:
        """Return the view without its first *count* runes."""
        if count < 0 or count > len(self):
            raise ValueError(f"cannot drop {count} of {len(self)} runes")
        return Runes(self.items, self.start + count)

    def to_tuple(self) -> tuple[T, ...]:
        return self.items[self.start:]


def runes[T](tokens: Iterable[T] | Runes[T]) -> Runes[T]:
    """Build a view over *tokens*, reusing it when it already is one."""
    if isinstance(tokens, Runes):
        return tokens
    return Runes(tuple(tokens))
