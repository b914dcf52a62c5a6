"""Alternating-run lists ("zebras").

A zebra splits a sequence into white (unmatched) and black (matched) runs,
always starting and ending with white::

    white, black, white, black, ..., white

Chains can be as long as the number of siblings in a block of content, so
every operation here walks the chain with a loop instead of recursing.
"""
from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, eq=False)
class ZebraTail[W]:
    """The last stripe of a zebra: a single white run."""

    white: W

    def __eq__(self, other: object) -> bool:
        return _zebras_equal(self, other)

    def __hash__(self) -> int:
        return _zebra_hash(self)


@dataclass(frozen=True, slots=True, eq=False)
class ZebraBody[W, B]:
    """A white run, the black run after it, and the rest of the zebra."""

    white: W
    black: B
    rest: Zebra[W, B]

    def __eq__(self, other: object) -> bool:
        return _zebras_equal(self, other)

    def __hash__(self) -> int:
        return _zebra_hash(self)

    def __repr__(self) -> str:
        whites = unmatched_runs(self)
        blacks = matched_runs(self)
        return f"rebuild({whites!r}, {blacks!r})"


type Zebra[W, B] = ZebraTail[W] | ZebraBody[W, B]


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def start[W, B](white: W) -> Zebra[W, B]:
    """Build a one-stripe zebra."""
    return ZebraTail(white)


def extend[W, B](white: W, black: B, rest: Zebra[W, B]) -> Zebra[W, B]:
    """Prepend a white and a black run to *rest*."""
    return ZebraBody(white, black, rest)


def rebuild[W, B](whites: Sequence[W], blacks: Sequence[B]) -> Zebra[W, B]:
    """Thread projected runs back into a zebra.

    Inverse of (``unmatched_runs``, ``matched_runs``). Raises ``ValueError``
    unless there is exactly one more white run than black runs.
    """
    if len(whites) != len(blacks) + 1:
        raise ValueError(
            f"need one more white run than black runs, got "
            f"{len(whites)} white and {len(blacks)} black",
        )
    zebra: Zebra[W, B] = ZebraTail(whites[-1])
    for index in range(len(blacks) - 1, -1, -1):
        zebra = ZebraBody(whites[index], blacks[index], zebra)
    return zebra


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


def reverse[W, B](zebra: Zebra[W, B]) -> Zebra[W, B]:
    """Reverse the order of stripes.

    Every black run stays between the same two white runs, so
    ``reverse(w1, b1, w2, b2, w3)`` is ``(w3, b2, w2, b1, w1)``.
    """
    if isinstance(zebra, ZebraTail):
        return zebra
    output: Zebra[W, B] = ZebraTail(zebra.white)
    pending_black = zebra.black
    leftover = zebra.rest
    while isinstance(leftover, ZebraBody):
        output = ZebraBody(leftover.white, pending_black, output)
        pending_black = leftover.black
        leftover = leftover.rest
    return ZebraBody(leftover.white, pending_black, output)


def unmatched_runs[W, B](zebra: Zebra[W, B]) -> list[W]:
    """All white runs, left to right."""
    output: list[W] = []
    leftover = zebra
    while isinstance(leftover, ZebraBody):
        output.append(leftover.white)
        leftover = leftover.rest
    output.append(leftover.white)
    return output


def matched_runs[W, B](zebra: Zebra[W, B]) -> list[B]:
    """All black runs, left to right."""
    output: list[B] = []
    leftover = zebra
    while isinstance(leftover, ZebraBody):
        output.append(leftover.black)
        leftover = leftover.rest
    return output


def stripes[W, B](zebra: Zebra[W, B]) -> Iterator[tuple[bool, W | B]]:
    """Yield ``(is_matched, run)`` for every stripe in order."""
    leftover = zebra
    while isinstance(leftover, ZebraBody):
        yield False, leftover.white
        yield True, leftover.black
        leftover = leftover.rest
    yield False, leftover.white


def _zebras_equal(left: object, right: object) -> bool:
    if not isinstance(right, (ZebraTail, ZebraBody)):
        return NotImplemented
    while isinstance(left, ZebraBody) and isinstance(right, ZebraBody):
        if left.white != right.white or left.black != right.black:
            return False
        left = left.rest
        right = right.rest
    if isinstance(left, ZebraTail) and isinstance(right, ZebraTail):
        return left.white == right.white
    return False


def _zebra_hash(zebra: Zebra[object, object]) -> int:
    return hash(tuple(run for _, run in stripes(zebra)))
