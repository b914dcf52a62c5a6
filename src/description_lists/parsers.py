"""Parser combinators over arbitrary token sequences.

A parser takes a ``Runes`` view and returns either ``None`` (no parse) or a
``Parsed`` holding an outcome and the leftover suffix. Failure is ordinary
control data: it stops a repetition, picks a lookahead branch or abandons a
rule, and never carries a position or a message.

Combinators are applied directly to their input, so ``parse_many(p, input)``
reads like the grammar it implements. To pass a combinator where a parser is
expected, close over it: ``lambda input: parse_many(p, input)``.

Choice is expressed only through negative lookahead
(``parse_this_but_not_that``); there is no ordered "A, else B" combinator.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from description_lists.runes import Runes
from description_lists.zebras import Zebra, extend, reverse, start

# ---------------------------------------------------------------------------
# Parse results
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Parsed[T, O]:
    """A successful parse. ``leftover`` is always a suffix of the input."""

    outcome: O
    leftover: Runes[T]


type Parse[T, O] = Parsed[T, O] | None
type Parser[T, O] = Callable[[Runes[T]], Parse[T, O]]

# Outcome of parsers whose only job is to be recognized (sunderers, lookahead).
type Nothing = dict[str, Any]


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


def parse_map[T, I, O](mapping: Callable[[I], O], parsed: Parse[T, I]) -> Parse[T, O]:
    """Apply *mapping* to the outcome of a successful parse. Parses are a functor."""
    if parsed is None:
        return None
    return Parsed(mapping(parsed.outcome), parsed.leftover)


def parse_matching[T](is_matching: Callable[[T], bool], input: Runes[T]) -> Parse[T, T]:
    """Parse one rune satisfying *is_matching*. Fails on empty input."""
    if input and is_matching(input.first()):
        return Parsed(input.first(), input.rest())
    return None


def parse_anything[T](input: Runes[T]) -> Parse[T, T]:
    """Parse any single rune."""
    return parse_matching(lambda _rune: True, input)


def parse_many[T, O](parse_tidbit: Parser[T, O], input: Runes[T]) -> Parsed[T, list[O]]:
    """Parse the same thing zero or more times. Never fails.

    Repetition ends at the first failure, or at a success that consumed
    nothing (its outcome is dropped), so a zero-width tidbit cannot spin.
    """
    outcome: list[O] = []
    leftover = input
    while True:
        parsed = parse_tidbit(leftover)
        if parsed is None or len(parsed.leftover) >= len(leftover):
            break
        outcome.append(parsed.outcome)
        leftover = parsed.leftover
    return Parsed(outcome, leftover)


def parse_some[T, O](parse_tidbit: Parser[T, O], input: Runes[T]) -> Parse[T, list[O]]:
    """Parse the same thing one or more times."""
    parsed = parse_many(parse_tidbit, input)
    if not parsed.outcome:
        return None
    return parsed


def parse_this_but_not_that[T, O](
    parse_this: Parser[T, O],
    parse_that: Parser[T, Any],
    input: Runes[T],
) -> Parse[T, O]:
    """Parse something, so far as it cannot be parsed by the other parser.

    For example, parse any character but a newline; repeat that and you have
    parsed a line.
    """
    if parse_that(input) is not None:
        return None
    return parse_this(input)


def parse_one_then_other[T, A, B](
    parse_one: Parser[T, A],
    parse_other: Parser[T, B],
    input: Runes[T],
) -> Parse[T, tuple[A, B]]:
    """Parse one thing, then the other, keeping both outcomes."""
    parsed_one = parse_one(input)
    if parsed_one is None:
        return None
    parsed_other = parse_other(parsed_one.leftover)
    if parsed_other is None:
        return None
    return Parsed((parsed_one.outcome, parsed_other.outcome), parsed_other.leftover)


def parse_whole_input[T, O](parser: Parser[T, O], input: Runes[T]) -> Parse[T, O]:
    """Parse with *parser*, failing unless it consumes every rune."""
    parsed = parser(input)
    if parsed is None or parsed.leftover:
        return None
    return parsed


def parse_some_sundered_tidbits[T, O](
    parse_sunderer: Parser[T, Any],
    parse_tidbit: Parser[T, O],
    input: Runes[T],
) -> Parse[T, list[O]]:
    """Parse one or more tidbits separated by sunderers.

    A tidbit may be a word and a sunderer whitespace; the outcome is then the
    words without the whitespace. A trailing sunderer with no tidbit after it
    is left over.
    """

    def parse_sunderer_then_tidbit(input: Runes[T]) -> Parse[T, O]:
        return parse_map(
            lambda pair: pair[1],
            parse_one_then_other(parse_sunderer, parse_tidbit, input),
        )

    parsed_first = parse_tidbit(input)
    if parsed_first is None:
        return None
    parsed_others = parse_many(parse_sunderer_then_tidbit, parsed_first.leftover)
    return Parsed([parsed_first.outcome, *parsed_others.outcome], parsed_others.leftover)


# ---------------------------------------------------------------------------
# Alternating runs
# ---------------------------------------------------------------------------


def parse_zebra[T, W, B](
    parse_white: Parser[T, W],
    parse_black: Parser[T, B],
    input: Runes[T],
) -> Parse[T, Zebra[W, B]]:
    """Parse alternating unmatched (white) and matched (black) runs.

    The input must open with a white run; after that, black-then-white pairs
    are parsed until a pair fails. A failing pair consumes nothing, so the
    leftover is whatever follows the last white run.

    Each pair is prepended to the chain parsed so far, which builds it back
    to front in linear time; one ``reverse`` restores the order.
    """
    parsed_white = parse_white(input)
    if parsed_white is None:
        return None
    parsed_pairs = parse_many(
        lambda input: parse_one_then_other(parse_black, parse_white, input),
        parsed_white.leftover,
    )
    backwards: Zebra[W, B] = start(parsed_white.outcome)
    for black, white in parsed_pairs.outcome:
        backwards = extend(white, black, backwards)
    return Parsed(reverse(backwards), parsed_pairs.leftover)
