"""Tests for description_lists.zebras."""
import pytest

from description_lists.zebras import (
    ZebraBody,
    ZebraTail,
    extend,
    matched_runs,
    rebuild,
    reverse,
    start,
    stripes,
    unmatched_runs,
)

SAMPLES = [
    start(1),
    extend(1, 2, start(3)),
    extend(1, 2, extend(3, 4, start(5))),
    extend("a", "b", extend("c", "d", extend("e", "f", start("g")))),
]


def long_zebra(stripe_pairs: int):
    zebra = start(0)
    for n in range(stripe_pairs):
        zebra = extend(2 * n + 2, 2 * n + 1, zebra)
    return zebra


class TestConstruction:
    def test_start_is_tail(self) -> None:
        assert start(1) == ZebraTail(1)

    def test_extend_is_body(self) -> None:
        assert extend(1, 2, start(3)) == ZebraBody(1, 2, ZebraTail(3))

    def test_tail_differs_from_body(self) -> None:
        assert start(1) != extend(1, 2, start(3))
        assert extend(1, 2, start(3)) != start(1)

    def test_hashable_when_runs_are(self) -> None:
        assert hash(extend(1, 2, start(3))) == hash(extend(1, 2, start(3)))


class TestReverse:
    def test_lonely_tail(self) -> None:
        assert reverse(start(1)) == start(1)

    def test_three_stripes(self) -> None:
        assert reverse(extend(1, 2, start(3))) == extend(3, 2, start(1))

    def test_five_stripes(self) -> None:
        assert reverse(extend(1, 2, extend(3, 4, start(5)))) == extend(
            5, 4, extend(3, 2, start(1)),
        )

    def test_twice_is_identity(self) -> None:
        for zebra in SAMPLES:
            assert reverse(reverse(zebra)) == zebra

    def test_long_chain(self) -> None:
        zebra = long_zebra(50_000)
        backwards = reverse(zebra)
        assert unmatched_runs(backwards) == unmatched_runs(zebra)[::-1]
        assert reverse(backwards) == zebra


class TestProjections:
    def test_unmatched_of_tail(self) -> None:
        assert unmatched_runs(start(1)) == [1]

    def test_unmatched_of_three_stripes(self) -> None:
        assert unmatched_runs(extend(1, 2, start(3))) == [1, 3]

    def test_matched_of_tail(self) -> None:
        assert matched_runs(start(1)) == []

    def test_matched_of_three_stripes(self) -> None:
        assert matched_runs(extend(1, 2, start(3))) == [2]

    def test_one_more_unmatched_than_matched(self) -> None:
        for zebra in SAMPLES:
            assert len(unmatched_runs(zebra)) == len(matched_runs(zebra)) + 1

    def test_stripes_interleave(self) -> None:
        assert list(stripes(extend(1, 2, start(3)))) == [
            (False, 1), (True, 2), (False, 3),
        ]


class TestRebuild:
    def test_inverts_projections(self) -> None:
        for zebra in SAMPLES:
            assert rebuild(unmatched_runs(zebra), matched_runs(zebra)) == zebra

    def test_rejects_mismatched_runs(self) -> None:
        with pytest.raises(ValueError, match="one more white run"):
            rebuild([1, 3], [2, 4])

    def test_rejects_empty(self) -> None:
        with pytest.raises(ValueError):
            rebuild([], [])
