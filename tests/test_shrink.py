"""Tests for shrink streams and shrinker composition."""

from arbitrary import Shrink, combine_shrinkers, no_shrinker
from fakes import shrink_int


def test_no_shrinker_is_empty() -> None:
    assert list(no_shrinker(42)) == []
    assert list(no_shrinker(None)) == []


def test_shrinker_never_yields_input() -> None:
    for value in [-17, -1, 0, 1, 2, 10, 1000]:
        assert value not in list(shrink_int(value))


def test_shrink_is_lazy() -> None:
    produced = []

    def candidates():
        for i in range(100):
            produced.append(i)
            yield i

    stream = Shrink(candidates())
    assert next(stream) == 0
    assert produced == [0]


def test_shrink_filter() -> None:
    assert Shrink(range(10)).filter(lambda v: v % 3 == 0).all() == [0, 3, 6, 9]


def test_shrink_interleave() -> None:
    mixed = Shrink([1, 2, 3, 4]).interleave(["a", "b"]).all()
    assert mixed == [1, "a", 2, "b", 3, 4]


def test_shrink_take() -> None:
    assert Shrink(iter(range(1000))).take(3).all() == [0, 1, 2]


def test_combined_shrinker_isolates_positions() -> None:
    shrinker = combine_shrinkers(shrink_int, shrink_int, shrink_int)
    value = (8, 5, -6)

    candidates = list(shrinker(value))
    assert candidates
    assert value not in candidates
    for candidate in candidates:
        changed = [i for i in range(3) if candidate[i] != value[i]]
        assert len(changed) == 1


def test_combined_shrinker_orders_by_position() -> None:
    shrinker = combine_shrinkers(shrink_int, shrink_int)
    candidates = list(shrinker((2, 3)))

    assert candidates == [(0, 3), (1, 3), (2, 0), (2, 2)]


def test_combined_shrinker_skips_missing_shrinkers() -> None:
    shrinker = combine_shrinkers(None, shrink_int, no_shrinker)
    candidates = list(shrinker(("keep", 2, "also")))
    assert candidates == [("keep", 0, "also"), ("keep", 1, "also")]


def test_combined_shrinker_accepts_lists() -> None:
    shrinker = combine_shrinkers(shrink_int)
    assert list(shrinker([1])) == [(0,)]
