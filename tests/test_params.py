"""Tests for GenParameters and its primitive draws."""

from dataclasses import FrozenInstanceError

import pytest

from arbitrary import GenParameters, PyRandomSource, default_parameters
from fakes import ScriptedSource, make_params


def test_with_size_returns_copy() -> None:
    base = make_params(size=10)
    resized = base.with_size(3)

    assert resized.size == 3
    assert base.size == 10
    assert resized.max_shrink_count == base.max_shrink_count
    assert resized.rng is base.rng


def test_with_size_rejects_negative() -> None:
    with pytest.raises(ValueError, match="size must be non-negative"):
        make_params().with_size(-1)


def test_params_are_frozen() -> None:
    params = make_params()
    with pytest.raises(FrozenInstanceError):
        params.size = 5  # type: ignore[misc]


def test_negative_shrink_count_rejected() -> None:
    with pytest.raises(ValueError, match="max_shrink_count"):
        GenParameters(size=1, max_shrink_count=-1, rng=ScriptedSource([]))


def test_next_bool_uses_low_bit() -> None:
    params = make_params([0, 1, 2, 7])
    assert [params.next_bool() for _ in range(4)] == [True, False, True, False]


def test_next_int64_negative_when_bool_true() -> None:
    # magnitude 5, then an even draw makes next_bool() True
    assert make_params([5, 0]).next_int64() == -5


def test_next_int64_positive_when_bool_false() -> None:
    assert make_params([5, 1]).next_int64() == 5


def test_next_int64_reaches_both_extremes() -> None:
    top = (1 << 63) - 1
    assert make_params([top, 1]).next_int64() == top
    assert make_params([0, 0]).next_int64() == -(1 << 63)
    assert make_params([0, 1]).next_int64() == 0


def test_next_uint64_mixes_two_draws() -> None:
    source = ScriptedSource([3, 5])
    params = GenParameters(size=1, max_shrink_count=1, rng=source)

    assert params.next_uint64() == (3 << 1) ^ 5
    assert source.consumed == 2


def test_next_uint64_stays_in_range() -> None:
    top = (1 << 63) - 1
    value = make_params([top, 0]).next_uint64()
    assert value == ((top << 1) ^ 0) & ((1 << 64) - 1)
    assert 0 <= value < (1 << 64)


def test_default_parameters() -> None:
    params = default_parameters()
    assert params.size == 100
    assert params.max_shrink_count == 1000
    assert isinstance(params.rng, PyRandomSource)


def test_with_seed_is_reproducible() -> None:
    base = default_parameters()
    first = base.with_seed(42)
    second = base.with_seed(42)

    assert [first.next_uint64() for _ in range(5)] == [second.next_uint64() for _ in range(5)]


def test_fork_is_independent_and_reproducible() -> None:
    a = default_parameters().with_seed(7)
    b = default_parameters().with_seed(7)

    fork_a = a.fork()
    fork_b = b.fork()

    assert fork_a.rng is not a.rng
    assert fork_a.rng.seed == fork_b.rng.seed  # type: ignore[attr-defined]
    assert fork_a.next_int64() == fork_b.next_int64()
