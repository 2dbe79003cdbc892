"""Shrinkers - lazy streams of simpler candidate values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from itertools import islice
from typing import Any, Generic, TypeVar

T = TypeVar("T")

# A shrinker maps a value to a finite, lazy sequence of simpler candidates.
# It never yields its own input; an empty sequence means "cannot simplify".
Shrinker = Callable[[T], Iterable[T]]


class Shrink(Generic[T]):
    """A single-pass stream of shrink candidates.

    Wraps any iterable so candidate streams can be filtered and mixed
    without materializing them.
    """

    def __init__(self, candidates: Iterable[T] = ()) -> None:
        self._candidates: Iterator[T] = iter(candidates)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return next(self._candidates)

    def filter(self, predicate: Callable[[T], bool]) -> Shrink[T]:
        """Keep only candidates accepted by predicate (e.g. a sieve)."""
        return Shrink(c for c in self._candidates if predicate(c))

    def interleave(self, other: Iterable[T]) -> Shrink[T]:
        """Alternate candidates from this stream and other until both run dry."""

        def _mix() -> Iterator[T]:
            streams = [self._candidates, iter(other)]
            while streams:
                for stream in list(streams):
                    try:
                        yield next(stream)
                    except StopIteration:
                        streams.remove(stream)

        return Shrink(_mix())

    def take(self, count: int) -> Shrink[T]:
        return Shrink(islice(self._candidates, count))

    def all(self) -> list[T]:
        """Drain the stream into a list."""
        return list(self._candidates)


def no_shrinker(value: Any) -> Shrink[Any]:
    """Canonical no-op shrinker: yields nothing for any input."""
    _ = value
    return Shrink()


def combine_shrinkers(*shrinkers: Shrinker[Any] | None) -> Shrinker[tuple[Any, ...]]:
    """Combine per-position shrinkers into a shrinker over tuples.

    Each candidate differs from the input in exactly one position. Position
    0's candidates come first, then position 1's, and so on. Positions
    without a shrinker are never altered.
    """

    def shrink(value: tuple[Any, ...]) -> Shrink[tuple[Any, ...]]:
        values = tuple(value)

        def _candidates() -> Iterator[tuple[Any, ...]]:
            for i, shrinker in enumerate(shrinkers):
                if shrinker is None:
                    continue
                for candidate in shrinker(values[i]):
                    yield values[:i] + (candidate,) + values[i + 1:]

        return Shrink(_candidates())

    return shrink
