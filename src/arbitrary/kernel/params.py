"""Generation parameters threaded through every generator call."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field, replace

from arbitrary.kernel.ports import RandomSource

DEFAULT_SIZE = 100
DEFAULT_MAX_SHRINK_COUNT = 1000

_INT63_BITS = 63
_UINT64_MASK = (1 << 64) - 1
_INT64_MIN = -(1 << 63)


class PyRandomSource:
    """RandomSource backed by the standard Mersenne Twister.

    Attributes:
        seed: The seed the source was created with, kept for reproduction.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def int63(self) -> int:
        return self._random.getrandbits(_INT63_BITS)

    def __repr__(self) -> str:
        return f"PyRandomSource(seed={self.seed})"


@dataclass(frozen=True)
class GenParameters:
    """Parameters for all generators.

    Attributes:
        size: Upper bound for the size of generated structures (lengths, magnitudes)
        max_shrink_count: Ceiling on the number of shrink steps a runner performs
        rng: The random source; the only mutable piece, shared by derived copies
    """

    size: int
    max_shrink_count: int
    rng: RandomSource = field(compare=False)

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"size must be non-negative, got {self.size}")
        if self.max_shrink_count < 0:
            raise ValueError(f"max_shrink_count must be non-negative, got {self.max_shrink_count}")

    def with_size(self, size: int) -> GenParameters:
        """Return a copy with a different size.

        The receiver is left untouched, so generators sharing a base
        configuration never observe each other's size overrides.
        """
        return replace(self, size=size)

    def with_seed(self, seed: int) -> GenParameters:
        """Return a copy drawing from a fresh source seeded with ``seed``."""
        return replace(self, rng=PyRandomSource(seed))

    def fork(self) -> GenParameters:
        """Return a copy with an independent source.

        The new seed is drawn from this source, so forking is itself
        reproducible. Use one fork per concurrently running sample sequence.
        """
        return self.with_seed(self.rng.int63())

    def next_bool(self) -> bool:
        """Create a random boolean from the low bit of one draw."""
        return self.rng.int63() & 1 == 0

    def next_int64(self) -> int:
        """Create a random signed 64-bit integer.

        Draws a magnitude, then a sign via next_bool(). A negative zero is
        folded onto -2**63 so both extremes of the range can occur.
        """
        magnitude = self.rng.int63()
        if self.next_bool():
            return -magnitude if magnitude else _INT64_MIN
        return magnitude

    def next_uint64(self) -> int:
        """Create a random unsigned 64-bit integer from two mixed draws."""
        first = self.rng.int63()
        second = self.rng.int63()
        return ((first << 1) ^ second) & _UINT64_MASK


def default_parameters() -> GenParameters:
    """Create default parameters with a source seeded from the current time.

    Not reproducible across calls. Callers that need reproducible sampling
    should use ``GenConfig(seed=...).to_parameters()`` or ``with_seed``.
    """
    return GenParameters(
        size=DEFAULT_SIZE,
        max_shrink_count=DEFAULT_MAX_SHRINK_COUNT,
        rng=PyRandomSource(time.time_ns()),
    )
