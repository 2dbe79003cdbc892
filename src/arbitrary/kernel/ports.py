"""Port protocols for the generator kernel."""

from __future__ import annotations

from typing import Protocol


class RandomSource(Protocol):
    """Deterministic pseudo-random source.

    This is the only mutable dependency of the kernel: every draw advances
    its internal state, so one instance must not be shared across
    concurrently running generators.
    """

    def int63(self) -> int:
        """Return a non-negative integer in [0, 2**63)."""
        ...
