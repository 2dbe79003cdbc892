"""Shrink search - descend from a falsifying value to a minimal one."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from arbitrary.kernel import GenParameters, GenResult, Shrinker, no_shrinker

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ShrinkOutcome(Generic[T]):
    """
    The end point of a shrink search.

    Attributes:
        value: The smallest falsifying value found
        steps: Number of successful descents taken
        minimal: True if no candidate of value falsifies; False if the
            search stopped on the shrink budget instead
        error: Exception raised by the property on value, if that is how it failed
    """

    value: T
    steps: int
    minimal: bool
    error: BaseException | None = None


def shrink_search(
    value: T,
    prop: Callable[[T], bool],
    shrinker: Shrinker[T],
    *,
    sieve: Callable[[T], bool] | None = None,
    max_shrink_count: int = 1000,
    error: BaseException | None = None,
) -> ShrinkOutcome[T]:
    """Minimize a falsifying value.

    Walks the candidate stream of the current value and descends into the
    first candidate that still falsifies prop (and passes sieve). Repeats
    until no candidate falsifies or max_shrink_count descents were taken.
    A property falsifies a value when it returns False or raises.

    Args:
        value: A value known to falsify prop
        prop: The property under test
        shrinker: Produces simpler candidates for a value
        sieve: Optional acceptance filter; rejected candidates are skipped
        max_shrink_count: Ceiling on the number of descents
        error: The exception prop raised on value, if any

    Returns:
        ShrinkOutcome with the smallest falsifying value found
    """
    if max_shrink_count < 0:
        raise ValueError("max_shrink_count must be non-negative")

    current = value
    current_error = error
    steps = 0

    while steps < max_shrink_count:
        for candidate in shrinker(current):
            # A shrinker must never yield its input; skip it if one does.
            if candidate == current:
                continue
            if sieve is not None and not sieve(candidate):
                continue
            falsified, raised = _falsifies(prop, candidate)
            if falsified:
                current, current_error = candidate, raised
                steps += 1
                logger.debug("Shrink step %d: %r", steps, current)
                break
        else:
            logger.info("Shrinking finished after %d steps at %r", steps, current)
            return ShrinkOutcome(value=current, steps=steps, minimal=True, error=current_error)

    logger.info("Shrink budget of %d steps exhausted at %r", max_shrink_count, current)
    return ShrinkOutcome(value=current, steps=steps, minimal=False, error=current_error)


def shrink_result(
    result: GenResult[T],
    prop: Callable[[T], bool],
    params: GenParameters,
) -> ShrinkOutcome[T]:
    """Minimize the value of a generation result, using its own shrinker and sieve."""
    value, ok = result.retrieve()
    if not ok:
        raise ValueError("Cannot shrink a result without an acceptable value.")
    return shrink_search(
        value,  # type: ignore[arg-type]
        prop,
        result.shrinker or no_shrinker,
        sieve=result.sieve,
        max_shrink_count=params.max_shrink_count,
    )


def _falsifies(prop: Callable[[Any], bool], value: Any) -> tuple[bool, BaseException | None]:
    try:
        return not prop(value), None
    except Exception as exc:
        logger.debug("Property raised %r on %r", exc, value)
        return True, exc
