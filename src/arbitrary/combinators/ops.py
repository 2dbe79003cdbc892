"""Combinator primitives over several generators: combine, sequence, one_of."""

# Combinators satisfy the following algebraic laws:
#
# 1. Identity: Gen.const(x).flat_map(f, t) == f(x)
#    Lifting a value and binding it is the same as applying the continuation
#
# 2. Associativity: g.flat_map(f, t).flat_map(h, u) == g.flat_map(lambda x: f(x).flat_map(h, u), u)
#    Chaining continuations is associative
#
# 3. Map fusion: g.map(f).map(h) == g.map(lambda x: h(f(x)))
#    Values agree; neither side carries a shrinker
#
# 4. Sieve conjunction: g.such_that(p).such_that(q) accepts v iff p(v) and q(v)
#
# 5. Combine is order-sensitive: combine(a, b) consumes randomness for a before b
#    Swapping the arguments changes the sample drawn from a given seed


from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from arbitrary.kernel import Gen, GenParameters, GenResult, Shrink, combine_shrinkers

logger = logging.getLogger(__name__)


def combine(*gens: Gen[Any]) -> Gen[tuple[Any, ...]]:
    """Create a generator from a list of generators.

    Semantics:
        - Invoke every generator in order with the same parameters
        - Concatenate labels in invocation order
        - Fail as soon as any generator fails, keeping the labels collected
          up to and including the failing one
        - On success, yield a tuple with one value per generator
        - Shrink one position at a time via combine_shrinkers
        - Accept a tuple only if every component sieve accepts its value

    Args:
        gens: Generators to combine, in the order their randomness is drawn.

    Returns:
        Gen[tuple[Any, ...]]: A new generator yielding fixed-length tuples.
    """
    def _run(params: GenParameters) -> GenResult[tuple[Any, ...]]:
        labels: tuple[str, ...] = ()
        values: list[Any] = []
        shrinkers = []
        sieves = []

        for i, gen in enumerate(gens):
            result = gen(params)
            labels = labels + result.labels
            value, ok = result.retrieve()
            if not ok:
                logger.debug("combine: generator %d of %d failed", i, len(gens))
                return GenResult.failed(tuple, labels)
            values.append(value)
            shrinkers.append(result.shrinker)
            sieves.append(result.sieve)

        def sieve(candidate: tuple[Any, ...]) -> bool:
            return all(
                check is None or check(component)
                for check, component in zip(sieves, candidate)
            )

        return GenResult(
            value=tuple(values),
            result_type=tuple,
            labels=labels,
            sieve=sieve,
            shrinker=combine_shrinkers(*shrinkers),
        )

    return Gen(_run)


def sequence(
    gens: Iterable[Gen[Any]],
    result_type: Callable[[Iterable[Any]], Any] = list,
) -> Gen[Any]:
    """Combine generators and collect their values into result_type.

    Unlike map(), the combined sieve and shrinker are kept: converting a
    tuple to a container and back loses nothing, so candidates are shrunk
    as tuples and converted on the way out.

    Args:
        gens: Generators to combine, in order.
        result_type: Container constructor taking an iterable (list, tuple, ...).
    """
    combined = combine(*gens)

    def _run(params: GenParameters) -> GenResult[Any]:
        result = combined(params)
        declared = result_type if isinstance(result_type, type) else None
        if not result.has_value:
            return GenResult.failed(declared, result.labels)

        inner_sieve = result.sieve
        inner_shrinker = result.shrinker

        def sieve(value: Any) -> bool:
            return inner_sieve is None or inner_sieve(tuple(value))

        def shrinker(value: Any) -> Shrink[Any]:
            if inner_shrinker is None:
                return Shrink()
            return Shrink(result_type(c) for c in inner_shrinker(tuple(value)))

        return GenResult(
            value=result_type(result.value),  # type: ignore[arg-type]
            result_type=declared,
            labels=result.labels,
            sieve=sieve,
            shrinker=shrinker,
        )

    return Gen(_run)


def one_of(*gens: Gen[Any]) -> Gen[Any]:
    """Pick one of the generators at random and delegate to it.

    The chosen generator's result is returned as is, like flat_map.
    Exactly one draw is taken from the random source for the choice.
    """
    if not gens:
        raise ValueError("one_of requires at least one generator")
    choices: Sequence[Gen[Any]] = tuple(gens)

    def _run(params: GenParameters) -> GenResult[Any]:
        index = params.rng.int63() % len(choices)
        return choices[index](params)

    return Gen(_run)
