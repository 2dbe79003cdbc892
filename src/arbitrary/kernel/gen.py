"""Gen - the generator combinator algebra."""

from __future__ import annotations

import inspect
import logging
import types
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from arbitrary.kernel.errors import GenUsageError
from arbitrary.kernel.params import GenParameters, default_parameters
from arbitrary.kernel.result import GenResult
from arbitrary.kernel.shrink import Shrinker, no_shrinker

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

# Implicit promotions accepted by type checkers for annotated parameters.
_PROMOTIONS: dict[type, tuple[type, ...]] = {
    float: (int,),
    complex: (int, float),
}


@dataclass(frozen=True)
class Gen(Generic[T]):
    """Generator of arbitrary values.

    A Gen is a pure function from GenParameters to a fresh GenResult.
    Combinators never mutate the parameters or results they receive from
    inner generators; they always build a new result.
    """

    _run: Callable[[GenParameters], GenResult[T]]

    def __call__(self, params: GenParameters) -> GenResult[T]:
        return self._run(params)

    def sample(self, params: GenParameters | None = None) -> tuple[T | None, bool]:
        """Generate a sample value.

        Depending on the state of the random source the generator might fail
        to provide a sample, or produce one its sieve rejects. Both cases
        return ``(None, False)``; there is no retry here.
        """
        if params is None:
            params = default_parameters()
        return self(params).retrieve()

    def with_label(self, label: str) -> Gen[T]:
        """Add a label to the generated result.

        Labels are informational only; they are usually used to report the
        arguments of a property check.
        """

        def run(params: GenParameters) -> GenResult[T]:
            return self(params).with_labels(label)

        return Gen(run)

    def such_that(self, predicate: Callable[[T], bool]) -> Gen[T]:
        """Create a derived generator by adding a sieve.

        The predicate is conjoined with any sieve already present, so filters
        stack. A very strict predicate causes many misses, which the runner
        will see as failed generation.

        Arity and annotations are checked here. A predicate without a return
        annotation can only be checked when the sieve is called, so a
        non-bool return surfaces then, during retrieval.

        Raises:
            GenUsageError: If predicate does not take exactly one parameter
                assignable from the generated type, or does not return bool.
        """
        hints = _check_unary("such_that", predicate, self)
        returns = hints.get("return", bool)
        if returns is not bool and returns is not Any:
            raise GenUsageError(
                f"has to be a func with one return value of bool, but is {returns!r}",
                "such_that",
                predicate,
            )

        def sieve(value: T) -> bool:
            accepted = predicate(value)
            if not isinstance(accepted, bool):
                raise GenUsageError(
                    f"has to return bool, but returned {type(accepted).__name__}",
                    "such_that",
                    predicate,
                )
            return accepted

        def run(params: GenParameters) -> GenResult[T]:
            result = self(params)
            previous = result.sieve
            if previous is None:
                combined = sieve
            else:
                def combined(value: T) -> bool:
                    return previous(value) and sieve(value)

            return GenResult(
                value=result.value,
                result_type=result.result_type,
                labels=result.labels,
                sieve=combined,
                shrinker=result.shrinker,
            )

        return Gen(run)

    def with_shrinker(self, shrinker: Shrinker[T] | None) -> Gen[T]:
        """Replace the shrinker; None installs the no-op shrinker."""
        replacement = no_shrinker if shrinker is None else shrinker

        def run(params: GenParameters) -> GenResult[T]:
            result = self(params)
            return GenResult(
                value=result.value,
                result_type=result.result_type,
                labels=result.labels,
                sieve=result.sieve,
                shrinker=replacement,
            )

        return Gen(run)

    def map(self, func: Callable[[T], U], result_type: type | None = None) -> Gen[U]:
        """Create a derived generator by mapping every generated value.

        The mapped result has no sieve and no shrinker: a shrinker cannot be
        carried through an arbitrary function. Attach one with with_shrinker().

        Args:
            func: Function of one parameter matching the generated value
            result_type: Declared type of mapped values; taken from the
                return annotation of func when omitted
        """
        hints = _check_unary("map", func, self)
        declared = result_type or _as_type(hints.get("return"))

        def run(params: GenParameters) -> GenResult[U]:
            result = self(params)
            value, ok = result.retrieve()
            if not ok:
                return GenResult.failed(declared, result.labels)
            return GenResult(
                value=func(value),  # type: ignore[arg-type]
                result_type=declared,
                labels=result.labels,
                shrinker=no_shrinker,
            )

        return Gen(run)

    def flat_map(self, func: Callable[[T], Gen[U]], result_type: type | None) -> Gen[U]:
        """Create a derived generator from a generator-producing function.

        On success the continuation's generator runs with the same
        parameters and its result is returned as is. On failure the result
        is tagged with result_type, since no continuation could run.
        """

        def run(params: GenParameters) -> GenResult[U]:
            result = self(params)
            value, ok = result.retrieve()
            if ok:
                return func(value)(params)  # type: ignore[arg-type]
            return GenResult.failed(result_type, result.labels)

        return Gen(run)

    def resize(self, size: int) -> Gen[T]:
        """Run this generator with the size parameter overridden."""
        if size < 0:
            raise ValueError("size must be non-negative")

        def run(params: GenParameters) -> GenResult[T]:
            return self(params.with_size(size))

        return Gen(run)

    @staticmethod
    def sized(factory: Callable[[int], Gen[T]]) -> Gen[T]:
        """Build a generator from the current size parameter."""

        def run(params: GenParameters) -> GenResult[T]:
            return factory(params.size)(params)

        return Gen(run)

    @staticmethod
    def const(value: T) -> Gen[T]:
        """Create a generator that always yields value and consumes no randomness."""
        value_type = type(value)

        def run(_: GenParameters) -> GenResult[T]:
            return GenResult(value=value, result_type=value_type, shrinker=no_shrinker)

        return Gen(run)

    @staticmethod
    def fail(result_type: type | None = None) -> Gen[Any]:
        """Create a generator that never yields a value."""

        def run(_: GenParameters) -> GenResult[Any]:
            return GenResult.failed(result_type)

        return Gen(run)


def _check_unary(combinator: str, func: Any, gen: Gen[Any]) -> dict[str, Any]:
    """Validate that func takes exactly one argument accepting gen's values.

    Returns the resolved type hints of func (empty if unavailable).
    """
    if not callable(func):
        raise GenUsageError(
            f"has to be a func, but is {type(func).__name__}", combinator, func
        )

    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Some builtins expose no signature; a class still returns itself.
        return {"return": func} if inspect.isclass(func) else {}

    parameters = list(signature.parameters.values())
    positional = [
        p for p in parameters
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    ]
    required = [p for p in positional if p.default is inspect.Parameter.empty]
    variadic = any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in parameters)
    keyword_only = [
        p for p in parameters
        if p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is inspect.Parameter.empty
    ]
    if keyword_only or len(required) > 1 or not (required or positional or variadic):
        raise GenUsageError(
            f"has to be a func with one param, but is {len(required) + len(keyword_only)}",
            combinator,
            func,
        )

    hints = _type_hints(func)
    if not positional:
        return hints
    expected = hints.get(positional[0].name)
    if expected is None:
        return hints

    logger.debug("Probing generator to check %s argument type", combinator)
    generated = _as_type(gen(default_parameters()).result_type)
    if generated is not None and not _assignable(generated, expected):
        raise GenUsageError(
            f"has to be a func with one param assignable to {generated!r}, but is {expected!r}",
            combinator,
            func,
        )
    return hints


def _type_hints(func: Any) -> dict[str, Any]:
    if inspect.isclass(func):
        target: Any = func.__init__
    elif inspect.isfunction(func) or inspect.ismethod(func):
        target = func
    else:
        target = type(func).__call__
    try:
        hints = dict(typing.get_type_hints(target))
    except Exception:
        # Unresolvable forward references; skip the type check.
        logger.debug("Could not resolve type hints of %r", func)
        return {"return": func} if inspect.isclass(func) else {}
    if inspect.isclass(func):
        hints["return"] = func
    return hints


def _as_type(hint: Any) -> type | None:
    if isinstance(hint, type):
        return hint
    origin = typing.get_origin(hint)
    return origin if isinstance(origin, type) else None


def _assignable(source: type, target: Any) -> bool:
    """Check whether values of type source may be passed where target is expected."""
    if target is Any or target is object:
        return True
    origin = typing.get_origin(target)
    if origin is typing.Union or origin is types.UnionType:
        return any(_assignable(source, arg) for arg in typing.get_args(target))
    if isinstance(target, TypeVar):
        return True
    target_class = origin if isinstance(origin, type) else target
    if not isinstance(target_class, type):
        return True
    if issubclass(source, target_class):
        return True
    return any(issubclass(source, promoted) for promoted in _PROMOTIONS.get(target_class, ()))
