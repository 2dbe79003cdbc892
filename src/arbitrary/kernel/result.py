"""Generation results - the outcome of invoking a generator once."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from arbitrary.kernel.shrink import Shrinker

T = TypeVar("T")


class Absent:
    """Marker for a result that carries no value.

    ``None`` is a legitimate generated value, so failure needs its own arm.
    """

    _instance: Absent | None = None

    def __new__(cls) -> Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = Absent()


@dataclass(frozen=True)
class GenResult(Generic[T]):
    """
    The result of one generator invocation.

    Attributes:
        value: The generated value, or ABSENT when generation failed
        result_type: Declared type of the value; kept because ABSENT has none
        labels: Human-readable tags accumulated across combinator layers
        sieve: Optional acceptance predicate; None means always accepted
        shrinker: Optional shrinker; None means the value cannot be simplified
    """

    value: T | Absent = ABSENT
    result_type: type | None = None
    labels: tuple[str, ...] = field(default_factory=tuple)
    sieve: Callable[[T], bool] | None = None
    shrinker: Shrinker[T] | None = None

    @property
    def has_value(self) -> bool:
        return self.value is not ABSENT

    def accepts(self, value: T) -> bool:
        """Check a value against the sieve, if any."""
        return self.sieve is None or self.sieve(value)

    def retrieve(self) -> tuple[T | None, bool]:
        """Return ``(value, True)`` if a value is present and passes the sieve.

        Otherwise ``(None, False)``.
        """
        if self.has_value and self.accepts(self.value):  # type: ignore[arg-type]
            return self.value, True  # type: ignore[return-value]
        return None, False

    def retrieve_unchecked(self) -> tuple[T | None, bool]:
        """Like retrieve(), but ignores the sieve."""
        if self.has_value:
            return self.value, True  # type: ignore[return-value]
        return None, False

    def require(self) -> T:
        value, ok = self.retrieve()
        if not ok:
            raise ValueError(f"GenResult has no acceptable value (labels={list(self.labels)}).")
        return value  # type: ignore[return-value]

    def with_labels(self, *labels: str) -> GenResult[T]:
        """Return a copy with labels appended."""
        return GenResult(
            value=self.value,
            result_type=self.result_type,
            labels=self.labels + labels,
            sieve=self.sieve,
            shrinker=self.shrinker,
        )

    @staticmethod
    def failed(result_type: type | None, labels: tuple[str, ...] = ()) -> GenResult[Any]:
        """Create a result carrying no value."""
        return GenResult(value=ABSENT, result_type=result_type, labels=labels)
