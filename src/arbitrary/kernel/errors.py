"""Error types for generator construction."""

from __future__ import annotations


class GenUsageError(TypeError):
    """Error raised when a combinator receives a malformed argument.

    This is a programmer error detected when the combinator is built
    (wrong arity, incompatible parameter type, non-bool predicate).
    It is never a generation outcome and is never retried.
    """

    def __init__(self, message: str, combinator: str, argument: object) -> None:
        self.combinator = combinator
        self.argument = argument
        super().__init__(f"Param of {combinator} {message}")

    def __repr__(self) -> str:
        return (
            f"GenUsageError({super().__repr__()}, combinator={self.combinator!r}, "
            f"argument={self.argument!r})"
        )
