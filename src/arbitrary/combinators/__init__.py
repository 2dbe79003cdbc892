"""Combinators - generators built from several generators."""

from arbitrary.combinators.ops import combine, one_of, sequence

__all__ = ["combine", "sequence", "one_of"]
