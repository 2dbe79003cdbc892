"""Shrinking - minimizing falsifying values."""

from arbitrary.shrinking.search import ShrinkOutcome, shrink_result, shrink_search

__all__ = ["ShrinkOutcome", "shrink_search", "shrink_result"]
