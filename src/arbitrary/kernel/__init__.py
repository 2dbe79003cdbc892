"""Kernel layer - generators, results, parameters and shrinkers."""

from arbitrary.kernel.errors import GenUsageError
from arbitrary.kernel.gen import Gen
from arbitrary.kernel.params import (
    DEFAULT_MAX_SHRINK_COUNT,
    DEFAULT_SIZE,
    GenParameters,
    PyRandomSource,
    default_parameters,
)
from arbitrary.kernel.ports import RandomSource
from arbitrary.kernel.result import ABSENT, Absent, GenResult
from arbitrary.kernel.shrink import Shrink, Shrinker, combine_shrinkers, no_shrinker

__all__ = [
    "Gen",
    "GenResult",
    "ABSENT",
    "Absent",
    # Parameters
    "GenParameters",
    "PyRandomSource",
    "RandomSource",
    "default_parameters",
    "DEFAULT_SIZE",
    "DEFAULT_MAX_SHRINK_COUNT",
    # Shrinking
    "Shrink",
    "Shrinker",
    "no_shrinker",
    "combine_shrinkers",
    # Errors
    "GenUsageError",
]
