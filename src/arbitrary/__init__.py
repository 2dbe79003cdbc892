from .combinators import combine, one_of, sequence
from .config import GenConfig
from .kernel import (
    ABSENT,
    Gen,
    GenParameters,
    GenResult,
    GenUsageError,
    PyRandomSource,
    RandomSource,
    Shrink,
    Shrinker,
    combine_shrinkers,
    default_parameters,
    no_shrinker,
)
from .shrinking import ShrinkOutcome, shrink_result, shrink_search

__all__ = [
    # Core
    "Gen",
    "GenResult",
    "ABSENT",
    # Parameters
    "GenParameters",
    "GenConfig",
    "RandomSource",
    "PyRandomSource",
    "default_parameters",
    # Combinators
    "combine",
    "sequence",
    "one_of",
    # Shrinking
    "Shrink",
    "Shrinker",
    "no_shrinker",
    "combine_shrinkers",
    "ShrinkOutcome",
    "shrink_search",
    "shrink_result",
    # Errors
    "GenUsageError",
]
