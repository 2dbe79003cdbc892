from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from arbitrary.kernel.params import (
    DEFAULT_MAX_SHRINK_COUNT,
    DEFAULT_SIZE,
    GenParameters,
    PyRandomSource,
    default_parameters,
)


class GenConfig(BaseModel):
    """Validated settings for building GenParameters.

    A fixed seed makes every sample and shrink sequence reproducible;
    leaving it unset falls back to a time-based seed.
    """

    model_config = ConfigDict(frozen=True)

    size: int = Field(default=DEFAULT_SIZE, ge=0)
    max_shrink_count: int = Field(default=DEFAULT_MAX_SHRINK_COUNT, ge=0)
    seed: int | None = Field(default=None, ge=0)

    def to_parameters(self) -> GenParameters:
        rng = default_parameters().rng if self.seed is None else PyRandomSource(self.seed)
        return GenParameters(
            size=self.size,
            max_shrink_count=self.max_shrink_count,
            rng=rng,
        )
