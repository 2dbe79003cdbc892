import pytest
from pydantic import ValidationError

from arbitrary import GenConfig, PyRandomSource


def test_defaults_match_default_parameters() -> None:
    params = GenConfig().to_parameters()
    assert params.size == 100
    assert params.max_shrink_count == 1000
    assert isinstance(params.rng, PyRandomSource)


def test_seeded_config_is_reproducible() -> None:
    config = GenConfig(size=5, max_shrink_count=10, seed=1234)
    a = config.to_parameters()
    b = config.to_parameters()

    assert a.size == 5
    assert a.max_shrink_count == 10
    assert a.rng is not b.rng
    assert [a.next_int64() for _ in range(3)] == [b.next_int64() for _ in range(3)]


def test_negative_values_rejected() -> None:
    with pytest.raises(ValidationError):
        GenConfig(size=-1)
    with pytest.raises(ValidationError):
        GenConfig(max_shrink_count=-5)


def test_config_is_frozen() -> None:
    config = GenConfig()
    with pytest.raises(ValidationError):
        config.size = 3  # type: ignore[misc]
