from __future__ import annotations

import pytest

from seqmarkov.random_source import (
    MersenneTwisterSource,
    NumpyRandomSource,
    RandomSource,
    make_random_source,
)


@pytest.mark.parametrize("kind, cls, bits", [("mt", MersenneTwisterSource, 32), ("numpy", NumpyRandomSource, 64)])
def test_factory_builds_seeded_sources(kind: str, cls, bits: int) -> None:
    source = make_random_source(kind, seed=42)

    assert isinstance(source, cls)
    assert isinstance(source, RandomSource)
    draws = [source.next_uint() for _ in range(100)]
    assert all(isinstance(draw, int) for draw in draws)
    assert all(0 <= draw < 2 ** bits for draw in draws)


@pytest.mark.parametrize("kind", ["mt", "numpy"])
def test_same_seed_gives_same_draws(kind: str) -> None:
    first = make_random_source(kind, seed=7)
    second = make_random_source(kind, seed=7)

    assert [first.next_uint() for _ in range(10)] == [second.next_uint() for _ in range(10)]


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown random source"):
        make_random_source("dice")
