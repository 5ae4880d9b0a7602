"""Random sources that can be injected into a MarkovChain."""
import logging
import random
from typing import Optional, Protocol, runtime_checkable

import numpy as np

logger = logging.getLogger(__name__)

RNG_KINDS = ('mt', 'numpy')


@runtime_checkable
class RandomSource(Protocol):
    """Anything that hands out uniformly distributed unsigned integers."""

    def next_uint(self) -> int:
        ...


class MersenneTwisterSource:
    """32-bit outputs from Python's Mersenne Twister."""

    bits = 32

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def next_uint(self) -> int:
        return self._random.getrandbits(self.bits)

    def __repr__(self):
        return f'MersenneTwisterSource(seed={self.seed!r})'


class NumpyRandomSource:
    """64-bit outputs from numpy's default bit generator (PCG64)."""

    bits = 64

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next_uint(self) -> int:
        # endpoint=True so the full uint64 range is reachable
        return int(self._rng.integers(0, np.iinfo(np.uint64).max, dtype=np.uint64, endpoint=True))

    def __repr__(self):
        return f'NumpyRandomSource(seed={self.seed!r})'


def make_random_source(kind: str = 'mt', seed: Optional[int] = None) -> RandomSource:
    """Build one of the bundled random sources by name."""
    if kind == 'mt':
        source = MersenneTwisterSource(seed)
    elif kind == 'numpy':
        source = NumpyRandomSource(seed)
    else:
        raise ValueError(f"Unknown random source '{kind}'. Expected one of: {', '.join(RNG_KINDS)}")
    logger.debug(f"Using random source {source!r}")
    return source
