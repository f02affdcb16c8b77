"""Construction of the shared random source."""

from __future__ import annotations

from typing import Optional, Union

import numpy as np

SeedLike = Union[None, int, np.random.Generator]


def make_rng(seed: SeedLike = None) -> np.random.Generator:
    """Return a numpy ``Generator``; existing generators are passed through."""

    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)
