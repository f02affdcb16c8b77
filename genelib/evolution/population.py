"""
Population sizing for GeneLib evolution runs.

`resize_population` normalises the population handed in by the caller to the
requested size before the first evaluation.  No ranking has happened at that
point, so shrinking is a plain truncation: callers that want the best agents to
survive must sort them first.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, TypeVar

import numpy as np
from loguru import logger

from genelib.exceptions import GeneLibConfigError

T = TypeVar("T")

NO_RESIZE = -1


def resize_population(
    population: Sequence[T],
    target_size: Optional[int],
    mutate: Callable[[T], T],
    rng: np.random.Generator,
) -> Sequence[T]:
    """Return ``population`` truncated or grown to ``target_size`` agents.

    Growing keeps every original agent in place and fills each extra slot with
    a mutant of a uniformly drawn original.  When the size already matches, or
    ``target_size`` is ``None``/``NO_RESIZE``, the input object is returned as is.
    """

    current = len(population)
    if target_size is None or target_size == NO_RESIZE or target_size == current:
        return population
    if target_size < 0:
        raise GeneLibConfigError(
            f"Population size must be non-negative or {NO_RESIZE}, got {target_size}.",
            context={"target_size": target_size},
        )
    if target_size < current:
        logger.debug("Truncating population from {} to {} agents", current, target_size)
        return list(population[:target_size])
    if current == 0:
        raise GeneLibConfigError(
            "Cannot grow an empty population: there is no agent to mutate.",
            context={"target_size": target_size},
        )

    logger.debug("Growing population from {} to {} agents", current, target_size)
    resized: List[T] = list(population)
    for _ in range(target_size - current):
        resized.append(mutate(population[int(rng.integers(current))]))
    return resized
