"""
Fitness ranking for GeneLib evolution.

The ranker hands the whole population to the caller's cost function in one
call, which lets the cost function share setup across agents, and pairs the
returned costs with agents by position.  Agents are never used as keys:
equal-valued agents in different slots keep their own entries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, List, NamedTuple, Sequence, Tuple, TypeVar, Union

import numpy as np

from genelib.exceptions import GeneLibRuntimeError

T = TypeVar("T")

CostFunction = Callable[[Sequence[Any]], Sequence[float]]


class RankedAgent(NamedTuple):
    """One population slot with its cost for the current generation."""

    agent: Any
    cost: float
    slot: int


class Ranking(Sequence[RankedAgent]):
    """Population of one generation ordered by cost."""

    def __init__(self, entries: Sequence[RankedAgent], reverse: bool = False) -> None:
        self._entries: List[RankedAgent] = list(entries)
        self.reverse = reverse

    def __getitem__(self, index: Union[int, slice]) -> Union[RankedAgent, List[RankedAgent]]:  # type: ignore[override]
        """Slices return plain lists of entries, like ``top_k``."""
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RankedAgent]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Ranking({self.pairs()!r}, reverse={self.reverse})"

    @property
    def agents(self) -> List[Any]:
        return [entry.agent for entry in self._entries]

    @property
    def costs(self) -> List[float]:
        return [entry.cost for entry in self._entries]

    @property
    def best(self) -> RankedAgent:
        if not self._entries:
            raise GeneLibRuntimeError("An empty ranking has no best agent.")
        return self._entries[0]

    def top_k(self, k: int) -> List[RankedAgent]:
        """Return the ``k`` best entries."""
        return self._entries[:k]

    def pairs(self) -> List[Tuple[Any, float]]:
        """Return ``(agent, cost)`` pairs in rank order."""
        return [(entry.agent, entry.cost) for entry in self._entries]


@dataclass
class FitnessRanker(Generic[T]):
    """Score a population with a batch cost function and sort it."""

    cost_fn: CostFunction
    reverse: bool = False

    def rank(self, population: Sequence[T]) -> Ranking:
        """Evaluate ``population`` once and return it ordered by cost.

        The sort is stable in both directions: agents with equal cost keep
        their population order, also when maximising.
        """

        costs = np.asarray(self.cost_fn(population), dtype=float).reshape(-1)
        if costs.shape[0] != len(population):
            raise GeneLibRuntimeError(
                f"Cost function returned {costs.shape[0]} costs for {len(population)} agents.",
                context={"costs": int(costs.shape[0]), "population": len(population)},
            )
        keys = -costs if self.reverse else costs
        order = np.argsort(keys, kind="stable")
        entries = [RankedAgent(population[int(slot)], float(costs[slot]), int(slot)) for slot in order]
        return Ranking(entries, reverse=self.reverse)
