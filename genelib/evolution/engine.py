"""
Evolution engine driving generic elitist genetic search.

Each call to :meth:`EvolutionEngine.evolve` sizes the population once and then
alternates evaluation and reproduction.  The best ``top_k`` agents of every
ranking are carried over verbatim; every other slot is refilled with the
crossover of two parents drawn from the elite prefix, optionally mutated.
Evaluation happens one more time than reproduction, so the returned ranking
always describes the last population that was bred.

All randomness used by the engine flows through a single numpy ``Generator``
so that, given a seed and deterministic strategies, runs are reproducible.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Sequence, TypeVar

import numpy as np

from genelib.exceptions import GeneLibConfigError, ParentSelectionError
from genelib.utils.logger import RunLogger
from genelib.utils.rng import SeedLike, make_rng

from .fitness import CostFunction, FitnessRanker, Ranking
from .population import NO_RESIZE, resize_population
from .selection import LEGACY, ParentSelector, validate_parent_sampling

T = TypeVar("T")

MIN_TOP_K = 2


@dataclass
class EvolutionConfig:
    """Hyperparameters of one evolve call."""

    mutation_rate: float = 0.8
    reverse: bool = False
    pop_size: Optional[int] = NO_RESIZE
    top_k: int = MIN_TOP_K
    generations: int = 1
    parent_sampling: str = LEGACY
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self.parent_sampling = validate_parent_sampling(self.parent_sampling)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "EvolutionConfig":
        """Build a config from the ``engine`` section of a loaded configuration."""

        known = {item.name for item in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise GeneLibConfigError(
                f"Unknown engine settings: {unknown}",
                context={"keys": unknown},
            )
        return cls(**dict(values))

    @property
    def effective_top_k(self) -> int:
        return max(MIN_TOP_K, self.top_k)


class EvolutionEngine(Generic[T]):
    """Central coordinator for one population's evolution."""

    def __init__(
        self,
        cost_fn: CostFunction,
        mutate_fn: Callable[[T], T],
        crossover_fn: Callable[[T, T], T],
        config: Optional[EvolutionConfig] = None,
        rng: SeedLike = None,
        logger: Optional[RunLogger] = None,
        on_generation: Optional[Callable[[int, Ranking], None]] = None,
    ) -> None:
        """Create a new evolution engine.

        Parameters
        ----------
        cost_fn : callable
            Receives the whole population and returns one cost per agent, in order.
        mutate_fn : callable
            Returns a new agent derived from one agent.
        crossover_fn : callable
            Returns a child agent combining two parents.
        config : EvolutionConfig, optional
            Hyper-parameters; defaults keep the population size and breed one generation.
        rng : int | numpy.random.Generator, optional
            Shared random source. Falls back to ``config.seed`` when omitted.
        logger : RunLogger, optional
            Receives run boundaries and per-generation cost summaries.
        on_generation : callable, optional
            Called with the evaluation number and ranking after every evaluation.
        """
        self.config = config or EvolutionConfig()
        self.cost_fn = cost_fn
        self.mutate_fn = mutate_fn
        self.crossover_fn = crossover_fn
        self.rng = make_rng(rng if rng is not None else self.config.seed)
        self.logger = logger or RunLogger("genelib.engine", level="DEBUG")
        self.on_generation = on_generation
        self.ranker: FitnessRanker[T] = FitnessRanker(cost_fn, reverse=self.config.reverse)
        self.selector = ParentSelector(self.rng, self.config.parent_sampling)
        self.history: List[Dict[str, float]] = []

    def evolve(self, population: Sequence[T]) -> Ranking:
        """Evolve ``population`` for ``config.generations`` cycles and return the final ranking."""

        self.history = []
        population = resize_population(population, self.config.pop_size, self.mutate_fn, self.rng)
        top_k = self.config.effective_top_k
        generation = 0
        with self.logger.start_run("evolve", params=asdict(self.config)):
            while True:
                ranking = self.ranker.rank(population)
                generation += 1
                self._record(generation, ranking)
                if generation > self.config.generations:
                    return ranking
                population = self._reproduce(population, ranking, top_k)

    def _reproduce(self, population: Sequence[T], ranking: Ranking, top_k: int) -> List[T]:
        # Parents are read from the buffer being filled, as the legacy scheme
        # may point past the elite prefix.
        buffer: List[T] = list(population)
        elite = ranking.top_k(top_k)
        for slot, entry in enumerate(elite):
            buffer[slot] = entry.agent
        for slot in range(len(elite), len(buffer)):
            p1, p2 = self.selector.select(top_k)
            child = self.crossover_fn(self._parent(buffer, p1), self._parent(buffer, p2))
            if self.rng.random() < self.config.mutation_rate:
                child = self.mutate_fn(child)
            buffer[slot] = child
        return buffer

    @staticmethod
    def _parent(buffer: Sequence[T], index: int) -> T:
        if index >= len(buffer):
            raise ParentSelectionError(
                f"Parent index {index} is outside a population of {len(buffer)} agents; "
                "lower top_k or use bounded parent sampling.",
                context={"index": index, "population": len(buffer)},
            )
        return buffer[index]

    def _record(self, generation: int, ranking: Ranking) -> None:
        if len(ranking):
            costs = np.asarray(ranking.costs, dtype=float)
            metrics = {
                "best_cost": float(costs[0]),
                "mean_cost": float(costs.mean()),
                "worst_cost": float(costs[-1]),
            }
            self.history.append({"generation": generation, **metrics})
            self.logger.log_metrics(metrics, step=generation)
        if self.on_generation is not None:
            self.on_generation(generation, ranking)


def evolve(
    population: Sequence[T],
    cost_fn: CostFunction,
    mutate_fn: Callable[[T], T],
    crossover_fn: Callable[[T, T], T],
    mutation_rate: float,
    reverse: bool,
    pop_size: Optional[int],
    top_k: int,
    generations: int,
    *,
    rng: SeedLike = None,
    parent_sampling: str = LEGACY,
) -> Ranking:
    """Evolve ``population`` and return the final generation ordered by cost.

    ``pop_size`` of ``-1`` (or ``None``) keeps the population's own size and
    ``top_k`` below 2 is raised to 2.  Pass a seed or a shared generator as
    ``rng`` for reproducible runs.
    """

    config = EvolutionConfig(
        mutation_rate=mutation_rate,
        reverse=reverse,
        pop_size=pop_size,
        top_k=top_k,
        generations=generations,
        parent_sampling=parent_sampling,
    )
    engine: EvolutionEngine[T] = EvolutionEngine(cost_fn, mutate_fn, crossover_fn, config=config, rng=rng)
    return engine.evolve(population)
