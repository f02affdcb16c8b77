"""Evolution module exports."""

from .engine import EvolutionConfig, EvolutionEngine, evolve
from .fitness import FitnessRanker, RankedAgent, Ranking
from .population import NO_RESIZE, resize_population
from .selection import BOUNDED, LEGACY, ParentSelector, bounded_parent_indices, legacy_parent_indices

__all__ = [
    "BOUNDED",
    "EvolutionConfig",
    "EvolutionEngine",
    "FitnessRanker",
    "LEGACY",
    "NO_RESIZE",
    "ParentSelector",
    "RankedAgent",
    "Ranking",
    "bounded_parent_indices",
    "evolve",
    "legacy_parent_indices",
    "resize_population",
]
