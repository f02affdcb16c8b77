"""Top-level package exposing the GeneLib evolution entrypoints."""

from .evolution import EvolutionConfig, EvolutionEngine, RankedAgent, Ranking, evolve
from .exceptions import GeneLibConfigError, GeneLibError, GeneLibRuntimeError, ParentSelectionError

__all__ = [
    "EvolutionConfig",
    "EvolutionEngine",
    "GeneLibConfigError",
    "GeneLibError",
    "GeneLibRuntimeError",
    "ParentSelectionError",
    "RankedAgent",
    "Ranking",
    "evolve",
]
