"""
Word guessing demonstration built on the GeneLib engine.

A population of random words is evolved towards a target word.  The cost of a
word is the number of positions where it differs from the target, mutation
rewrites one random position and crossover takes every position from either
parent with equal probability.  The demo polls the engine one generation at a
time until the best word matches the target.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

import numpy as np

from genelib.evolution import EvolutionConfig, Ranking, evolve
from genelib.exceptions import GeneLibConfigError
from genelib.utils.logger import RunLogger
from genelib.utils.rng import SeedLike, make_rng


def valid_word(word: str) -> bool:
    """A word is valid when it is non-empty and made of letters only."""
    return bool(word) and all(ch.isalpha() for ch in word)


@dataclass
class WordGuessProblem:
    """Strategies for evolving random words towards ``target``."""

    target: str
    rng: np.random.Generator
    mixed_case: bool = True

    def __post_init__(self) -> None:
        if not valid_word(self.target):
            raise GeneLibConfigError(
                f"Invalid word '{self.target}', must all be lower or uppercase letters!",
                context={"word": self.target},
            )

    def random_letter(self) -> str:
        letter = string.ascii_lowercase[int(self.rng.integers(26))]
        if self.mixed_case and self.rng.random() < 0.5:
            return letter.upper()
        return letter

    def random_word(self, length: int) -> str:
        return "".join(self.random_letter() for _ in range(length))

    def initial_population(self, size: int) -> List[str]:
        return [self.random_word(len(self.target)) for _ in range(size)]

    def cost(self, population: Sequence[str]) -> List[float]:
        """Hamming distance of every word to the target."""
        return [float(sum(a != b for a, b in zip(word, self.target))) for word in population]

    def mutate(self, word: str) -> str:
        chars = list(word)
        chars[int(self.rng.integers(len(chars)))] = self.random_letter()
        return "".join(chars)

    def crossover(self, mother: str, father: str) -> str:
        take_father = self.rng.random(len(mother)) < 0.5
        return "".join(f if swap else m for m, f, swap in zip(mother, father, take_father))


@dataclass
class WordGuessResult:
    """Outcome of a word guessing run."""

    best: str
    cost: float
    rounds: int
    history: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return self.cost <= 0


def run_word_guess(
    target: str,
    config: Optional[Mapping[str, Mapping[str, Any]]] = None,
    rng: SeedLike = None,
    on_round: Optional[Callable[[int, Ranking], None]] = None,
) -> WordGuessResult:
    """Evolve random words until ``target`` is found.

    Parameters
    ----------
    target : str
        Word to guess; letters only.
    config : mapping, optional
        Loaded configuration with ``engine`` and ``demo`` sections.  Missing
        sections fall back to the library defaults.
    rng : int | numpy.random.Generator, optional
        Seed or generator shared by the engine and the word strategies.
    on_round : callable, optional
        Called with the round number and the ranking after every round.
    """

    config = config or {}
    engine_cfg = dict(config.get("engine", {}))
    demo_cfg = dict(config.get("demo", {}))
    seed = engine_cfg.pop("seed", None)
    engine_cfg["generations"] = 1
    settings = EvolutionConfig.from_mapping(engine_cfg)
    max_rounds = demo_cfg.get("max_rounds")

    generator = make_rng(rng if rng is not None else seed)
    problem = WordGuessProblem(target, generator, mixed_case=bool(demo_cfg.get("mixed_case", True)))
    pop_size = settings.pop_size if settings.pop_size and settings.pop_size > 0 else 100
    population: Sequence[str] = problem.initial_population(pop_size)
    run_logger = RunLogger("word-guess")

    history: List[Dict[str, Any]] = []
    rounds = 0
    with run_logger.start_run(target, params={"pop_size": pop_size, "top_k": settings.top_k}):
        while True:
            ranking = evolve(
                population,
                problem.cost,
                problem.mutate,
                problem.crossover,
                settings.mutation_rate,
                settings.reverse,
                pop_size,
                settings.top_k,
                settings.generations,
                rng=generator,
                parent_sampling=settings.parent_sampling,
            )
            rounds += 1
            best = ranking.best
            history.append({"round": rounds, "best": best.agent, "cost": best.cost})
            run_logger.log_metrics({"best_cost": best.cost}, step=rounds)
            if on_round is not None:
                on_round(rounds, ranking)
            if best.cost <= 0 or (max_rounds is not None and rounds >= max_rounds):
                break
            population = ranking.agents

    return WordGuessResult(best=best.agent, cost=best.cost, rounds=rounds, history=history)
