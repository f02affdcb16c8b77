"""Tests covering cost evaluation and ranking."""

from typing import List, Sequence

import pytest

from genelib.evolution.fitness import FitnessRanker, RankedAgent, Ranking
from genelib.exceptions import GeneLibRuntimeError


def _fixed_costs(costs: Sequence[float]):
    def cost_fn(population: Sequence[object]) -> List[float]:
        return list(costs)

    return cost_fn


def test_rank_orders_ascending_by_position() -> None:
    """Costs {0:3, 1:1, 2:4, 3:2} rank slots as 1, 3, 0, 2."""
    ranking = FitnessRanker(_fixed_costs([3, 1, 4, 2])).rank(["a0", "a1", "a2", "a3"])
    assert [entry.slot for entry in ranking] == [1, 3, 0, 2]
    assert ranking.agents == ["a1", "a3", "a0", "a2"]
    assert ranking.costs == [1.0, 2.0, 3.0, 4.0]


def test_rank_reverse_orders_descending() -> None:
    ranking = FitnessRanker(_fixed_costs([3, 1, 4, 2]), reverse=True).rank(["a0", "a1", "a2", "a3"])
    assert ranking.agents == ["a2", "a0", "a3", "a1"]
    assert all(a >= b for a, b in zip(ranking.costs, ranking.costs[1:]))


def test_ties_keep_population_order_in_both_directions() -> None:
    population = ["w", "x", "y", "z"]
    ascending = FitnessRanker(_fixed_costs([1, 0, 1, 0])).rank(population)
    descending = FitnessRanker(_fixed_costs([1, 0, 1, 0]), reverse=True).rank(population)
    assert [entry.slot for entry in ascending] == [1, 3, 0, 2]
    assert [entry.slot for entry in descending] == [0, 2, 1, 3]


def test_equal_agents_in_different_slots_are_not_collapsed() -> None:
    """Two slots holding the same value keep their own costs."""
    ranking = FitnessRanker(_fixed_costs([2, 1, 3])).rank(["x", "x", "y"])
    assert len(ranking) == 3
    assert ranking.pairs() == [("x", 1.0), ("x", 2.0), ("y", 3.0)]


def test_cost_function_receives_whole_population_once() -> None:
    calls = []

    def cost_fn(population: Sequence[str]) -> List[float]:
        calls.append(list(population))
        return [float(len(agent)) for agent in population]

    FitnessRanker(cost_fn).rank(["ccc", "a", "bb"])
    assert calls == [["ccc", "a", "bb"]]


def test_cost_length_mismatch_raises() -> None:
    with pytest.raises(GeneLibRuntimeError) as err:
        FitnessRanker(_fixed_costs([1.0])).rank(["a", "b"])
    assert err.value.context == {"costs": 1, "population": 2}


def test_cost_function_errors_propagate_unchanged() -> None:
    def broken(population: Sequence[str]) -> List[float]:
        raise ValueError("cost table unavailable")

    with pytest.raises(ValueError, match="cost table unavailable"):
        FitnessRanker(broken).rank(["a"])


def test_ranking_helpers() -> None:
    ranking = FitnessRanker(_fixed_costs([0.5, 0.25, 0.75])).rank(["p", "q", "r"])
    assert isinstance(ranking, Ranking)
    assert ranking.best.agent == "q"
    assert [entry.agent for entry in ranking.top_k(2)] == ["q", "p"]
    assert ranking[-1].cost == 0.75


def test_empty_ranking_has_no_best() -> None:
    ranking = FitnessRanker(_fixed_costs([])).rank([])
    assert len(ranking) == 0
    with pytest.raises(GeneLibRuntimeError):
        _ = ranking.best


def test_slices_are_plain_lists_of_entries() -> None:
    ranking = FitnessRanker(_fixed_costs([3, 1, 4, 2])).rank(["a0", "a1", "a2", "a3"])
    assert isinstance(ranking[0], RankedAgent)
    assert isinstance(ranking[:2], list)
    assert ranking[:2] == ranking.top_k(2)
