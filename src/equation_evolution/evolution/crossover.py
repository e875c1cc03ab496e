"""Crossover strategies for the evolutionary search."""

from __future__ import annotations

import random

from equation_evolution.core.fitness import FitnessScorer
from equation_evolution.core.individual import Individual
from equation_evolution.evolution.operators import CrossoverStrategy


class SinglePointCrossover(CrossoverStrategy):
    """
    Single-point crossover on variable-length string chromosomes.

    Independent cut points ``p1`` and ``p2`` are drawn in each parent. Two
    children are formed, ``A[:p1] + B[p2:]`` and ``B[:p2] + A[p1:]``, each
    clipped to ``max_length``. Both are scored and the fitter one is returned
    (the first child wins ties).

    On strings, one of the two children is often syntactically broken, so
    scoring both and keeping the better one raises the useful yield of each
    pairing.
    """

    def __init__(
        self,
        scorer: FitnessScorer,
        max_length: int = 20,
        rng: random.Random | None = None,
    ):
        self.scorer = scorer
        self.max_length = max_length
        self.rng = rng if rng is not None else random.Random()

    def cut(self, parent_a: str, parent_b: str) -> tuple[str, str]:
        """Draw cut points and return both candidate chromosomes."""
        point_a = self.rng.randrange(len(parent_a)) if parent_a else 0
        point_b = self.rng.randrange(len(parent_b)) if parent_b else 0

        first = parent_a[:point_a] + parent_b[point_b:]
        second = parent_b[:point_b] + parent_a[point_a:]

        return first[:self.max_length], second[:self.max_length]

    def crossover(self, parent_a: Individual, parent_b: Individual) -> Individual:
        first, second = self.cut(parent_a.chromosome, parent_b.chromosome)

        child_a = self.scorer.score(first)
        child_b = self.scorer.score(second)

        return child_b if child_b.fitness > child_a.fitness else child_a


def get_crossover_strategy(name: str, **kwargs) -> CrossoverStrategy:
    """Factory function to get a crossover strategy by name."""
    strategies = {
        "single_point": SinglePointCrossover,
    }

    if name not in strategies:
        raise ValueError(f"Unknown crossover strategy: {name}")

    return strategies[name](**kwargs)
