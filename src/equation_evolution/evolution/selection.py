"""
Selection strategies for the evolutionary search.

Tournament selection repeatedly draws a small random sample from the
population and keeps its fittest member. The tournament size ``k`` controls
selection pressure smoothly: ``k=1`` is uniform random choice, larger values
favour the current leaders more strongly.
"""

from __future__ import annotations

import random
from typing import Sequence

from equation_evolution.core.individual import Individual
from equation_evolution.evolution.operators import SelectionStrategy


class TournamentSelection(SelectionStrategy):
    """
    Tournament selection strategy.

    Draws ``tournament_size`` individuals uniformly at random, with
    replacement, and returns the one with the greatest fitness. Ties go to the
    first individual drawn. Each call is O(k).
    """

    def __init__(self, tournament_size: int = 3, rng: random.Random | None = None):
        """
        Initialize tournament selection.

        Args:
            tournament_size: Number of draws in each tournament
            rng: Random source; a fresh unseeded one is used if omitted
        """
        if tournament_size < 1:
            raise ValueError(f"tournament_size must be at least 1, got {tournament_size}")
        self.tournament_size = tournament_size
        self.rng = rng if rng is not None else random.Random()

    def select(self, population: Sequence[Individual]) -> Individual:
        if not population:
            raise ValueError("Cannot select from an empty population")

        winner = population[self.rng.randrange(len(population))]
        for _ in range(self.tournament_size - 1):
            contender = population[self.rng.randrange(len(population))]
            if contender.fitness > winner.fitness:
                winner = contender

        return winner


def get_selection_strategy(name: str, **kwargs) -> SelectionStrategy:
    """Factory function to get a selection strategy by name."""
    strategies = {
        "tournament": TournamentSelection,
    }

    if name not in strategies:
        raise ValueError(f"Unknown selection strategy: {name}")

    return strategies[name](**kwargs)
