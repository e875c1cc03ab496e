"""Population management for the evolutionary search."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Iterator, List

from equation_evolution.core.fitness import FitnessScorer
from equation_evolution.core.individual import Individual
from equation_evolution.evolution.codec import ALPHABET, random_chromosome


@dataclass
class PopulationStats:
    """Summary of one ranked generation."""

    best_fitness: float
    mean_fitness: float
    worst_fitness: float
    valid_fraction: float


class Population:
    """
    A fixed-size generation of scored individuals.

    The population is ranked (descending fitness, stable for ties) by
    ``rank()``; after ranking, index 0 is the current best. The size is set at
    construction and checked on every replacement, so it stays constant
    across the whole run.
    """

    def __init__(self, individuals: Iterable[Individual], size: int | None = None):
        self.individuals: List[Individual] = list(individuals)
        self.size = size if size is not None else len(self.individuals)
        self._check_size(self.individuals)

    @classmethod
    def seed(
        cls,
        size: int,
        scorer: FitnessScorer,
        max_length: int,
        rng: random.Random,
        chromosomes: Iterable[str] | None = None,
    ) -> "Population":
        """
        Create a scored population of ``size`` individuals.

        Provided chromosomes fill the first slots (extra ones are ignored);
        the remainder is generated randomly. A provided chromosome longer
        than ``max_length`` or using characters outside the alphabet raises
        ValueError.
        """
        seeds = list(chromosomes or [])[:size]
        for chromosome in seeds:
            if len(chromosome) > max_length:
                raise ValueError(
                    f"Seed {chromosome!r} is longer than max_length={max_length}"
                )
            if not set(chromosome) <= set(ALPHABET):
                raise ValueError(f"Seed {chromosome!r} contains characters outside {ALPHABET!r}")

        individuals = [scorer.score(c) for c in seeds]
        while len(individuals) < size:
            individuals.append(scorer.score(random_chromosome(rng, max_length)))
        return cls(individuals, size=size)

    def _check_size(self, individuals: List[Individual]) -> None:
        if len(individuals) != self.size:
            raise ValueError(
                f"Population must contain exactly {self.size} individuals, got {len(individuals)}"
            )

    def __len__(self) -> int:
        return len(self.individuals)

    def __iter__(self) -> Iterator[Individual]:
        return iter(self.individuals)

    def __getitem__(self, index: int) -> Individual:
        return self.individuals[index]

    def rank(self) -> None:
        """Sort individuals by fitness, best first."""
        self.individuals.sort(key=lambda ind: ind.fitness, reverse=True)

    @property
    def best(self) -> Individual:
        return self.individuals[0]

    def elite(self, count: int) -> List[Individual]:
        """Copies of the top ``count`` individuals (call after ``rank()``)."""
        return [ind.clone() for ind in self.individuals[:count]]

    def replace(self, individuals: List[Individual]) -> None:
        """Swap in the next generation wholesale."""
        self._check_size(individuals)
        self.individuals = individuals

    def fitnesses(self) -> List[float]:
        return [ind.fitness for ind in self.individuals]

    def stats(self, scorer: FitnessScorer) -> PopulationStats:
        scores = self.fitnesses()
        valid = sum(1 for ind in self.individuals if scorer.evaluator.evaluate(ind.chromosome) is not None)
        return PopulationStats(
            best_fitness=max(scores),
            mean_fitness=sum(scores) / len(scores),
            worst_fitness=min(scores),
            valid_fraction=valid / len(scores),
        )
