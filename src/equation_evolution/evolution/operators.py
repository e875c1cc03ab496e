"""
Base classes for evolutionary operators.

This module defines the interfaces that all evolutionary operators must implement.
These operators form the core of the genetic algorithm:

- SelectionStrategy: Chooses parents from the current population
- MutationStrategy: Applies a structural change to one individual
- CrossoverStrategy: Combines two parents into one offspring

Operators that create or modify individuals are responsible for leaving them
freshly scored: the driver never re-evaluates an individual it receives back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from equation_evolution.core.individual import Individual


class SelectionStrategy(ABC):
    """
    Abstract base class for parent selection.

    Selection determines which individuals get to reproduce. It should favour
    fitter individuals while still giving weaker ones a chance, so that the
    population does not collapse onto a single expression too early.
    """

    @abstractmethod
    def select(self, population: Sequence[Individual]) -> Individual:
        """
        Pick one parent from the population.

        Args:
            population: Current generation. Must not be empty.

        Returns:
            A member of the population (not a copy). Callers that intend to
            modify the result must clone it first.

        Raises:
            ValueError: If the population is empty
        """
        pass


class MutationStrategy(ABC):
    """
    Abstract base class for mutation.

    Mutation is the main source of new genetic material: it edits a single
    chromosome and rescores the individual before returning it.
    """

    @abstractmethod
    def mutate(self, individual: Individual) -> Individual:
        """
        Mutate an individual in place.

        Args:
            individual: Individual owned by the caller (never a population
                member shared with another generation).

        Returns:
            The same individual, with an edited chromosome and freshly
            recomputed solution and fitness.
        """
        pass


class CrossoverStrategy(ABC):
    """
    Abstract base class for recombination.

    Crossover combines two parents into a new individual, which must be scored
    before it is returned. Parents are never modified.
    """

    @abstractmethod
    def crossover(self, parent_a: Individual, parent_b: Individual) -> Individual:
        """
        Combine two parents into one offspring.

        Args:
            parent_a: First parent, usually the result of a tournament
            parent_b: Second parent

        Returns:
            A new, scored individual.
        """
        pass
