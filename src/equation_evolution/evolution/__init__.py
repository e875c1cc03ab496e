"""Evolution module for genetic algorithm operations on expression strings."""

from equation_evolution.evolution.operators import (
    SelectionStrategy,
    MutationStrategy,
    CrossoverStrategy,
)
from equation_evolution.evolution.selection import TournamentSelection
from equation_evolution.evolution.mutation import StructuralMutation
from equation_evolution.evolution.crossover import SinglePointCrossover
from equation_evolution.evolution.population import Population, PopulationStats
from equation_evolution.evolution.loop import EvolutionLoop, EvolutionResult, RunState

__all__ = [
    "SelectionStrategy",
    "MutationStrategy",
    "CrossoverStrategy",
    "TournamentSelection",
    "StructuralMutation",
    "SinglePointCrossover",
    "Population",
    "PopulationStats",
    "EvolutionLoop",
    "EvolutionResult",
    "RunState",
]
