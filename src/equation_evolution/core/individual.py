"""Individual state for the evolutionary search."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Individual:
    """
    A single candidate expression with its evaluated value and fitness.

    Attributes:
        chromosome: Expression string over digits and ``+ - * /``
        solution: Value of the expression, 0 when the evaluator rejects it
        fitness: Score in (0, 1] derived from ``solution`` and the run target

    ``solution`` and ``fitness`` are only meaningful when produced by a
    FitnessScorer; any edit to ``chromosome`` must be followed by a rescore.
    """

    chromosome: str
    solution: float = 0.0
    fitness: float = 0.0

    @property
    def equation(self) -> str:
        """Human-readable form of the chromosome."""
        return self.chromosome

    def clone(self) -> "Individual":
        """Return an independent copy."""
        return Individual(
            chromosome=self.chromosome,
            solution=self.solution,
            fitness=self.fitness,
        )

    def to_dict(self) -> dict:
        return {
            "equation": self.equation,
            "solution": self.solution,
            "fitness": self.fitness,
        }
