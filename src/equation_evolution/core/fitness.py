"""
Fitness scoring for candidate expressions.

Fitness is the inverse absolute error against the target, normalized into
(0, 1]. Every individual in the engine is scored through FitnessScorer, which
binds the evaluator and target so there is exactly one evaluate-then-score
path in the whole system.
"""

from __future__ import annotations

import sys

from equation_evolution.core.evaluator import ExpressionEvaluator, SafeEvaluator
from equation_evolution.core.individual import Individual


def fitness(solution: float, target: float) -> float:
    """
    Score a solution against the target.

    Returns 1.0 for an exact match, otherwise ``1 / (1 + |solution - target|)``.
    The result is strictly positive, never above 1, and decreases as the
    absolute error grows.

    Example:
        >>> fitness(10, 10)
        1.0
        >>> fitness(8, 10)
        0.3333333333333333
    """
    error = abs(solution - target)
    if error == 0:
        return 1.0
    # Errors beyond the float range would otherwise score exactly 0.
    return max(1 / (1 + error), sys.float_info.min)


class FitnessScorer:
    """
    Evaluate chromosomes and score them against a fixed target.

    Invalid chromosomes (evaluator returns None) get ``solution = 0`` and are
    scored normally, so a malformed expression is a low-fitness individual
    rather than an error.
    """

    def __init__(self, target: float, evaluator: ExpressionEvaluator | None = None):
        self.target = target
        self.evaluator = evaluator if evaluator is not None else SafeEvaluator()

    def solve(self, chromosome: str) -> float:
        """Numeric value of a chromosome, 0 if it is invalid."""
        value = self.evaluator.evaluate(chromosome)
        return 0.0 if value is None else value

    def score(self, chromosome: str) -> Individual:
        """Build a freshly scored individual from a chromosome."""
        solution = self.solve(chromosome)
        return Individual(
            chromosome=chromosome,
            solution=solution,
            fitness=fitness(solution, self.target),
        )

    def rescore(self, individual: Individual) -> Individual:
        """Recompute solution and fitness in place after a chromosome edit."""
        individual.solution = self.solve(individual.chromosome)
        individual.fitness = fitness(individual.solution, self.target)
        return individual

    def error(self, individual: Individual) -> float:
        """Absolute distance between an individual's solution and the target."""
        return abs(individual.solution - self.target)
