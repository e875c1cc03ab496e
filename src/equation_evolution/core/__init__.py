"""Core components for the Equation Evolution Engine."""

from equation_evolution.core.evaluator import ArithmeticEval, ExpressionEvaluator, SafeEvaluator
from equation_evolution.core.fitness import FitnessScorer, fitness
from equation_evolution.core.individual import Individual

__all__ = [
    "ArithmeticEval",
    "ExpressionEvaluator",
    "SafeEvaluator",
    "FitnessScorer",
    "fitness",
    "Individual",
]
