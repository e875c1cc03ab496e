"""
Simple interface for the equation search.

This module provides the easiest way to use the Equation Evolution Engine
with minimal setup.
"""

from __future__ import annotations

import random

from equation_evolution.config import Config, get_default_config
from equation_evolution.core.evaluator import ExpressionEvaluator
from equation_evolution.evolution.loop import EvolutionLoop, EvolutionResult
from equation_evolution.utils.logging import set_verbosity


def find_equation(
    target: float | None = None,
    config: Config | None = None,
    seed: int | None = None,
    verbosity: str | None = None,
    evaluator: ExpressionEvaluator | None = None,
    **overrides,
) -> EvolutionResult:
    """
    Evolve an arithmetic expression that evaluates to ``target``.

    Args:
        target: Number to reach. Overrides ``config.evolution.target``.
        config: Optional full configuration (defaults if None)
        seed: Seed for the random source; the same seed and configuration
            always give the same result
        verbosity: "silent", "minimal", "normal", "verbose" or "debug".
            Overrides ``config.output.verbosity``.
        evaluator: Custom expression evaluator (sandboxed arithmetic if None)
        **overrides: Any EvolutionConfig field, e.g. ``population_size=100``

    Returns:
        EvolutionResult with ``equation``, ``solution`` and ``fitness`` of the
        best individual, plus ``converged``, ``generations`` and ``history``.

    Raises:
        pydantic.ValidationError: If the resulting configuration breaks an
            invariant (e.g. ``elitism_count >= population_size``)

    Examples:
        >>> from equation_evolution import find_equation
        >>> result = find_equation(100, seed=1, verbosity="silent")
        >>> print(result.equation, "=", result.solution)

        >>> result = find_equation(7, population_size=100, tournament_size=5)
        >>> result.to_dict()
    """
    config = config or get_default_config()
    evolution = config.evolution.with_overrides(target=target, **overrides)

    set_verbosity(verbosity or config.output.verbosity)

    loop = EvolutionLoop(
        evolution,
        evaluator=evaluator,
        rng=random.Random(seed),
        log_interval=config.output.log_interval,
    )
    return loop.run()
