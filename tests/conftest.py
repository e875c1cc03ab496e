"""Pytest configuration and fixtures."""

import random

import pytest

from equation_evolution.utils.logging import set_verbosity


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep test output clean."""
    set_verbosity("silent")
    yield
    set_verbosity("normal")


@pytest.fixture
def rng():
    """Seeded random source for reproducible draws."""
    return random.Random(1234)


@pytest.fixture
def evaluator():
    from equation_evolution.core.evaluator import SafeEvaluator

    return SafeEvaluator()


@pytest.fixture
def scorer(evaluator):
    """Scorer aimed at target 10."""
    from equation_evolution.core.fitness import FitnessScorer

    return FitnessScorer(10, evaluator)


@pytest.fixture
def small_config():
    """Small configuration for fast runs."""
    from equation_evolution.config import EvolutionConfig

    return EvolutionConfig(
        population_size=20,
        target=42,
        max_generations=30,
        elitism_count=2,
    )
