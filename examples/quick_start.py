#!/usr/bin/env python3
"""
Quick Start Examples for the Equation Evolution Engine

This script shows the most common usage patterns to help you get started quickly.
Run this file directly or copy the examples into your own code.

Usage: python examples/quick_start.py
"""

def example_1_simple_usage():
    """Example 1: Simplest possible usage - one function call"""
    print("=" * 60)
    print("EXAMPLE 1: Simple Usage")
    print("=" * 60)

    from equation_evolution import find_equation

    result = find_equation(42, seed=7, verbosity="minimal")

    print(f"Equation: {result.equation}")
    print(f"Solution: {result.solution:g}")
    print(f"Fitness: {result.fitness:.4f}")
    print()


def example_2_custom_parameters():
    """Example 2: Harder target with stronger selection pressure"""
    print("=" * 60)
    print("EXAMPLE 2: Custom Parameters")
    print("=" * 60)

    from equation_evolution import find_equation

    result = find_equation(
        1234,
        seed=3,
        verbosity="silent",
        population_size=200,
        tournament_size=5,
        mutation_rate=0.2,
    )

    print(f"Converged: {result.converged} after {result.generations} generations")
    print(f"Best: {result.equation} = {result.solution:g}")
    print()


def example_3_fitness_history():
    """Example 3: Driving the loop directly and inspecting progress"""
    print("=" * 60)
    print("EXAMPLE 3: Fitness History")
    print("=" * 60)

    import random

    from equation_evolution import EvolutionConfig, EvolutionLoop
    from equation_evolution.utils.logging import set_verbosity

    set_verbosity("silent")
    loop = EvolutionLoop(EvolutionConfig(target=99, max_generations=50), rng=random.Random(0))
    result = loop.run()

    history = loop.history()
    print(f"Generations recorded: {len(history)}")
    print(f"First best fitness: {history[0]:.4f}")
    print(f"Final best fitness: {history[-1]:.4f}")
    print(f"Result: {result.to_dict()}")
    print()


def example_4_invalid_configuration():
    """Example 4: Configurations that break an invariant are rejected up front"""
    print("=" * 60)
    print("EXAMPLE 4: Configuration Errors")
    print("=" * 60)

    from pydantic import ValidationError

    from equation_evolution import EvolutionConfig

    try:
        EvolutionConfig(population_size=5, elitism_count=5)
    except ValidationError as e:
        print(f"Rejected: {e.errors()[0]['msg']}")
    print()


if __name__ == "__main__":
    print("Equation Evolution - Quick Start Examples")
    print("=" * 60)
    print()

    example_1_simple_usage()
    example_2_custom_parameters()
    example_3_fitness_history()
    example_4_invalid_configuration()

    print("=" * 60)
    print("All examples completed!")
