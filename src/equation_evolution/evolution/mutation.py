"""
Mutation strategies for the evolutionary search.

Structural mutation edits a chromosome at the character level. Three
operations are available:
- substitute: replace the character at a random position
- insert: add a random character at a random position
- delete: remove the character at a random position

Insert is only applicable below the maximum chromosome length and delete only
above the minimum, so a chromosome never leaves its configured bounds through
mutation.
"""

from __future__ import annotations

import random

from equation_evolution.core.fitness import FitnessScorer
from equation_evolution.core.individual import Individual
from equation_evolution.evolution.codec import MIN_EQUATION_LENGTH, random_gene
from equation_evolution.evolution.operators import MutationStrategy
from equation_evolution.utils.logging import log_event, LogLevel


class StructuralMutation(MutationStrategy):
    """
    Character-level mutation strategy.

    Exactly one operation is chosen uniformly among those applicable to the
    current chromosome, applied, and the individual is rescored.

    Example:
        >>> mutation = StructuralMutation(scorer, max_length=20, rng=random.Random(0))
        >>> child = parent.clone()
        >>> mutation.mutate(child)
    """

    def __init__(
        self,
        scorer: FitnessScorer,
        max_length: int = 20,
        rng: random.Random | None = None,
    ):
        self.scorer = scorer
        self.max_length = max_length
        self.rng = rng if rng is not None else random.Random()

    def available_operations(self, chromosome: str) -> list[str]:
        """Operations that keep the chromosome within its length bounds."""
        operations = ["substitute"]
        if len(chromosome) < self.max_length:
            operations.append("insert")
        if len(chromosome) > MIN_EQUATION_LENGTH:
            operations.append("delete")
        return operations

    def mutate(self, individual: Individual) -> Individual:
        genes = list(individual.chromosome)
        if not genes:
            genes.append(random_gene(self.rng))
            operation = "insert"
        else:
            operation = self.rng.choice(self.available_operations(individual.chromosome))
            index = self.rng.randrange(len(genes))

            if operation == "substitute":
                genes[index] = random_gene(self.rng)
            elif operation == "insert":
                genes.insert(index, random_gene(self.rng))
            else:
                del genes[index]

        before = individual.chromosome
        individual.chromosome = "".join(genes)
        self.scorer.rescore(individual)

        log_event(
            "MUTATE",
            level=LogLevel.DEBUG,
            op=operation,
            before=before,
            after=individual.chromosome,
        )
        return individual


def get_mutation_strategy(name: str, **kwargs) -> MutationStrategy:
    """Factory function to get a mutation strategy by name."""
    strategies = {
        "structural": StructuralMutation,
    }

    if name not in strategies:
        raise ValueError(f"Unknown mutation strategy: {name}")

    return strategies[name](**kwargs)
