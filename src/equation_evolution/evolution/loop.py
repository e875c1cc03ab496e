"""Main evolution loop for the equation search."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List

from equation_evolution.config import EvolutionConfig
from equation_evolution.core.evaluator import ExpressionEvaluator
from equation_evolution.core.fitness import FitnessScorer
from equation_evolution.core.individual import Individual
from equation_evolution.evolution.crossover import get_crossover_strategy
from equation_evolution.evolution.mutation import get_mutation_strategy
from equation_evolution.evolution.operators import SelectionStrategy, MutationStrategy, CrossoverStrategy
from equation_evolution.evolution.population import Population
from equation_evolution.evolution.selection import get_selection_strategy
from equation_evolution.utils.logging import get_verbosity, log_generation, log_event, LogLevel


class RunState(Enum):
    """Lifecycle of a single run."""

    UNINITIALIZED = "uninitialized"
    SEEDED = "seeded"
    EVALUATED = "evaluated"
    ADVANCING = "advancing"
    TERMINATED = "terminated"


@dataclass
class EvolutionResult:
    """Result of the evolution process."""

    best: Individual
    generations: int
    converged: bool
    stop_reason: str
    history: List[float] = field(default_factory=list)

    @property
    def equation(self) -> str:
        return self.best.equation

    @property
    def solution(self) -> float:
        return self.best.solution

    @property
    def fitness(self) -> float:
        return self.best.fitness

    def to_dict(self) -> dict:
        return self.best.to_dict()


class EvolutionLoop:
    """
    Generational genetic algorithm that evolves arithmetic expressions.

    The evolutionary process:
    1. **Seeding**: Create ``population_size`` random, scored individuals
    2. **Evaluation**: Rank the population and record the best fitness
    3. **Termination check**: Stop on convergence or when the generation
       budget is spent
    4. **Advancing**: Copy the elite, then fill the next generation with
       tournament-selected offspring (crossover or clone, then maybe mutate)
    5. **Repeat** from step 2

    All run-scoped state (population, generation counter, fitness history)
    belongs to the loop object and is reset at the start of every ``run()``,
    so independent runs never share state. All random draws come from the
    injected ``rng``; seeding it makes a run fully reproducible.

    Example:
        >>> config = EvolutionConfig(target=10, max_generations=200)
        >>> loop = EvolutionLoop(config, rng=random.Random(7))
        >>> result = loop.run()
        >>> print(result.equation, result.solution, result.fitness)
        >>> print(loop.history()[-1])
    """

    def __init__(
        self,
        config: EvolutionConfig | None = None,
        evaluator: ExpressionEvaluator | None = None,
        rng: random.Random | None = None,
        selection: SelectionStrategy | None = None,
        mutation: MutationStrategy | None = None,
        crossover: CrossoverStrategy | None = None,
        log_interval: int = 10,
    ):
        """
        Initialize the evolution loop.

        Args:
            config: Run configuration. Defaults to ``EvolutionConfig()``.
            evaluator: Expression evaluator. Defaults to ``SafeEvaluator``.
            rng: Random source shared by every operator of this loop.
            selection: Custom selection strategy. If None, tournament
                selection with ``config.tournament_size`` is used.
            mutation: Custom mutation strategy. If None, structural mutation.
            crossover: Custom crossover strategy. If None, single-point.
            log_interval: Log progress every N generations.
        """
        if log_interval < 1:
            raise ValueError(f"log_interval must be at least 1, got {log_interval}")

        self.config = config if config is not None else EvolutionConfig()
        self.rng = rng if rng is not None else random.Random()
        self.scorer = FitnessScorer(self.config.target, evaluator)
        self.log_interval = log_interval

        if selection is not None:
            self.selection = selection
        else:
            self.selection = get_selection_strategy(
                "tournament",
                tournament_size=self.config.tournament_size,
                rng=self.rng,
            )

        if mutation is not None:
            self.mutation = mutation
        else:
            self.mutation = get_mutation_strategy(
                "structural",
                scorer=self.scorer,
                max_length=self.config.max_equation_length,
                rng=self.rng,
            )

        if crossover is not None:
            self.crossover = crossover
        else:
            self.crossover = get_crossover_strategy(
                "single_point",
                scorer=self.scorer,
                max_length=self.config.max_equation_length,
                rng=self.rng,
            )

        # State
        self.state = RunState.UNINITIALIZED
        self.population: Population | None = None
        self.generation = 0
        self._history: List[float] = []

    def run(self, seeds: Iterable[str] | None = None) -> EvolutionResult:
        """
        Run one complete search.

        Args:
            seeds: Optional chromosomes placed in the initial population
                ahead of the randomly generated ones.

        Returns:
            EvolutionResult with the best individual found. When the budget
            runs out before convergence, ``converged`` is False and
            ``stop_reason`` is ``"max_generations"``; the best individual is
            still returned.
        """
        self.reset()
        self.seed(seeds)
        self.evaluate()

        stop_reason = self.stop_reason()
        while stop_reason is None:
            self.advance()
            self.evaluate()
            stop_reason = self.stop_reason()

        best = self.population.best.clone()
        converged = stop_reason == "converged"

        if converged:
            log_event("CONVERGED", level=LogLevel.NORMAL, generation=self.generation, equation=best.equation)
        else:
            log_event("BUDGET_EXHAUSTED", level=LogLevel.NORMAL, generation=self.generation, fitness=f"{best.fitness:.4f}")

        self.state = RunState.TERMINATED
        self.population = None

        return EvolutionResult(
            best=best,
            generations=self.generation,
            converged=converged,
            stop_reason=stop_reason,
            history=self.history(),
        )

    def reset(self) -> None:
        """Discard all run-scoped state."""
        self.state = RunState.UNINITIALIZED
        self.population = None
        self.generation = 0
        self._history = []

    def seed(self, seeds: Iterable[str] | None = None) -> None:
        """Create the initial, scored population."""
        self.population = Population.seed(
            size=self.config.population_size,
            scorer=self.scorer,
            max_length=self.config.max_equation_length,
            rng=self.rng,
            chromosomes=seeds,
        )
        self.state = RunState.SEEDED
        log_event(
            "SEEDED",
            level=LogLevel.VERBOSE,
            size=len(self.population),
            target=self.config.target,
        )

    def evaluate(self) -> None:
        """Rank the population and record the generation's best fitness."""
        self.population.rank()
        self._history.append(self.population.best.fitness)
        self.state = RunState.EVALUATED

        if self.generation % self.log_interval == 0 and get_verbosity() >= LogLevel.NORMAL:
            self._log_progress()

    def stop_reason(self) -> str | None:
        """Why the run should stop now, or None to keep evolving."""
        if self.population.best.fitness >= self.config.convergence_threshold:
            return "converged"
        if self.generation >= self.config.max_generations:
            return "max_generations"
        return None

    def advance(self) -> None:
        """Replace the population with the next generation."""
        self.state = RunState.ADVANCING
        current = self.population.individuals

        next_generation = self.population.elite(self.config.elitism_count)

        while len(next_generation) < self.config.population_size:
            parent_a = self.selection.select(current)
            parent_b = self.selection.select(current)

            if self.rng.random() < self.config.crossover_rate:
                offspring = self.crossover.crossover(parent_a, parent_b)
            else:
                offspring = parent_a.clone()

            if self.rng.random() < self.config.mutation_rate:
                self.mutation.mutate(offspring)

            next_generation.append(offspring)

        self.population.replace(next_generation)
        self.generation += 1

    def history(self) -> List[float]:
        """Best fitness per generation, oldest first."""
        return list(self._history)

    def _log_progress(self) -> None:
        best = self.population.best
        stats = self.population.stats(self.scorer)
        log_generation(
            gen=self.generation,
            equation=best.equation,
            best_fitness=best.fitness,
            mean_fitness=stats.mean_fitness,
            error=self.scorer.error(best),
            valid=f"{stats.valid_fraction:.0%}",
        )
