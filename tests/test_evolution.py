"""Tests for evolution operators."""

import random

import pytest

from equation_evolution.core.evaluator import ExpressionEvaluator
from equation_evolution.core.fitness import FitnessScorer, fitness
from equation_evolution.core.individual import Individual
from equation_evolution.evolution.codec import (
    ALPHABET,
    DIGITS,
    OPERATORS,
    random_chromosome,
    random_gene,
)
from equation_evolution.evolution.crossover import SinglePointCrossover, get_crossover_strategy
from equation_evolution.evolution.mutation import StructuralMutation, get_mutation_strategy
from equation_evolution.evolution.population import Population
from equation_evolution.evolution.selection import TournamentSelection, get_selection_strategy


def assert_fresh(individual, scorer):
    """Stored solution and fitness match a recomputation from the chromosome."""
    solution = scorer.solve(individual.chromosome)
    assert individual.solution == solution
    assert individual.fitness == fitness(solution, scorer.target)


class TestCodec:
    def test_random_gene_alphabet(self, rng):
        genes = {random_gene(rng) for _ in range(500)}
        assert genes <= set(ALPHABET)
        assert genes & set(DIGITS)
        assert genes & set(OPERATORS)

    def test_random_chromosome_structure(self, rng):
        for _ in range(300):
            chromosome = random_chromosome(rng, 20)
            assert 3 <= len(chromosome) <= 20
            assert chromosome[0] in DIGITS
            assert chromosome[-1] in DIGITS
            for left, right in zip(chromosome, chromosome[1:]):
                assert not (left in OPERATORS and right in OPERATORS)

    def test_random_chromosome_lengths_cover_range(self, rng):
        lengths = {len(random_chromosome(rng, 6)) for _ in range(300)}
        assert lengths == {3, 4, 5, 6}

    def test_random_chromosomes_are_mostly_valid(self, rng, evaluator):
        chromosomes = [random_chromosome(rng, 20) for _ in range(200)]
        valid = [c for c in chromosomes if evaluator.evaluate(c) is not None]
        assert len(valid) > 100

    def test_max_length_too_small(self, rng):
        with pytest.raises(ValueError):
            random_chromosome(rng, 2)


class TestSelection:
    @pytest.fixture
    def population(self):
        scores = [0.1, 0.3, 0.5, 0.7, 0.9, 0.2, 0.4, 0.6, 0.8, 0.95]
        return [Individual(chromosome=str(i), fitness=s) for i, s in enumerate(scores)]

    def test_returns_member(self, population, rng):
        strategy = TournamentSelection(tournament_size=3, rng=rng)
        for _ in range(50):
            assert any(strategy.select(population) is ind for ind in population)

    def test_full_pressure_favours_best(self, population, rng):
        strategy = TournamentSelection(tournament_size=100, rng=rng)
        winners = [strategy.select(population).fitness for _ in range(20)]
        assert max(winners) == 0.95
        assert sum(w == 0.95 for w in winners) >= 19

    def test_size_one_is_uniform(self, population, rng):
        strategy = TournamentSelection(tournament_size=1, rng=rng)
        chosen = {strategy.select(population).chromosome for _ in range(300)}
        assert len(chosen) == len(population)

    def test_ties_keep_first_drawn(self):
        population = [Individual(chromosome=c, fitness=0.5) for c in "abc"]
        rng = random.Random(5)
        first_draw = population[random.Random(5).randrange(3)]
        strategy = TournamentSelection(tournament_size=3, rng=rng)
        assert strategy.select(population) is first_draw

    def test_empty_population(self, rng):
        with pytest.raises(ValueError):
            TournamentSelection(rng=rng).select([])

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            TournamentSelection(tournament_size=0)

    def test_get_selection_strategy(self):
        strategy = get_selection_strategy("tournament", tournament_size=4)
        assert isinstance(strategy, TournamentSelection)
        assert strategy.tournament_size == 4

        with pytest.raises(ValueError):
            get_selection_strategy("invalid")


class TestMutation:
    def test_exactly_one_edit(self, scorer, rng):
        strategy = StructuralMutation(scorer, max_length=20, rng=rng)
        for _ in range(200):
            individual = scorer.score("12+34*5")
            strategy.mutate(individual)
            delta = len(individual.chromosome) - len("12+34*5")
            assert delta in (-1, 0, 1)
            if delta == 0:
                differences = sum(a != b for a, b in zip(individual.chromosome, "12+34*5"))
                assert differences <= 1

    def test_mutated_individual_is_rescored(self, scorer, rng):
        strategy = StructuralMutation(scorer, max_length=20, rng=rng)
        for _ in range(200):
            individual = scorer.score("5*2")
            assert strategy.mutate(individual) is individual
            assert_fresh(individual, scorer)

    def test_respects_length_bounds(self, scorer, rng):
        strategy = StructuralMutation(scorer, max_length=5, rng=rng)
        individual = scorer.score("1+2")
        for _ in range(500):
            strategy.mutate(individual)
            assert 3 <= len(individual.chromosome) <= 5

    def test_available_operations(self, scorer):
        strategy = StructuralMutation(scorer, max_length=5)
        assert strategy.available_operations("123") == ["substitute", "insert"]
        assert strategy.available_operations("1234") == ["substitute", "insert", "delete"]
        assert strategy.available_operations("12345") == ["substitute", "delete"]

    def test_get_mutation_strategy(self, scorer):
        strategy = get_mutation_strategy("structural", scorer=scorer, max_length=10)
        assert isinstance(strategy, StructuralMutation)

        with pytest.raises(ValueError):
            get_mutation_strategy("invalid")


class TestCrossover:
    def test_children_are_scored(self, scorer, rng):
        strategy = SinglePointCrossover(scorer, max_length=20, rng=rng)
        parent_a = scorer.score("12+34")
        parent_b = scorer.score("5*6-7")
        for _ in range(100):
            child = strategy.crossover(parent_a, parent_b)
            assert child is not parent_a and child is not parent_b
            assert_fresh(child, scorer)

    def test_parents_unchanged(self, scorer, rng):
        strategy = SinglePointCrossover(scorer, rng=rng)
        parent_a = scorer.score("12+34")
        parent_b = scorer.score("5*6-7")
        strategy.crossover(parent_a, parent_b)
        assert parent_a.chromosome == "12+34"
        assert parent_b.chromosome == "5*6-7"

    def test_returns_better_candidate(self, scorer):
        parent_a = scorer.score("12+34")
        parent_b = scorer.score("5*6-7")
        rng = random.Random(11)
        first, second = SinglePointCrossover(scorer, rng=random.Random(11)).cut("12+34", "5*6-7")
        child = SinglePointCrossover(scorer, rng=rng).crossover(parent_a, parent_b)

        expected = max(scorer.score(first).fitness, scorer.score(second).fitness)
        assert child.fitness == expected
        assert child.chromosome in (first, second)

    def test_tie_keeps_first_child(self):
        class ConstantEvaluator(ExpressionEvaluator):
            def evaluate(self, expression):
                return 1.0

        scorer = FitnessScorer(10, ConstantEvaluator())
        first, _ = SinglePointCrossover(scorer, rng=random.Random(3)).cut("12+34", "5*6-7")
        strategy = SinglePointCrossover(scorer, rng=random.Random(3))
        child = strategy.crossover(scorer.score("12+34"), scorer.score("5*6-7"))
        assert child.chromosome == first

    def test_cut_composition(self, scorer, rng):
        strategy = SinglePointCrossover(scorer, max_length=100, rng=rng)
        for _ in range(50):
            first, second = strategy.cut("abcdef", "UVWXYZ")
            assert sorted(first + second) == sorted("abcdefUVWXYZ")

    def test_clipped_to_max_length(self, scorer, rng):
        strategy = SinglePointCrossover(scorer, max_length=6, rng=rng)
        for _ in range(50):
            first, second = strategy.cut("1+2+3+4+5", "6*7*8*9*1")
            assert len(first) <= 6 and len(second) <= 6

    def test_get_crossover_strategy(self, scorer):
        strategy = get_crossover_strategy("single_point", scorer=scorer)
        assert isinstance(strategy, SinglePointCrossover)

        with pytest.raises(ValueError):
            get_crossover_strategy("invalid")


class TestPopulation:
    def test_seed_size_and_scores(self, scorer, rng):
        population = Population.seed(25, scorer, max_length=20, rng=rng)
        assert len(population) == 25
        for individual in population:
            assert_fresh(individual, scorer)

    def test_seed_with_chromosomes(self, scorer, rng):
        population = Population.seed(5, scorer, max_length=20, rng=rng, chromosomes=["5*2", "1+1"])
        assert population[0].chromosome == "5*2"
        assert population[1].chromosome == "1+1"
        assert len(population) == 5

    def test_extra_seed_chromosomes_ignored(self, scorer, rng):
        population = Population.seed(2, scorer, max_length=20, rng=rng, chromosomes=["1", "2", "3"])
        assert [ind.chromosome for ind in population] == ["1", "2"]

    @pytest.mark.parametrize("chromosome", ["1+2+3+4", "5 * 2", "(1+2)", "x"])
    def test_rejects_seed_outside_bounds(self, scorer, rng, chromosome):
        with pytest.raises(ValueError, match="Seed"):
            Population.seed(3, scorer, max_length=5, rng=rng, chromosomes=[chromosome])

    def test_rank_descending_and_stable(self):
        individuals = [
            Individual(chromosome="a", fitness=0.2),
            Individual(chromosome="b", fitness=0.9),
            Individual(chromosome="c", fitness=0.2),
        ]
        population = Population(individuals)
        population.rank()
        assert [ind.chromosome for ind in population] == ["b", "a", "c"]
        assert population.best.chromosome == "b"

    def test_elite_are_copies(self, scorer, rng):
        population = Population.seed(10, scorer, max_length=20, rng=rng)
        population.rank()
        elite = population.elite(3)
        assert len(elite) == 3
        for copy, original in zip(elite, population):
            assert copy is not original
            assert copy == original

    def test_replace_enforces_size(self, scorer, rng):
        population = Population.seed(4, scorer, max_length=20, rng=rng)
        with pytest.raises(ValueError):
            population.replace(population.individuals[:3])

    def test_stats(self, scorer):
        population = Population([scorer.score("5*2"), scorer.score("5//2")])
        stats = population.stats(scorer)
        assert stats.best_fitness == 1.0
        assert stats.worst_fitness == pytest.approx(1 / 11)
        assert stats.valid_fraction == 0.5
