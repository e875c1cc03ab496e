"""Chromosome alphabet and random chromosome generation."""

from __future__ import annotations

import random

DIGITS = "0123456789"
OPERATORS = "+-*/"
ALPHABET = DIGITS + OPERATORS

MIN_EQUATION_LENGTH = 3

# Chance that a digit is followed by another digit instead of an operator.
DIGIT_RUN_PROBABILITY = 0.3


def random_gene(rng: random.Random) -> str:
    """Random character: an operator or a digit with equal probability."""
    charset = OPERATORS if rng.random() > 0.5 else DIGITS
    return rng.choice(charset)


def random_chromosome(rng: random.Random, max_length: int) -> str:
    """
    Generate a random expression biased towards valid arithmetic.

    The length is uniform in ``[3, max_length]``. Characters alternate
    between digits and operators: a digit is followed by an operator with
    probability 0.7 (otherwise another digit), an operator is always followed
    by a digit, and the last character is always a digit. The result never
    starts or ends with an operator and never has two operators in a row.
    Validity is still decided by the evaluator.
    """
    if max_length < MIN_EQUATION_LENGTH:
        raise ValueError(f"max_length must be at least {MIN_EQUATION_LENGTH}, got {max_length}")

    length = rng.randint(MIN_EQUATION_LENGTH, max_length)
    genes = []
    expecting_operator = False

    for position in range(length):
        is_last = position == length - 1
        if expecting_operator and not is_last and rng.random() > DIGIT_RUN_PROBABILITY:
            genes.append(rng.choice(OPERATORS))
            expecting_operator = False
        else:
            genes.append(rng.choice(DIGITS))
            expecting_operator = True

    return "".join(genes)
