"""
Sandboxed arithmetic evaluation of candidate expressions.

Chromosomes are arbitrary strings produced by random generation, mutation and
crossover, so most of them are not valid arithmetic. The evaluator turns a
string into a finite number or rejects it, and never lets an exception reach
the caller.

Only a fixed grammar is recognised: numeric literals, binary ``+ - * /``,
unary ``+ -`` and parentheses. Evaluation is delegated to ``simpleeval`` with
its operator table and node handlers cut down to that grammar, and with no
names or functions in scope.
"""

from __future__ import annotations

import ast
import math
import operator
import re
from abc import ABC, abstractmethod

from simpleeval import InvalidExpression, SimpleEval


_DISALLOWED_CHARS = re.compile(r"[^0-9+\-*/().\s]")
_WHITESPACE = re.compile(r"\s+")
_CONSECUTIVE_OPERATORS = re.compile(r"[+\-*/]{2,}")
# Leading zeros of an integer part ("007" -> "7"); Python rejects them as literals.
_LEADING_ZEROS = re.compile(r"(?<![\d.])0+(?=\d)")

ARITHMETIC_OPERATORS = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}

_ALLOWED_NODES = (ast.Expr, ast.Constant, ast.BinOp, ast.UnaryOp)


class ArithmeticEval(SimpleEval):
    """SimpleEval limited to numeric literals and the four arithmetic operators."""

    def __init__(self):
        super().__init__(operators=dict(ARITHMETIC_OPERATORS), functions={}, names={})
        self.nodes = {
            node: handler
            for node, handler in self.nodes.items()
            if node in _ALLOWED_NODES
        }


class ExpressionEvaluator(ABC):
    """
    Abstract base class for expression evaluators.

    An evaluator is a pure function from a candidate string to either a finite
    number or ``None``. The evolutionary core treats every ``None`` the same
    way (an invalid chromosome) and never asks why it was rejected.
    """

    @abstractmethod
    def evaluate(self, expression: str) -> float | None:
        """
        Evaluate a candidate expression.

        Args:
            expression: Arbitrary string, typically a chromosome.

        Returns:
            The finite numeric value of the expression, or None if the
            expression is malformed or its value is not a finite number.
        """
        pass


class SafeEvaluator(ExpressionEvaluator):
    """
    Default evaluator restricted to basic arithmetic.

    Processing steps:
    1. Strip characters outside ``0-9 + - * / ( ) .`` and all whitespace
    2. Reject empty input, unbalanced parentheses and consecutive operators
    3. Evaluate with a restricted ``simpleeval`` instance
    4. Reject division by zero, overflow and non-finite results

    Example:
        >>> evaluator = SafeEvaluator()
        >>> evaluator.evaluate("5*2")
        10.0
        >>> evaluator.evaluate("5//2") is None
        True
    """

    def __init__(self):
        self._engine = ArithmeticEval()

    def evaluate(self, expression: str) -> float | None:
        cleaned = self.clean(expression)
        if not self.is_well_formed(cleaned):
            return None

        try:
            value = self._engine.eval(_LEADING_ZEROS.sub("", cleaned))
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return None
            result = float(value)
        except (
            InvalidExpression,
            SyntaxError,
            ValueError,
            TypeError,
            KeyError,
            ZeroDivisionError,
            OverflowError,
            RecursionError,
        ):
            return None

        if not math.isfinite(result):
            return None
        return result

    @staticmethod
    def clean(expression: str) -> str:
        """Remove characters that can never appear in a valid expression."""
        return _WHITESPACE.sub("", _DISALLOWED_CHARS.sub("", expression))

    @staticmethod
    def is_well_formed(expression: str) -> bool:
        """Basic validation: non-empty, balanced parentheses, no operator runs."""
        if not expression:
            return False

        balance = 0
        for char in expression:
            if char == "(":
                balance += 1
            elif char == ")":
                balance -= 1
                if balance < 0:
                    return False
        if balance != 0:
            return False

        return _CONSECUTIVE_OPERATORS.search(expression) is None
