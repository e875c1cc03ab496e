"""Utility modules for the Equation Evolution Engine."""

from equation_evolution.utils.logging import get_logger, set_verbosity, LogLevel

__all__ = [
    "get_logger",
    "set_verbosity",
    "LogLevel",
]
