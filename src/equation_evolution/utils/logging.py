"""Logging utilities for the Equation Evolution Engine."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


_console = Console(safe_box=True)


class LogLevel(IntEnum):
    """Log verbosity levels."""
    SILENT = 0
    MINIMAL = 1
    NORMAL = 2
    VERBOSE = 3
    DEBUG = 4


# Standard logging level the handler is set to for each verbosity
_LOGGING_LEVELS = {
    LogLevel.SILENT: logging.CRITICAL + 1,
    LogLevel.MINIMAL: logging.WARNING,
    LogLevel.NORMAL: logging.INFO,
    LogLevel.VERBOSE: logging.DEBUG,
    LogLevel.DEBUG: logging.DEBUG,
}

_verbosity = LogLevel.NORMAL
_logger: logging.Logger | None = None


def set_verbosity(level: LogLevel | str | int) -> None:
    """Set the global verbosity level ("silent" ... "debug", or a LogLevel)."""
    global _verbosity

    _verbosity = LogLevel[level.upper()] if isinstance(level, str) else LogLevel(level)
    if _logger is not None:
        _logger.setLevel(_LOGGING_LEVELS[_verbosity])


def get_verbosity() -> LogLevel:
    return _verbosity


def get_logger() -> logging.Logger:
    """The package logger, attached to a RichHandler on first use."""
    global _logger

    if _logger is None:
        _logger = logging.getLogger("equation_evolution")
        _logger.handlers.clear()
        _logger.propagate = False

        handler = RichHandler(console=_console, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        _logger.addHandler(handler)
        _logger.setLevel(_LOGGING_LEVELS[_verbosity])

    return _logger


def log_event(event: str, level: LogLevel = LogLevel.NORMAL, **fields: Any) -> None:
    """Log ``[EVENT] key=value | ...`` if the current verbosity reaches ``level``."""
    if _verbosity < level:
        return

    message = f"[{event}]"
    if fields:
        message += " " + " | ".join(f"{key}={value}" for key, value in fields.items())

    if level <= LogLevel.MINIMAL:
        get_logger().warning(message)
    elif level == LogLevel.NORMAL:
        get_logger().info(message)
    else:
        get_logger().debug(message)


def log_generation(
    gen: int,
    equation: str,
    best_fitness: float,
    mean_fitness: float,
    error: float,
    **extra: Any,
) -> None:
    """Log generation progress."""
    log_event(
        f"GEN {gen:04d}",
        level=LogLevel.NORMAL,
        best=f"{equation!r}",
        fitness=f"{best_fitness:.4f}",
        mean=f"{mean_fitness:.4f}",
        error=f"{error:.2f}",
        **extra,
    )


def print_header(title: str) -> None:
    """Print a styled header."""
    if _verbosity >= LogLevel.MINIMAL:
        _console.print()
        _console.print(f"[bold blue]{'-' * 60}[/bold blue]")
        _console.print(f"[bold blue]  {title}[/bold blue]")
        _console.print(f"[bold blue]{'-' * 60}[/bold blue]")
        _console.print()


def print_result(equation: str, solution: float, fitness: float, **stats: Any) -> None:
    """Print the final result."""
    if _verbosity >= LogLevel.MINIMAL:
        _console.print()
        _console.print("[bold green]Result[/bold green]")
        _console.print(f"[dim]{'-' * 60}[/dim]")
        _console.print(f"{equation} = {solution:g}", markup=False)
        _console.print(f"[dim]{'-' * 60}[/dim]")

        stat_str = f"Fitness: {fitness:.4f}"
        if stats:
            stat_str += " | " + " | ".join(f"{k}: {v}" for k, v in stats.items())
        _console.print(f"[dim]{stat_str}[/dim]")
        _console.print()
