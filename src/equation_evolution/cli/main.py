"""
Main CLI application for the equation search.

Commands:
- run: Evolve an expression that evaluates to a target number
- eval: Evaluate a single expression with the sandboxed evaluator
- version: Show version information
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console

app = typer.Typer(
    name="equation-evolve",
    help="""
Equation Evolution Engine

Genetic search for a short arithmetic expression (digits and + - * /)
whose value matches a target number.

Quick start:
  equation-evolve run --target 42
  equation-evolve run --target 1234 --population-size 200 --seed 3
  equation-evolve eval "5*2" --target 10

For help with any command: equation-evolve COMMAND --help
""",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


@app.command()
def run(
    target: Optional[float] = typer.Option(
        None,
        "--target", "-t",
        help="Number the evolved expression should evaluate to (default 42)",
    ),
    population_size: Optional[int] = typer.Option(
        None,
        "--population-size", "-p",
        help="Individuals per generation (default 50)",
    ),
    max_generations: Optional[int] = typer.Option(
        None,
        "--max-generations", "-g",
        help="Generation budget; 0 only scores the initial population (default 1000)",
    ),
    mutation_rate: Optional[float] = typer.Option(
        None,
        "--mutation-rate",
        help="Probability that an offspring is mutated, 0-1 (default 0.1)",
    ),
    crossover_rate: Optional[float] = typer.Option(
        None,
        "--crossover-rate",
        help="Probability that an offspring comes from crossover, 0-1 (default 0.7)",
    ),
    elitism_count: Optional[int] = typer.Option(
        None,
        "--elitism",
        help="Top individuals copied unchanged each generation (default 5)",
    ),
    tournament_size: Optional[int] = typer.Option(
        None,
        "--tournament-size", "-k",
        help="Draws per tournament; higher = stronger selection pressure (default 3)",
    ),
    max_equation_length: Optional[int] = typer.Option(
        None,
        "--max-length",
        help="Maximum expression length, at least 3 (default 20)",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed", "-s",
        help="Random seed for a reproducible run",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="YAML config file. Command-line options override its values",
        exists=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="Save the result and fitness history to a JSON file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose output",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output (logs every mutation)",
    ),
    silent: bool = typer.Option(
        False,
        "--silent",
        help="Suppress all output except the final equation",
    ),
):
    """
    Evolve an arithmetic expression that evaluates to the target.

    Exits with 0 when the search converged, 1 when the generation budget ran
    out first (the best expression found is still reported) and 2 when the
    configuration is invalid.

    Examples:
        # Default search for 42
        equation-evolve run

        # Bigger population, reproducible
        equation-evolve run --target 1234 -p 200 --seed 3

        # Save results for analysis
        equation-evolve run --target 99 --output results.json
    """
    from equation_evolution.config import Config
    from equation_evolution.search import find_equation
    from equation_evolution.utils.logging import print_header, print_result, set_verbosity

    # Determine verbosity
    verbosity = None
    if silent:
        verbosity = "silent"
    elif debug:
        verbosity = "debug"
    elif verbose:
        verbosity = "verbose"

    try:
        cfg = Config.from_yaml(config) if config else Config()
        if verbosity:
            cfg.output.verbosity = verbosity
        set_verbosity(cfg.output.verbosity)

        goal = target if target is not None else cfg.evolution.target
        print_header(f"Evolving an equation for {goal:g}")

        result = find_equation(
            target=target,
            config=cfg,
            seed=seed,
            verbosity=cfg.output.verbosity,
            population_size=population_size,
            max_generations=max_generations,
            mutation_rate=mutation_rate,
            crossover_rate=crossover_rate,
            elitism_count=elitism_count,
            tournament_size=tournament_size,
            max_equation_length=max_equation_length,
        )
    except (ValidationError, ValueError, yaml.YAMLError) as e:
        console.print("[red]Invalid configuration:[/red]")
        console.print(str(e), markup=False)
        raise typer.Exit(2)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(130)

    if silent:
        console.print(f"{result.equation} = {result.solution:g}", markup=False)
    else:
        print_result(
            result.equation,
            result.solution,
            result.fitness,
            generations=result.generations,
            stop=result.stop_reason,
        )

    if output:
        output_data = {
            **result.to_dict(),
            "converged": result.converged,
            "generations": result.generations,
            "stop_reason": result.stop_reason,
            "history": result.history,
        }
        with open(output, "w", encoding="utf-8") as f:
            json.dump(output_data, f, indent=2)
        if not silent:
            console.print(f"[dim]Results saved to {output}[/dim]")

    if not result.converged:
        if not silent:
            console.print("[yellow]No exact equation found within the generation limit[/yellow]")
            console.print("[dim]   Try: --population-size 200 --tournament-size 5[/dim]")
        raise typer.Exit(1)


@app.command("eval")
def evaluate(
    expression: str = typer.Argument(..., help="Arithmetic expression, e.g. \"5*2\""),
    target: float = typer.Option(
        42,
        "--target", "-t",
        help="Target used to compute the fitness",
    ),
):
    """Evaluate one expression and show its value and fitness."""
    from equation_evolution.core.fitness import FitnessScorer

    scorer = FitnessScorer(target)
    value = scorer.evaluator.evaluate(expression)
    individual = scorer.score(expression)

    if value is None:
        console.print("[yellow]Invalid expression (scored as 0)[/yellow]")
    console.print(f"solution: {individual.solution:g}")
    console.print(f"fitness: {individual.fitness:.4f}")


@app.command()
def version():
    """Show version and dependency information."""
    from equation_evolution import __version__

    console.print(f"\n[bold]equation-evolution[/bold] v{__version__}\n")

    import pydantic

    console.print(f"  pydantic: {pydantic.__version__}")
    console.print(f"  typer: {typer.__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
