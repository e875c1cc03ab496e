"""
Configuration schema for the Equation Evolution Engine.

This module defines all configuration classes using Pydantic for validation
and type safety. The main Config class combines all settings and can be
loaded from YAML files for easy customization.

Key configuration areas:
- EvolutionConfig: Genetic algorithm parameters for a single run
- OutputConfig: Logging and progress reporting options
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, model_validator


class EvolutionConfig(BaseModel):
    """
    Configuration for one evolutionary search run.

    The run configuration is immutable once built: every field is validated
    up front, and any violated invariant rejects the whole configuration
    before a population is ever created.

    Key Parameters:

    **Population Settings**:
    - population_size: Individuals per generation (constant for the run)
    - max_generations: Generation budget (0 = only score the seeded population)

    **Genetic Operators**:
    - mutation_rate: Probability that an offspring is mutated
    - crossover_rate: Probability that an offspring comes from crossover
      rather than being a clone of its first parent
    - elitism_count: Top individuals copied unchanged into the next generation
    - tournament_size: Draws per tournament (higher = stronger selection pressure)

    **Problem**:
    - target: The number the evolved expression should evaluate to
    - max_equation_length: Upper bound on chromosome length
    - convergence_threshold: Best fitness that stops the run early

    Tuning Guidelines:
    - **Fast experiments**: population_size=20, max_generations=100
    - **Balanced (default)**: population_size=50, max_generations=1000
    - **Hard targets**: population_size=200, tournament_size=5
    """

    population_size: int = Field(default=50, ge=1)
    target: float = Field(default=42, allow_inf_nan=False)
    max_generations: int = Field(default=1000, ge=0)
    mutation_rate: float = Field(default=0.1, ge=0, le=1)
    crossover_rate: float = Field(default=0.7, ge=0, le=1)
    elitism_count: int = Field(default=5, ge=0)
    tournament_size: int = Field(default=3, ge=1)
    max_equation_length: int = Field(default=20, ge=3)
    convergence_threshold: float = Field(default=0.99, gt=0, le=1)

    class Config:
        extra = "forbid"
        frozen = True

    @model_validator(mode="after")
    def _check_population_bounds(self) -> "EvolutionConfig":
        if self.elitism_count >= self.population_size:
            raise ValueError(
                f"elitism_count ({self.elitism_count}) must be less than "
                f"population_size ({self.population_size})"
            )
        if self.tournament_size > self.population_size:
            raise ValueError(
                f"tournament_size ({self.tournament_size}) must not exceed "
                f"population_size ({self.population_size})"
            )
        return self

    def with_overrides(self, **overrides) -> "EvolutionConfig":
        """Return a new, re-validated config with the given fields replaced.

        Keys whose value is None are ignored, so optional CLI flags can be
        passed straight through.
        """
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return EvolutionConfig(**data)


class OutputConfig(BaseModel):
    """Configuration for output settings."""
    verbosity: Literal["silent", "minimal", "normal", "verbose", "debug"] = "normal"
    log_interval: int = Field(default=10, ge=1)  # Log progress every N generations

    class Config:
        extra = "forbid"


class Config(BaseModel):
    """
    Main configuration for the Equation Evolution Engine.

    Configuration Sections:
    - **evolution**: Genetic algorithm parameters (validated, immutable)
    - **output**: Logging verbosity and progress reporting

    Usage Patterns:

    **Default Configuration**:
    >>> config = Config()  # target=42, population_size=50, ...

    **YAML Configuration**:
    >>> config = Config.from_yaml("my_config.yaml")
    >>> config.to_yaml("updated_config.yaml")

    **Dictionary Configuration** (unset fields fall back to defaults):
    >>> config = Config.from_dict({"evolution": {"target": 100}})
    """

    evolution: EvolutionConfig = Field(default_factory=EvolutionConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    class Config:
        extra = "forbid"

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data if data is not None else {})

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Load configuration from a dictionary."""
        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(data).__name__}")
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        with open(path, "w") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False)

    def to_dict(self) -> dict:
        """Convert configuration to a dictionary."""
        return self.model_dump()


def get_default_config() -> Config:
    """Get a default configuration."""
    return Config()


def get_quick_config(target: float = 42) -> Config:
    """Get a small configuration for quick experiments and tests."""
    return Config(
        evolution=EvolutionConfig(
            population_size=20,
            target=target,
            max_generations=100,
            elitism_count=2,
        ),
        output=OutputConfig(verbosity="minimal"),
    )
