"""
Equation Evolution Engine

Searches, with a genetic algorithm, for a short arithmetic expression (digits
and ``+ - * /``) whose value matches a target number.

## API Reference

### Simple Interface
```python
from equation_evolution import find_equation

result = find_equation(42, seed=7)
print(result.equation, "=", result.solution)
print(f"Fitness: {result.fitness:.4f}")
```

### Advanced Interface
```python
import random
from equation_evolution import EvolutionConfig, EvolutionLoop

config = EvolutionConfig(target=1234, population_size=200, tournament_size=5)
loop = EvolutionLoop(config, rng=random.Random(0))
result = loop.run()
print(result.to_dict())
print(loop.history())  # best fitness per generation
```

### CLI Usage
```bash
equation-evolve run --target 42
equation-evolve run --target 1234 --population-size 200 --seed 3 --output run.json
equation-evolve eval "5*2" --target 10
```
"""

from equation_evolution.config import (
    Config,
    EvolutionConfig,
    OutputConfig,
)
from equation_evolution.core.evaluator import ExpressionEvaluator, SafeEvaluator
from equation_evolution.core.fitness import FitnessScorer, fitness
from equation_evolution.core.individual import Individual
from equation_evolution.evolution.loop import EvolutionLoop, EvolutionResult
from equation_evolution.search import find_equation

__version__ = "0.1.0"

__all__ = [
    # Main interfaces
    "find_equation",     # Simple one-call search
    "EvolutionLoop",     # Full driver with history access
    "EvolutionResult",   # Result dataclass
    "Individual",        # Scored candidate expression

    # Scoring
    "ExpressionEvaluator",
    "SafeEvaluator",
    "FitnessScorer",
    "fitness",

    # Configuration classes
    "Config",            # Main configuration
    "EvolutionConfig",   # Run parameters
    "OutputConfig",      # Logging and progress reporting
]
