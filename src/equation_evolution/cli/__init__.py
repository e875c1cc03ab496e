"""Command-line interface for the Equation Evolution Engine."""
