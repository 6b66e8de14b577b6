"""Command-line interface for the eplite client."""
