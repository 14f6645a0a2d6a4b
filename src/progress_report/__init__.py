"""Command-line progress report built on the fitness API client."""
