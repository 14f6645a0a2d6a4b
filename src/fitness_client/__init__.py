"""Fitness REST API client: all network I/O for programs and results lives here."""

from fitness_client.client import FitnessClient
from fitness_client.exceptions import (
    FitnessAPIError,
    FitnessClientError,
    FitnessNotFoundError,
    FitnessRateLimitError,
)

__all__ = [
    "FitnessAPIError",
    "FitnessClient",
    "FitnessClientError",
    "FitnessNotFoundError",
    "FitnessRateLimitError",
]
