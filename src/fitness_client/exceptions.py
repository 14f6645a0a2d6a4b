"""Custom exception hierarchy for the fitness API client.

API errors are also :class:`~program_engine.errors.CollaboratorFailure`
so the builder and execution engine treat them as retryable failures.
"""

from __future__ import annotations

from program_engine.errors import CollaboratorFailure, NotFoundFailure


class FitnessClientError(Exception):
    """Base exception for all fitness_client errors."""


class FitnessAPIError(FitnessClientError, CollaboratorFailure):
    """A fitness API call failed (transport error or error response)."""


class FitnessNotFoundError(FitnessAPIError, NotFoundFailure):
    """HTTP 404: the requested program, exercise or result does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=404)


class FitnessRateLimitError(FitnessAPIError):
    """HTTP 429: too many requests, retries exhausted."""

    def __init__(self, message: str = "Rate limited by fitness API") -> None:
        super().__init__(message, status_code=429)
