"""Exception hierarchy for the program engine.

Every failure is scoped to the single requested operation and leaves the
in-memory Program / run state untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from program_engine.models.enums import WorkoutType
    from program_engine.registry import WorkoutTypeConstraints


class ProgramEngineError(Exception):
    """Base exception for all program_engine errors."""


class ConstraintViolation(ProgramEngineError):
    """Adding an exercise would exceed the block's workout-type limit."""

    def __init__(
        self,
        message: str,
        workout_type: WorkoutType,
        constraints: WorkoutTypeConstraints,
        current_count: int,
    ) -> None:
        super().__init__(message)
        self.workout_type = workout_type
        self.constraints = constraints
        self.current_count = current_count


class ProgramInvariantError(ProgramEngineError):
    """A structural operation was refused (e.g. deleting the last session)."""


@dataclass(frozen=True)
class ValidationError:
    """A single save-time problem. Not an exception; collected into a list."""

    field: str
    message: str


class ProgramValidationFailed(ProgramEngineError):
    """Raised by save() when the program has one or more ValidationErrors."""

    def __init__(self, errors: list[ValidationError]) -> None:
        summary = "; ".join(f"{e.field}: {e.message}" for e in errors)
        super().__init__(f"Program failed validation: {summary}")
        self.errors = errors


class IllegalStateError(ProgramEngineError):
    """An execution transition was requested from the wrong state."""


class CollaboratorFailure(ProgramEngineError):
    """An external persistence/API call failed. Safe to retry."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundFailure(CollaboratorFailure):
    """A referenced Program, Exercise or Result does not exist."""

    def __init__(self, message: str, status_code: int | None = 404) -> None:
        super().__init__(message, status_code=status_code)
