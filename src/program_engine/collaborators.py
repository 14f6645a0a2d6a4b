"""Abstract external collaborators consumed by the builder and execution engine.

Implementations own all network / persistence I/O. Failures must surface as
:class:`~program_engine.errors.CollaboratorFailure` (or its
:class:`~program_engine.errors.NotFoundFailure` subclass) so callers can
retry without losing local state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

from program_engine.models.exercise import Exercise
from program_engine.models.program import Program
from program_engine.models.result import AdvancedWorkoutResult, ResultHandle


class ExerciseCatalog(ABC):
    """Read-only exercise catalog."""

    @abstractmethod
    def fetch_exercise(self, exercise_id: str) -> Exercise:
        """Return one catalog entry; raise NotFoundFailure if absent."""

    @abstractmethod
    def fetch_exercises_all(self) -> list[Exercise]:
        ...


class ProgramStore(ABC):
    """Program persistence."""

    @abstractmethod
    def fetch_program(self, program_id: str) -> Program:
        ...

    @abstractmethod
    def create_program(self, program: Program) -> Program:
        """Persist a new program and return it with generated ids."""

    @abstractmethod
    def update_program(self, program_id: str, program: Program) -> Program:
        ...

    @abstractmethod
    def delete_program(self, program_id: str) -> None:
        ...


class ResultStore(ABC):
    """Server-side workout result records."""

    @abstractmethod
    def start_session(self, session_id: str | None, user_id: str) -> ResultHandle:
        """Open a result record for one execution of *session_id*."""

    @abstractmethod
    def update_result(self, result_id: str, partial_result: Mapping[str, Any]) -> None:
        """Merge *partial_result* (wire-format keys) into the stored result."""

    @abstractmethod
    def finish_result(self, result_id: str) -> None:
        """Finalize a result; the store derives duration and volume totals."""

    @abstractmethod
    def fetch_results_by_user(self, user_id: str) -> list[AdvancedWorkoutResult]:
        ...
