"""ProgramBuilder: in-memory construction and editing of a Program.

Wraps an immutable :class:`BuilderState` and applies the pure transitions
from :mod:`program_engine.builder.state`. A rejected operation raises and
leaves the current state untouched.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping

from program_engine.builder import state as transitions
from program_engine.builder.state import BuilderState
from program_engine.builder.validation import BlockWarning, validate, warnings
from program_engine.collaborators import ExerciseCatalog, ProgramStore
from program_engine.errors import (
    ConstraintViolation,
    ProgramInvariantError,
    ProgramValidationFailed,
    ValidationError,
)
from program_engine.models.enums import DEFAULT_TOTAL_WEEKS, WorkoutType
from program_engine.models.exercise import Exercise
from program_engine.models.program import ExerciseBlock, Program
from program_engine.serialization.wire import from_wire_format, to_wire_format

logger = logging.getLogger(__name__)


class ProgramBuilder:
    """Builds and edits a Program under the workout-type constraints.

    Usage::

        builder = ProgramBuilder(title="Upper / Lower")
        builder.add_block(WorkoutType.SUPERSETS)
        builder.add_exercise_to_block(0, bench)
        builder.add_exercise_to_block(0, row)
        saved = builder.save(store)
    """

    def __init__(
        self,
        title: str = "",
        total_weeks: int = DEFAULT_TOTAL_WEEKS,
        *,
        state: BuilderState | None = None,
    ) -> None:
        self._state = state if state is not None else BuilderState(
            title=title, total_weeks=total_weeks
        )

    @classmethod
    def from_program(cls, program: Program) -> "ProgramBuilder":
        return cls(state=transitions.from_program(program))

    @classmethod
    def from_wire_format(
        cls,
        payload: Mapping[str, Any],
        exercises: Mapping[str, Exercise] | None = None,
    ) -> "ProgramBuilder":
        return cls.from_program(from_wire_format(payload, exercises))

    @classmethod
    def load(
        cls, program_id: str, store: ProgramStore, catalog: ExerciseCatalog
    ) -> "ProgramBuilder":
        """Fetch a stored program and resolve every item's exercise.

        Raises:
            NotFoundFailure: The program or a referenced exercise is missing.
            CollaboratorFailure: A store or catalog call failed.
        """
        program = store.fetch_program(program_id)
        lookup = {
            ex_id: catalog.fetch_exercise(ex_id) for ex_id in sorted(program.exercise_ids())
        }
        logger.info(
            "Loaded program %s (%d sessions, %d exercises)",
            program_id, len(program.sessions), len(lookup),
        )
        return cls.from_program(_attach_exercises(program, lookup))

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def state(self) -> BuilderState:
        return self._state

    @property
    def program(self) -> Program:
        """The edited program with all pending session edits applied."""
        return transitions.to_program(self._state)

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def current_blocks(self) -> tuple[ExerciseBlock, ...]:
        return self._state.working_blocks

    @property
    def session_count(self) -> int:
        return len(self._state.sessions)

    def to_wire_format(self) -> dict:
        return to_wire_format(self.program)

    # ------------------------------------------------------------------
    # Program / session operations
    # ------------------------------------------------------------------

    def set_title(self, title: str) -> None:
        self._state = transitions.set_title(self._state, title)

    def set_total_weeks(self, weeks: int) -> None:
        self._state = transitions.set_total_weeks(self._state, weeks)

    def add_session(self) -> int:
        """Append an empty session, make it current and return its index."""
        self._state = transitions.add_session(self._state)
        return self._state.current_index

    def switch_session(self, index: int) -> None:
        self._state = transitions.switch_session(self._state, index)

    def delete_session(self, index: int) -> None:
        try:
            self._state = transitions.delete_session(self._state, index)
        except ProgramInvariantError as exc:
            logger.warning("Refused to delete session %d: %s", index, exc)
            raise

    def rename_session(self, index: int, title: str) -> None:
        self._state = transitions.rename_session(self._state, index, title)

    # ------------------------------------------------------------------
    # Block / item operations (current session)
    # ------------------------------------------------------------------

    def add_block(self, workout_type: WorkoutType | str = WorkoutType.STRAIGHT_SETS) -> int:
        """Append a block to the current session and return its index."""
        self._state = transitions.add_block(self._state, workout_type)
        return len(self._state.working_blocks) - 1

    def add_exercise_to_block(self, block_index: int, exercise: Exercise) -> None:
        try:
            self._state = transitions.add_exercise_to_block(self._state, block_index, exercise)
        except ConstraintViolation as exc:
            logger.warning(
                "Rejected %s for block %d (%s, %d/%s): %s",
                exercise.name, block_index, exc.workout_type.name,
                exc.current_count, exc.constraints.max_exercises, exc,
            )
            raise

    def update_prescription(
        self, block_index: int, item_index: int, changes: Mapping[str, Any]
    ) -> None:
        self._state = transitions.update_prescription(
            self._state, block_index, item_index, changes
        )

    def update_block_config(self, block_index: int, changes: Mapping[str, Any]) -> None:
        self._state = transitions.update_block_config(self._state, block_index, changes)

    def remove_block(self, block_index: int) -> None:
        self._state = transitions.remove_block(self._state, block_index)

    def remove_exercise(self, block_index: int, item_index: int) -> None:
        self._state = transitions.remove_exercise(self._state, block_index, item_index)

    # ------------------------------------------------------------------
    # Validation / persistence
    # ------------------------------------------------------------------

    def validate(self) -> list[ValidationError]:
        return validate(self.program)

    def warnings(self) -> list[BlockWarning]:
        return warnings(self.program)

    def save(self, store: ProgramStore) -> Program:
        """Validate and persist the program.

        Creates the program when it has no id yet, otherwise updates it.
        The persisted copy (with generated ids) replaces the edited one;
        the current session index is kept.

        Raises:
            ProgramValidationFailed: One or more blocking problems; nothing
                is sent to the store.
            CollaboratorFailure: The store call failed; local edits are kept.
        """
        program = self.program
        errors = validate(program)
        if errors:
            logger.warning(
                "Save of %r blocked by %d validation error(s)", program.title, len(errors)
            )
            raise ProgramValidationFailed(errors)

        for warning in warnings(program):
            logger.warning("Program %r: %s", program.title, warning)

        if program.id is None:
            saved = store.create_program(program)
        else:
            saved = store.update_program(program.id, program)

        lookup = {
            item.exercise_id: item.exercise
            for session in program.sessions
            for block in session.blocks
            for item in block.items
            if item.exercise is not None
        }
        restored = transitions.from_program(_attach_exercises(saved, lookup))
        index = min(self._state.current_index, len(restored.sessions) - 1)
        self._state = transitions.switch_session(restored, index)
        logger.info("Saved program %r (id=%s)", saved.title, saved.id)
        return self.program


def _attach_exercises(program: Program, lookup: Mapping[str, Exercise]) -> Program:
    """Return *program* with every item's ``exercise`` resolved from *lookup*."""
    sessions = tuple(
        replace(session, blocks=tuple(
            replace(block, items=tuple(
                replace(item, exercise=lookup.get(item.exercise_id, item.exercise))
                for item in block.items
            ))
            for block in session.blocks
        ))
        for session in program.sessions
    )
    return replace(program, sessions=sessions)
