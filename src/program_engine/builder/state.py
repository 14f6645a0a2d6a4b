"""Builder editing state and its pure transition functions.

``BuilderState`` holds the committed sessions plus a working copy of the
blocks of the session being edited. Every transition returns a new state;
nothing is mutated in place. Transitions that change which session is
current always flush the working blocks first, so switching never loses
edits.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from program_engine.errors import ConstraintViolation, ProgramInvariantError
from program_engine.models.enums import DEFAULT_TOTAL_WEEKS, WorkoutType
from program_engine.models.exercise import Exercise
from program_engine.models.program import (
    BlockItem,
    ExerciseBlock,
    Prescription,
    Program,
    WorkoutSession,
)
from program_engine.registry import (
    block_type_for,
    constraints_for,
    exercise_limit_message,
)


@dataclass(frozen=True)
class BuilderState:
    """Snapshot of an in-progress program edit.

    Attributes:
        sessions: Committed sessions. The entry at ``current_index`` may be
            stale until the working blocks are flushed.
        working_blocks: Blocks of the session currently being edited.
        current_index: Index of the session being edited.
    """

    title: str = ""
    total_weeks: int = DEFAULT_TOTAL_WEEKS
    sessions: tuple[WorkoutSession, ...] = field(
        default_factory=lambda: (WorkoutSession(title=_session_title(0), order_index=0),)
    )
    working_blocks: tuple[ExerciseBlock, ...] = field(default_factory=tuple)
    current_index: int = 0
    program_id: str | None = None

    @property
    def current_session(self) -> WorkoutSession:
        return flush(self).sessions[self.current_index]


def _session_title(index: int) -> str:
    return f"Session {index + 1}"


def _block_label(index: int) -> str:
    return f"Block {index + 1}"


def _check_index(index: int, size: int, what: str) -> None:
    if not 0 <= index < size:
        raise IndexError(f"{what} index {index} out of range (0..{size - 1})")


def _renumber(entries: tuple[Any, ...]) -> tuple[Any, ...]:
    """Rewrite ``order_index`` so it runs 0..n-1 in sequence order."""
    return tuple(
        e if e.order_index == i else replace(e, order_index=i) for i, e in enumerate(entries)
    )


# ---------------------------------------------------------------------------
# Program <-> state
# ---------------------------------------------------------------------------


def _ordered(entries: tuple[Any, ...]) -> tuple[Any, ...]:
    return _renumber(tuple(sorted(entries, key=lambda e: e.order_index)))


def _normalized_session(session: WorkoutSession) -> WorkoutSession:
    blocks = _ordered(tuple(
        replace(b, items=_ordered(b.items)) for b in session.blocks
    ))
    return session if blocks == session.blocks else replace(session, blocks=blocks)


def from_program(program: Program) -> BuilderState:
    """Open an existing program for editing, starting on its first session.

    Stored programs may carry gaps in their order indices; sessions, blocks
    and items are sorted and renumbered 0..n-1 so later appends stay unique.
    """
    sessions = _ordered(tuple(_normalized_session(s) for s in program.sessions))
    if not sessions:
        sessions = (WorkoutSession(title=_session_title(0), order_index=0),)
    return BuilderState(
        title=program.title,
        total_weeks=program.total_weeks,
        sessions=sessions,
        working_blocks=sessions[0].blocks,
        current_index=0,
        program_id=program.id,
    )


def flush(state: BuilderState) -> BuilderState:
    """Commit the working blocks into the current session."""
    current = state.sessions[state.current_index]
    if current.blocks == state.working_blocks:
        return state
    sessions = list(state.sessions)
    sessions[state.current_index] = replace(current, blocks=state.working_blocks)
    return replace(state, sessions=tuple(sessions))


def to_program(state: BuilderState) -> Program:
    flushed = flush(state)
    return Program(
        title=flushed.title,
        total_weeks=flushed.total_weeks,
        sessions=flushed.sessions,
        id=flushed.program_id,
    )


# ---------------------------------------------------------------------------
# Program-level fields
# ---------------------------------------------------------------------------


def set_title(state: BuilderState, title: str) -> BuilderState:
    return replace(state, title=title)


def set_total_weeks(state: BuilderState, weeks: int) -> BuilderState:
    """Set the program length. Range is checked at save, not here."""
    return replace(state, total_weeks=int(weeks))


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------


def add_session(state: BuilderState) -> BuilderState:
    """Append an empty session and make it current."""
    flushed = flush(state)
    index = len(flushed.sessions)
    session = WorkoutSession(title=_session_title(index), order_index=index)
    return replace(
        flushed,
        sessions=flushed.sessions + (session,),
        working_blocks=(),
        current_index=index,
    )


def switch_session(state: BuilderState, index: int) -> BuilderState:
    _check_index(index, len(state.sessions), "Session")
    flushed = flush(state)
    return replace(
        flushed,
        working_blocks=flushed.sessions[index].blocks,
        current_index=index,
    )


def delete_session(state: BuilderState, index: int) -> BuilderState:
    """Remove a session; a program always keeps at least one.

    Raises:
        ProgramInvariantError: If *index* names the only session.
    """
    _check_index(index, len(state.sessions), "Session")
    if len(state.sessions) == 1:
        raise ProgramInvariantError("A program must keep at least one session")

    flushed = flush(state)
    sessions = _renumber(flushed.sessions[:index] + flushed.sessions[index + 1:])

    current = flushed.current_index
    if index < current:
        current -= 1
    current = min(current, len(sessions) - 1)
    return replace(
        flushed,
        sessions=sessions,
        working_blocks=sessions[current].blocks,
        current_index=current,
    )


def rename_session(state: BuilderState, index: int, title: str) -> BuilderState:
    _check_index(index, len(state.sessions), "Session")
    flushed = flush(state)
    sessions = list(flushed.sessions)
    sessions[index] = replace(sessions[index], title=title)
    return replace(flushed, sessions=tuple(sessions))


# ---------------------------------------------------------------------------
# Blocks (always within the current session)
# ---------------------------------------------------------------------------


def add_block(state: BuilderState, workout_type: WorkoutType | str) -> BuilderState:
    wt = WorkoutType.parse(workout_type)
    index = len(state.working_blocks)
    block = ExerciseBlock(
        order_index=index,
        label=_block_label(index),
        workout_type=wt,
        block_type=block_type_for(wt),
    )
    return replace(state, working_blocks=state.working_blocks + (block,))


def update_block_config(
    state: BuilderState, block_index: int, changes: Mapping[str, Any]
) -> BuilderState:
    """Merge *changes* into a block's configuration.

    Changing ``workout_type`` without an explicit ``block_type`` re-derives
    the block type. Existing items are kept even if they now exceed the
    new type's maximum; that surfaces as a save-time warning.
    """
    _check_index(block_index, len(state.working_blocks), "Block")
    block = state.working_blocks[block_index].merged(changes)
    if "workout_type" in changes and "block_type" not in changes:
        block = replace(block, block_type=block_type_for(block.workout_type))
    return _replace_block(state, block_index, block)


def remove_block(state: BuilderState, block_index: int) -> BuilderState:
    _check_index(block_index, len(state.working_blocks), "Block")
    blocks = state.working_blocks[:block_index] + state.working_blocks[block_index + 1:]
    return replace(state, working_blocks=_renumber(blocks))


def _replace_block(state: BuilderState, block_index: int, block: ExerciseBlock) -> BuilderState:
    blocks = list(state.working_blocks)
    blocks[block_index] = block
    return replace(state, working_blocks=tuple(blocks))


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------


def add_exercise_to_block(
    state: BuilderState, block_index: int, exercise: Exercise
) -> BuilderState:
    """Append *exercise* to a block with the default prescription.

    Raises:
        ConstraintViolation: The block already holds the maximum number of
            exercises allowed by its workout type.
    """
    _check_index(block_index, len(state.working_blocks), "Block")
    block = state.working_blocks[block_index]
    constraints = constraints_for(block.workout_type)
    if not constraints.can_add(len(block.items)):
        raise ConstraintViolation(
            exercise_limit_message(block.workout_type),
            workout_type=block.workout_type,
            constraints=constraints,
            current_count=len(block.items),
        )

    item = BlockItem(
        order_index=len(block.items),
        exercise_id=exercise.id,
        prescription=Prescription.default(),
        exercise=exercise,
    )
    return _replace_block(state, block_index, replace(block, items=block.items + (item,)))


def update_prescription(
    state: BuilderState,
    block_index: int,
    item_index: int,
    changes: Mapping[str, Any],
) -> BuilderState:
    _check_index(block_index, len(state.working_blocks), "Block")
    block = state.working_blocks[block_index]
    _check_index(item_index, len(block.items), "Item")

    items = list(block.items)
    item = items[item_index]
    items[item_index] = replace(item, prescription=item.prescription.merged(changes))
    return _replace_block(state, block_index, replace(block, items=tuple(items)))


def remove_exercise(state: BuilderState, block_index: int, item_index: int) -> BuilderState:
    _check_index(block_index, len(state.working_blocks), "Block")
    block = state.working_blocks[block_index]
    _check_index(item_index, len(block.items), "Item")

    items = _renumber(block.items[:item_index] + block.items[item_index + 1:])
    return _replace_block(state, block_index, replace(block, items=items))
