"""Execution run state and its pure transition functions.

A run walks one session: NOT_STARTED -> RUNNING -> FINISHED. Elapsed time
is never stored; it is always ``now - started_at`` so ticks cannot drift.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime

from program_engine.errors import IllegalStateError
from program_engine.models.enums import (
    MAX_RATING,
    MIN_RATING,
    EmomCounter,
    ExecutionState,
)
from program_engine.models.program import WorkoutSession


@dataclass(frozen=True)
class LoggedSet:
    """One set as logged during the run, keyed by block position and item order."""

    block_index: int
    item_order: int
    set_number: int
    performed_reps: int
    weight: float | None = None
    rpe: float | None = None
    rest_taken_seconds: int | None = None


@dataclass(frozen=True)
class RunMetrics:
    """Workout-type-specific counters; every counter is floored at 0."""

    rounds: int = 0
    circuit_rounds: int = 0
    emom_completed: int = 0
    emom_failed: int = 0
    tabata_rounds: int = 0
    wod_result: str | None = None


@dataclass(frozen=True)
class RunState:
    session: WorkoutSession
    status: ExecutionState = ExecutionState.NOT_STARTED
    result_id: str | None = None
    started_at: datetime | None = None
    current_block: int = 0
    logged_sets: tuple[LoggedSet, ...] = field(default_factory=tuple)
    metrics: RunMetrics = field(default_factory=RunMetrics)
    workout_quality: int | None = None
    workout_enjoyment: int | None = None
    notes: str | None = None

    @property
    def block_count(self) -> int:
        return len(self.session.blocks)

    def elapsed_seconds(self, now: datetime) -> int:
        if self.started_at is None:
            return 0
        return max(int((now - self.started_at).total_seconds()), 0)


def _require(state: RunState, status: ExecutionState, action: str) -> None:
    if state.status != status:
        raise IllegalStateError(
            f"Cannot {action}: session is {state.status.name}, expected {status.name}"
        )


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


def started(state: RunState, result_id: str, now: datetime) -> RunState:
    _require(state, ExecutionState.NOT_STARTED, "start")
    return replace(
        state,
        status=ExecutionState.RUNNING,
        result_id=result_id,
        started_at=now,
        current_block=0,
    )


def finished(state: RunState) -> RunState:
    _require(state, ExecutionState.RUNNING, "finish")
    return replace(state, status=ExecutionState.FINISHED)


# ---------------------------------------------------------------------------
# Navigation (clamped, no wraparound)
# ---------------------------------------------------------------------------


def moved(state: RunState, delta: int) -> RunState:
    _require(state, ExecutionState.RUNNING, "change block")
    if state.block_count == 0:
        return state
    target = min(max(state.current_block + delta, 0), state.block_count - 1)
    if target == state.current_block:
        return state
    return replace(state, current_block=target)


# ---------------------------------------------------------------------------
# Set log
# ---------------------------------------------------------------------------


def with_set(state: RunState, logged: LoggedSet) -> RunState:
    _require(state, ExecutionState.RUNNING, "log a set")
    return replace(state, logged_sets=state.logged_sets + (logged,))


def next_set_number(state: RunState, block_index: int, item_order: int) -> int:
    """1 + the highest set number logged so far for this item."""
    numbers = [
        s.set_number for s in state.logged_sets
        if s.block_index == block_index and s.item_order == item_order
    ]
    return max(numbers, default=0) + 1


# ---------------------------------------------------------------------------
# Counters
# ---------------------------------------------------------------------------


def _bump(value: int, delta: int) -> int:
    return max(value + delta, 0)


def with_rounds(state: RunState, delta: int) -> RunState:
    _require(state, ExecutionState.RUNNING, "adjust rounds")
    m = state.metrics
    return replace(state, metrics=replace(m, rounds=_bump(m.rounds, delta)))


def with_circuit_rounds(state: RunState, delta: int) -> RunState:
    _require(state, ExecutionState.RUNNING, "adjust circuit rounds")
    m = state.metrics
    return replace(state, metrics=replace(m, circuit_rounds=_bump(m.circuit_rounds, delta)))


def with_emom_minutes(state: RunState, counter: EmomCounter, delta: int) -> RunState:
    _require(state, ExecutionState.RUNNING, "adjust EMOM minutes")
    m = state.metrics
    if counter == EmomCounter.COMPLETED:
        m = replace(m, emom_completed=_bump(m.emom_completed, delta))
    else:
        m = replace(m, emom_failed=_bump(m.emom_failed, delta))
    return replace(state, metrics=m)


def with_tabata_rounds(state: RunState, delta: int) -> RunState:
    _require(state, ExecutionState.RUNNING, "adjust Tabata rounds")
    m = state.metrics
    return replace(state, metrics=replace(m, tabata_rounds=_bump(m.tabata_rounds, delta)))


def with_wod_result(state: RunState, text: str | None) -> RunState:
    _require(state, ExecutionState.RUNNING, "record a WOD result")
    return replace(state, metrics=replace(state.metrics, wod_result=text))


# ---------------------------------------------------------------------------
# Subjective inputs
# ---------------------------------------------------------------------------


def _check_rating(name: str, value: int | None) -> None:
    if value is not None and not MIN_RATING <= value <= MAX_RATING:
        raise ValueError(f"{name} must be between {MIN_RATING} and {MAX_RATING}, got {value}")


def with_ratings(state: RunState, quality: int | None, enjoyment: int | None) -> RunState:
    _require(state, ExecutionState.RUNNING, "rate the workout")
    _check_rating("workout_quality", quality)
    _check_rating("workout_enjoyment", enjoyment)
    return replace(state, workout_quality=quality, workout_enjoyment=enjoyment)


def with_notes(state: RunState, notes: str | None) -> RunState:
    _require(state, ExecutionState.RUNNING, "add notes")
    return replace(state, notes=notes)
