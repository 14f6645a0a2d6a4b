"""ExecutionEngine: runs one workout session and produces its result.

Only ``start`` and ``finish`` talk to the result store, one call at a
time. Everything in between is local buffering that cannot fail on I/O.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable

from program_engine.collaborators import ResultStore
from program_engine.errors import CollaboratorFailure, IllegalStateError
from program_engine.execution import run_state as transitions
from program_engine.execution.run_state import LoggedSet, RunState
from program_engine.models.enums import (
    DEFAULT_WEIGHT_UNIT,
    EmomCounter,
    ExecutionState,
    MetricKind,
)
from program_engine.models.program import ExerciseBlock, WorkoutSession
from program_engine.models.result import (
    AdvancedWorkoutResult,
    ResultHandle,
    SetResultSummary,
    total_reps,
    total_volume_load,
)
from program_engine.registry import is_circuit, tracked_metrics
from program_engine.serialization.wire import result_to_wire

logger = logging.getLogger(__name__)


class ExecutionEngine:
    """State machine for a single live session.

    Args:
        results: Result store used to open and finalize the result record.
        clock: Returns the current time; injectable for tests.
    """

    def __init__(
        self,
        results: ResultStore,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._results = results
        self._clock = clock or datetime.now
        self._run: RunState | None = None

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def status(self) -> ExecutionState:
        return self._run.status if self._run is not None else ExecutionState.NOT_STARTED

    @property
    def run_state(self) -> RunState | None:
        return self._run

    @property
    def current_block_index(self) -> int:
        return self._active().current_block

    @property
    def current_block(self) -> ExerciseBlock | None:
        run = self._active()
        if not run.session.blocks:
            return None
        return run.session.blocks[run.current_block]

    def current_metrics(self) -> frozenset[MetricKind]:
        """Counters that apply to the current block's workout type."""
        block = self.current_block
        return tracked_metrics(block.workout_type) if block is not None else frozenset()

    def elapsed_seconds(self) -> int:
        """Wall-clock seconds since start; recomputed on every call."""
        if self._run is None:
            return 0
        return self._run.elapsed_seconds(self._clock())

    def next_set_number(self, block_index: int, item_order: int) -> int:
        return transitions.next_set_number(self._active(), block_index, item_order)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self, session: WorkoutSession, user_id: str) -> ResultHandle:
        """Open a result record and begin running *session*.

        Raises:
            IllegalStateError: A session is already running.
            CollaboratorFailure: The store call failed; nothing is started.
        """
        if self.status == ExecutionState.RUNNING:
            raise IllegalStateError("A session is already running")

        try:
            handle = self._results.start_session(session.id, user_id)
        except CollaboratorFailure as exc:
            logger.warning("Could not start session %r: %s", session.title, exc)
            raise

        self._run = transitions.started(RunState(session=session), handle.id, self._clock())
        logger.info(
            "Started session %r (result=%s, %d blocks)",
            session.title, handle.id, len(session.blocks),
        )
        return handle

    def finish(self) -> AdvancedWorkoutResult:
        """Persist the run and move to FINISHED.

        Sends the aggregated result, then asks the store to finalize it.
        If either call fails the run stays RUNNING and can be retried.

        Raises:
            IllegalStateError: The session is not running (including a
                second ``finish``); no store call is made.
            CollaboratorFailure: A store call failed.
        """
        run = self._active()
        transitions.finished(run)  # state check only

        result = self.build_result()
        payload = result_to_wire(result)
        try:
            self._results.update_result(run.result_id, payload)
            self._results.finish_result(run.result_id)
        except CollaboratorFailure as exc:
            logger.warning("Could not finish result %s, still running: %s", run.result_id, exc)
            raise

        self._run = transitions.finished(run)
        logger.info(
            "Finished session %r in %ds: %d sets, %d reps, %.1f volume",
            result.session_title, result.total_duration_seconds,
            len(result.set_results), result.total_reps, result.total_volume_load,
        )
        return replace(result, id=run.result_id)

    def build_result(self) -> AdvancedWorkoutResult:
        """Aggregate the run so far into a result record (no I/O)."""
        run = self._active()
        now = self._clock()
        sets = tuple(self._summarize(s, run.session) for s in run.logged_sets)
        m = run.metrics
        return AdvancedWorkoutResult(
            date=now.date(),
            session_title=run.session.title,
            total_duration_seconds=run.elapsed_seconds(now),
            total_reps=total_reps(sets),
            total_volume_load=total_volume_load(sets),
            set_results=sets,
            total_rounds=_positive(m.rounds),
            wod_result=m.wod_result if m.wod_result and m.wod_result.strip() else None,
            emom_minutes_completed=_positive(m.emom_completed),
            emom_failed_minutes=_positive(m.emom_failed),
            tabata_rounds_completed=_positive(m.tabata_rounds),
            circuit_rounds_completed=_positive(m.circuit_rounds),
            workout_quality=run.workout_quality,
            workout_enjoyment=run.workout_enjoyment,
            notes=run.notes,
        )

    # ------------------------------------------------------------------
    # Set logging
    # ------------------------------------------------------------------

    def log_set(
        self,
        block_index: int,
        item_order: int,
        set_number: int,
        performed_reps: int,
        weight: float | None = None,
        rpe: float | None = None,
        rest_taken_seconds: int | None = None,
    ) -> None:
        """Buffer one performed set. Never touches the network."""
        run = self._active()
        block = _block_at(run.session, block_index)
        if not any(i.order_index == item_order for i in block.items):
            raise IndexError(f"Block {block_index} has no item with order {item_order}")
        self._run = transitions.with_set(run, LoggedSet(
            block_index=block_index,
            item_order=item_order,
            set_number=set_number,
            performed_reps=performed_reps,
            weight=weight,
            rpe=rpe,
            rest_taken_seconds=rest_taken_seconds,
        ))

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def advance_block(self) -> int:
        self._run = transitions.moved(self._active(), +1)
        return self._run.current_block

    def retreat_block(self) -> int:
        self._run = transitions.moved(self._active(), -1)
        return self._run.current_block

    # ------------------------------------------------------------------
    # Workout-type counters
    # ------------------------------------------------------------------

    def adjust_round_counter(self, delta: int) -> int:
        self._run = transitions.with_rounds(self._active(), delta)
        return self._run.metrics.rounds

    def adjust_circuit_rounds(self, delta: int) -> int:
        self._run = transitions.with_circuit_rounds(self._active(), delta)
        return self._run.metrics.circuit_rounds

    def adjust_rounds(self, delta: int) -> int:
        """Round tracker: circuit blocks use the circuit counter, others the generic one."""
        block = self.current_block
        if block is not None and is_circuit(block.workout_type):
            return self.adjust_circuit_rounds(delta)
        return self.adjust_round_counter(delta)

    def adjust_emom_minutes(self, counter: EmomCounter, delta: int) -> int:
        self._run = transitions.with_emom_minutes(self._active(), counter, delta)
        m = self._run.metrics
        return m.emom_completed if counter == EmomCounter.COMPLETED else m.emom_failed

    def adjust_tabata_rounds(self, delta: int) -> int:
        self._run = transitions.with_tabata_rounds(self._active(), delta)
        return self._run.metrics.tabata_rounds

    def set_wod_result(self, text: str | None) -> None:
        self._run = transitions.with_wod_result(self._active(), text)

    # ------------------------------------------------------------------
    # Subjective inputs
    # ------------------------------------------------------------------

    def set_ratings(self, quality: int | None, enjoyment: int | None) -> None:
        self._run = transitions.with_ratings(self._active(), quality, enjoyment)

    def set_notes(self, notes: str | None) -> None:
        self._run = transitions.with_notes(self._active(), notes)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _active(self) -> RunState:
        if self._run is None:
            raise IllegalStateError("No session has been started")
        return self._run

    @staticmethod
    def _summarize(logged: LoggedSet, session: WorkoutSession) -> SetResultSummary:
        block = session.blocks[logged.block_index]
        item = next(i for i in block.items if i.order_index == logged.item_order)
        return SetResultSummary(
            block_label=block.label,
            block_item_order=logged.item_order,
            set_number=logged.set_number,
            exercise_name=item.exercise_name or item.exercise_id,
            target_reps=item.prescription.effective_target_reps,
            performed_reps=logged.performed_reps,
            weight=logged.weight,
            weight_unit=item.prescription.weight_unit or DEFAULT_WEIGHT_UNIT,
            rpe=logged.rpe,
            rest_taken_seconds=logged.rest_taken_seconds,
        )


def _block_at(session: WorkoutSession, block_index: int) -> ExerciseBlock:
    if not 0 <= block_index < len(session.blocks):
        raise IndexError(f"Block index {block_index} out of range")
    return session.blocks[block_index]


def _positive(value: int) -> int | None:
    return value if value > 0 else None
