"""Shared test fixtures: catalog exercises, sample programs, results and a fake clock."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from unittest.mock import MagicMock

import pytest

from program_engine.collaborators import ResultStore
from program_engine.models.enums import BlockType, WeightUnit, WorkoutType
from program_engine.models.exercise import Exercise
from program_engine.models.program import (
    BlockItem,
    ExerciseBlock,
    Prescription,
    Program,
    WorkoutSession,
)
from program_engine.models.result import (
    AdvancedWorkoutResult,
    ResultHandle,
    SetResultSummary,
)


class FakeClock:
    """Manually advanced clock for the execution engine."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def bench() -> Exercise:
    return Exercise(
        id="1",
        name="Bench Press",
        category="Strength",
        primary_muscle="Chest",
        secondary_muscles=("Triceps", "Shoulders"),
        equipment="Barbell",
    )


@pytest.fixture
def row() -> Exercise:
    return Exercise(id="2", name="Barbell Row", category="Strength", primary_muscle="Back")


@pytest.fixture
def squat() -> Exercise:
    return Exercise(id="3", name="Back Squat", category="Strength", primary_muscle="Quadriceps")


@pytest.fixture
def burpee() -> Exercise:
    return Exercise(id="4", name="Burpee", category="Conditioning", primary_muscle="Full Body")


@pytest.fixture
def catalog(bench, row, squat, burpee) -> dict[str, Exercise]:
    return {e.id: e for e in (bench, row, squat, burpee)}


@pytest.fixture
def sample_program(bench, row, squat, burpee) -> Program:
    """Two-session program covering supersets, straight sets, AMRAP and EMOM."""
    push_pull = WorkoutSession(
        title="Push / Pull",
        order_index=0,
        id="s1",
        blocks=(
            ExerciseBlock(
                order_index=0,
                label="A",
                workout_type=WorkoutType.SUPERSETS,
                block_type=BlockType.SUPERSET,
                id="b1",
                items=(
                    BlockItem(
                        order_index=0,
                        exercise_id=bench.id,
                        exercise=bench,
                        id="i1",
                        prescription=Prescription(
                            sets=4, target_reps=8, weight=80.0,
                            weight_unit=WeightUnit.KG, tempo="3010", rest_seconds=90,
                            rpe=8.0, rir=2,
                        ),
                    ),
                    BlockItem(
                        order_index=1,
                        exercise_id=row.id,
                        exercise=row,
                        id="i2",
                        prescription=Prescription(sets=4, min_reps=8, max_reps=12, weight=60.0),
                    ),
                ),
            ),
            ExerciseBlock(
                order_index=1,
                label="Finisher",
                workout_type=WorkoutType.AMRAP,
                block_type=BlockType.AMRAP,
                amrap_duration_seconds=600,
                rest_between_items_seconds=None,
                block_instructions="As many rounds as possible in 10 minutes",
                items=(
                    BlockItem(
                        order_index=0,
                        exercise_id=burpee.id,
                        exercise=burpee,
                        prescription=Prescription(target_reps=10, notes="chest to floor"),
                    ),
                ),
            ),
        ),
    )
    legs = WorkoutSession(
        title="Legs",
        order_index=1,
        blocks=(
            ExerciseBlock(
                order_index=0,
                label="Squat EMOM",
                workout_type=WorkoutType.EMOM,
                block_type=BlockType.EMOM,
                total_rounds=10,
                items=(
                    BlockItem(
                        order_index=0,
                        exercise_id=squat.id,
                        exercise=squat,
                        prescription=Prescription(
                            target_reps=3, weight=225.0, weight_unit=WeightUnit.LB,
                            percentage_1rm=75.0,
                        ),
                    ),
                ),
            ),
        ),
    )
    return Program(title="Hybrid Strength", total_weeks=8, sessions=(push_pull, legs), id="p1")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 3, 10, 18, 0, 0))


@pytest.fixture
def result_store() -> MagicMock:
    store = MagicMock(spec=ResultStore)
    store.start_session.return_value = ResultHandle(id="r-100")
    return store


@pytest.fixture
def make_result():
    """Factory for AdvancedWorkoutResult with sensible defaults."""

    def _make(
        day: date,
        sets: tuple[SetResultSummary, ...] = (),
        **kwargs,
    ) -> AdvancedWorkoutResult:
        volume = sum(s.volume_load for s in sets)
        reps = sum(s.performed_reps or 0 for s in sets)
        defaults = dict(
            session_title="Session",
            total_duration_seconds=3600,
            total_reps=reps,
            total_volume_load=volume,
            set_results=sets,
        )
        defaults.update(kwargs)
        return AdvancedWorkoutResult(date=day, **defaults)

    return _make


def make_set(name: str, weight: float | None, reps: int | None, set_number: int = 1) -> SetResultSummary:
    return SetResultSummary(
        block_label="A",
        block_item_order=0,
        set_number=set_number,
        exercise_name=name,
        performed_reps=reps,
        weight=weight,
    )


@pytest.fixture
def make_set_result():
    return make_set
