"""Post-execution records: per-set summaries and the session result."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from program_engine.models.enums import DEFAULT_WEIGHT_UNIT, WeightUnit


@dataclass(frozen=True)
class ResultHandle:
    """Identity of a server-side result record opened by ``start_session``."""

    id: str


@dataclass(frozen=True)
class SetResultSummary:
    """One performed set, as logged by the execution engine."""

    block_label: str
    block_item_order: int
    set_number: int
    exercise_name: str
    target_reps: int | None = None
    performed_reps: int | None = None
    weight: float | None = None
    weight_unit: WeightUnit = DEFAULT_WEIGHT_UNIT
    rpe: float | None = None
    rest_taken_seconds: int | None = None

    @property
    def volume_load(self) -> float:
        """weight x performed reps; sets without either contribute nothing."""
        if self.weight is None or self.performed_reps is None:
            return 0.0
        return self.weight * self.performed_reps


@dataclass(frozen=True)
class AdvancedWorkoutResult:
    """Outcome of one executed session.

    Type-specific counters are None when the session never used them.
    ``workout_quality`` and ``workout_enjoyment`` are 1-10 self-ratings.
    """

    date: date
    session_title: str
    total_duration_seconds: int = 0
    total_reps: int = 0
    total_volume_load: float = 0.0
    set_results: tuple[SetResultSummary, ...] = field(default_factory=tuple)
    total_rounds: int | None = None
    wod_result: str | None = None
    emom_minutes_completed: int | None = None
    emom_failed_minutes: int | None = None
    tabata_rounds_completed: int | None = None
    circuit_rounds_completed: int | None = None
    workout_quality: int | None = None
    workout_enjoyment: int | None = None
    notes: str | None = None
    id: str | None = None


def total_reps(sets: tuple[SetResultSummary, ...] | list[SetResultSummary]) -> int:
    return sum(s.performed_reps or 0 for s in sets)


def total_volume_load(sets: tuple[SetResultSummary, ...] | list[SetResultSummary]) -> float:
    """Sum of weight x reps across all logged sets."""
    return sum(s.volume_load for s in sets)
