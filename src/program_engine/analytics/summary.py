"""ProgressSummary: every aggregate statistic for one user in one place."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

from program_engine.analytics.aggregator import (
    average_quality,
    current_streak,
    longest_streak,
    total_duration,
    total_reps,
    total_volume,
    weekly_volume,
    workouts_by_day_of_week,
)
from program_engine.analytics.breakdown import workout_type_breakdown
from program_engine.analytics.periods import filter_by_period, recent_results
from program_engine.analytics.records import (
    PersonalRecord,
    one_rep_max_estimates,
    personal_records,
)
from program_engine.models.enums import Period, WorkoutType
from program_engine.models.result import AdvancedWorkoutResult


@dataclass(frozen=True)
class ProgressSummary:
    """Aggregated statistics.

    Streaks always use the full history; every other figure covers only
    results inside ``period``.
    """

    period: Period
    total_workouts: int
    total_volume: float
    total_reps: int
    total_duration_seconds: int
    average_quality: float
    current_streak: int
    longest_streak: int
    personal_records: tuple[PersonalRecord, ...] = field(default_factory=tuple)
    one_rep_max: dict[str, float] = field(default_factory=dict)
    workouts_by_day_of_week: tuple[int, ...] = (0, 0, 0, 0, 0, 0, 0)
    workout_type_breakdown: dict[WorkoutType, int] = field(default_factory=dict)
    weekly_volume: dict[date, float] = field(default_factory=dict)
    recent: tuple[AdvancedWorkoutResult, ...] = field(default_factory=tuple)


def summarize(
    results: Sequence[AdvancedWorkoutResult],
    today: date,
    period: Period = Period.ALL,
) -> ProgressSummary:
    """Compute a ProgressSummary for *results* as of *today*."""
    selected = filter_by_period(results, period, today)
    return ProgressSummary(
        period=period,
        total_workouts=len(selected),
        total_volume=total_volume(selected),
        total_reps=total_reps(selected),
        total_duration_seconds=total_duration(selected),
        average_quality=average_quality(selected),
        current_streak=current_streak(results, today),
        longest_streak=longest_streak(results),
        personal_records=tuple(personal_records(selected)),
        one_rep_max=one_rep_max_estimates(selected),
        workouts_by_day_of_week=workouts_by_day_of_week(selected),
        workout_type_breakdown=workout_type_breakdown(selected),
        weekly_volume=weekly_volume(selected),
        recent=tuple(recent_results(results, today)),
    )
