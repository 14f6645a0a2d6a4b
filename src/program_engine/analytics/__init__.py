"""Result aggregator: pure statistics over historical workout results."""

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
from program_engine.analytics.breakdown import classify_result, workout_type_breakdown
from program_engine.analytics.periods import filter_by_period, period_start, recent_results
from program_engine.analytics.records import (
    PersonalRecord,
    estimate_one_rep_max,
    one_rep_max_estimates,
    personal_records,
)
from program_engine.analytics.summary import ProgressSummary, summarize

__all__ = [
    "PersonalRecord",
    "ProgressSummary",
    "average_quality",
    "classify_result",
    "current_streak",
    "estimate_one_rep_max",
    "filter_by_period",
    "longest_streak",
    "one_rep_max_estimates",
    "period_start",
    "personal_records",
    "recent_results",
    "summarize",
    "total_duration",
    "total_reps",
    "total_volume",
    "weekly_volume",
    "workout_type_breakdown",
    "workouts_by_day_of_week",
]
