"""Tests for the combined progress summary."""

from __future__ import annotations

from datetime import date, timedelta

from program_engine.analytics import summarize
from program_engine.models.enums import Period, WorkoutType

TODAY = date(2025, 3, 10)


class TestSummarize:
    def test_empty_history(self) -> None:
        summary = summarize([], TODAY)
        assert summary.total_workouts == 0
        assert summary.current_streak == 0
        assert summary.personal_records == ()
        assert summary.workouts_by_day_of_week == (0,) * 7

    def test_period_filters_totals_but_not_streaks(self, make_result, make_set_result) -> None:
        results = [
            make_result(TODAY, (make_set_result("Bench Press", 100.0, 5),), workout_quality=9),
            make_result(TODAY - timedelta(days=1), (make_set_result("Bench Press", 80.0, 8),)),
            make_result(TODAY - timedelta(days=2)),
            make_result(TODAY - timedelta(days=40), (make_set_result("Bench Press", 120.0, 1),)),
            make_result(TODAY - timedelta(days=41)),
            make_result(TODAY - timedelta(days=42)),
            make_result(TODAY - timedelta(days=43)),
        ]

        summary = summarize(results, TODAY, Period.MONTH)

        assert summary.period == Period.MONTH
        assert summary.total_workouts == 3
        assert summary.total_volume == 1140.0
        assert summary.average_quality == 9.0
        assert summary.current_streak == 3
        assert summary.longest_streak == 4
        assert summary.personal_records[0].weight == 100.0
        assert summary.one_rep_max == {"Bench Press": 116.7}
        assert summary.workout_type_breakdown == {WorkoutType.STRAIGHT_SETS: 3}
        assert [r.date for r in summary.recent] == [TODAY - timedelta(days=n) for n in (0, 1, 2)]

    def test_all_time(self, make_result, make_set_result) -> None:
        results = [
            make_result(TODAY, (make_set_result("Bench Press", 100.0, 5),)),
            make_result(TODAY - timedelta(days=400), (make_set_result("Bench Press", 120.0, 1),)),
        ]
        summary = summarize(results, TODAY)
        assert summary.total_workouts == 2
        assert summary.personal_records[0].weight == 120.0
