"""Tests for totals, streaks and frequency statistics."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from program_engine.analytics import (
    average_quality,
    current_streak,
    longest_streak,
    total_duration,
    total_reps,
    total_volume,
    weekly_volume,
    workouts_by_day_of_week,
)

TODAY = date(2025, 3, 10)  # a Monday


def _days_ago(n: int) -> date:
    return TODAY - timedelta(days=n)


class TestTotals:
    def test_empty(self) -> None:
        assert total_volume([]) == 0.0
        assert total_reps([]) == 0
        assert total_duration([]) == 0
        assert average_quality([]) == 0.0

    def test_sums(self, make_result, make_set_result) -> None:
        results = [
            make_result(TODAY, (make_set_result("Bench Press", 100.0, 5),), total_duration_seconds=1800),
            make_result(_days_ago(1), (make_set_result("Back Squat", 80.0, 8),), total_duration_seconds=2400),
        ]
        assert total_volume(results) == 1140.0
        assert total_reps(results) == 13
        assert total_duration(results) == 4200

    def test_average_quality_skips_unrated(self, make_result) -> None:
        results = [
            make_result(TODAY, workout_quality=8),
            make_result(_days_ago(1), workout_quality=6),
            make_result(_days_ago(2)),
        ]
        assert average_quality(results) == pytest.approx(7.0)


class TestCurrentStreak:
    def test_today_yesterday_gap(self, make_result) -> None:
        results = [make_result(_days_ago(n)) for n in (0, 1, 3)]
        assert current_streak(results, TODAY) == 2

    def test_streak_may_end_yesterday(self, make_result) -> None:
        results = [make_result(_days_ago(n)) for n in (1, 2, 3)]
        assert current_streak(results, TODAY) == 3

    def test_broken_two_days_ago(self, make_result) -> None:
        assert current_streak([make_result(_days_ago(2))], TODAY) == 0

    def test_duplicate_days_count_once(self, make_result) -> None:
        results = [make_result(TODAY), make_result(TODAY), make_result(_days_ago(1))]
        assert current_streak(results, TODAY) == 2

    def test_future_dates_ignored(self, make_result) -> None:
        results = [make_result(TODAY + timedelta(days=1)), make_result(TODAY)]
        assert current_streak(results, TODAY) == 1

    def test_input_order_irrelevant(self, make_result) -> None:
        results = [make_result(_days_ago(n)) for n in (2, 0, 1)]
        assert current_streak(results, TODAY) == 3

    def test_empty(self) -> None:
        assert current_streak([], TODAY) == 0


class TestLongestStreak:
    def test_picks_longest_run(self, make_result) -> None:
        results = [make_result(_days_ago(n)) for n in (0, 1, 3, 10, 11, 12, 13)]
        assert longest_streak(results) == 4

    def test_single_day(self, make_result) -> None:
        assert longest_streak([make_result(TODAY)]) == 1

    def test_scenario_with_gap(self, make_result) -> None:
        results = [make_result(_days_ago(n)) for n in (0, 1, 3)]
        assert longest_streak(results) == 2

    def test_empty(self) -> None:
        assert longest_streak([]) == 0


class TestFrequency:
    def test_sunday_is_index_zero(self, make_result) -> None:
        sunday = date(2025, 3, 9)
        saturday = date(2025, 3, 8)
        counts = workouts_by_day_of_week(
            [make_result(sunday), make_result(TODAY), make_result(TODAY), make_result(saturday)]
        )
        assert counts == (1, 2, 0, 0, 0, 0, 1)

    def test_empty_week(self) -> None:
        assert workouts_by_day_of_week([]) == (0,) * 7

    def test_weekly_volume_keyed_by_monday(self, make_result) -> None:
        results = [
            make_result(TODAY, total_volume_load=100.0),
            make_result(date(2025, 3, 12), total_volume_load=50.0),
            make_result(date(2025, 3, 9), total_volume_load=30.0),
        ]
        assert weekly_volume(results) == {
            date(2025, 3, 3): 30.0,
            date(2025, 3, 10): 150.0,
        }

    def test_weekly_volume_empty(self) -> None:
        assert weekly_volume([]) == {}
