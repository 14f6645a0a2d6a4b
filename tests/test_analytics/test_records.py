"""Tests for personal records and estimated one-rep maxes."""

from __future__ import annotations

from datetime import date

import pytest

from program_engine.analytics import (
    estimate_one_rep_max,
    one_rep_max_estimates,
    personal_records,
)
from program_engine.models.enums import WeightUnit
from program_engine.models.result import SetResultSummary


class TestPersonalRecords:
    def test_heaviest_set_wins(self, make_result, make_set_result) -> None:
        results = [
            make_result(date(2025, 3, 1), (make_set_result("Bench Press", 80.0, 10),)),
            make_result(date(2025, 3, 5), (make_set_result("Bench Press", 100.0, 3),)),
        ]
        (pr,) = personal_records(results)
        assert pr.exercise_name == "Bench Press"
        assert pr.weight == 100.0
        assert pr.reps == 3
        assert pr.date == date(2025, 3, 5)

    def test_tie_keeps_first(self, make_result, make_set_result) -> None:
        results = [
            make_result(date(2025, 3, 1), (make_set_result("Deadlift", 140.0, 5),)),
            make_result(date(2025, 3, 8), (make_set_result("Deadlift", 140.0, 6),)),
        ]
        (pr,) = personal_records(results)
        assert pr.date == date(2025, 3, 1)
        assert pr.reps == 5

    def test_unweighted_sets_ignored(self, make_result, make_set_result) -> None:
        results = [make_result(date(2025, 3, 1), (make_set_result("Pull Up", None, 12),))]
        assert personal_records(results) == []

    def test_limit_and_order(self, make_result, make_set_result) -> None:
        sets = tuple(make_set_result(f"Lift {n}", float(10 * n), 5) for n in range(1, 8))
        records = personal_records([make_result(date(2025, 3, 1), sets)])
        assert len(records) == 5
        assert [r.weight for r in records] == [70.0, 60.0, 50.0, 40.0, 30.0]

    def test_unit_carried(self, make_result) -> None:
        s = SetResultSummary(
            block_label="A", block_item_order=0, set_number=1,
            exercise_name="Back Squat", performed_reps=3, weight=225.0,
            weight_unit=WeightUnit.LB,
        )
        (pr,) = personal_records([make_result(date(2025, 3, 1), (s,))])
        assert pr.weight_unit == WeightUnit.LB


class TestOneRepMax:
    def test_epley(self) -> None:
        assert estimate_one_rep_max(100.0, 5) == pytest.approx(116.6667, abs=1e-3)
        assert estimate_one_rep_max(100.0, 1) == pytest.approx(103.3333, abs=1e-3)

    def test_best_estimate_per_exercise(self, make_result, make_set_result) -> None:
        results = [
            make_result(date(2025, 3, 1), (
                make_set_result("Bench Press", 100.0, 5),
                make_set_result("Bench Press", 80.0, 10, set_number=2),
            )),
            make_result(date(2025, 3, 3), (make_set_result("Back Squat", 140.0, 3),)),
        ]
        estimates = one_rep_max_estimates(results)
        assert list(estimates) == ["Back Squat", "Bench Press"]
        assert estimates["Bench Press"] == 116.7
        assert estimates["Back Squat"] == 154.0

    def test_sets_without_reps_skipped(self, make_result, make_set_result) -> None:
        results = [make_result(date(2025, 3, 1), (make_set_result("Bench Press", 100.0, 0),))]
        assert one_rep_max_estimates(results) == {}
