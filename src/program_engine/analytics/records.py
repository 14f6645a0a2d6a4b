"""Per-exercise bests: heaviest sets and estimated one-rep maxes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

import pandas as pd

from program_engine.models.enums import (
    DEFAULT_WEIGHT_UNIT,
    EPLEY_REP_DIVISOR,
    PERSONAL_RECORD_LIMIT,
    WeightUnit,
)
from program_engine.models.result import AdvancedWorkoutResult


@dataclass(frozen=True)
class PersonalRecord:
    """Heaviest logged set for one exercise."""

    exercise_name: str
    weight: float
    reps: int | None
    date: date
    weight_unit: WeightUnit = DEFAULT_WEIGHT_UNIT


def personal_records(
    results: Sequence[AdvancedWorkoutResult],
    limit: int = PERSONAL_RECORD_LIMIT,
) -> list[PersonalRecord]:
    """Heaviest set per exercise, top *limit* by weight descending.

    A later set replaces the stored one only when strictly heavier, so ties
    keep the first set seen in input order.
    """
    best: dict[str, PersonalRecord] = {}
    for result in results:
        for s in result.set_results:
            if s.weight is None:
                continue
            current = best.get(s.exercise_name)
            if current is None or s.weight > current.weight:
                best[s.exercise_name] = PersonalRecord(
                    exercise_name=s.exercise_name,
                    weight=s.weight,
                    reps=s.performed_reps,
                    date=result.date,
                    weight_unit=s.weight_unit,
                )
    ranked = sorted(best.values(), key=lambda pr: pr.weight, reverse=True)
    return ranked[:limit]


def estimate_one_rep_max(weight: float, reps: int) -> float:
    """Epley estimate: ``weight * (1 + reps / 30)``."""
    return weight * (1.0 + reps / EPLEY_REP_DIVISOR)


def one_rep_max_estimates(results: Sequence[AdvancedWorkoutResult]) -> dict[str, float]:
    """Best estimated 1RM per exercise across every weighted set with reps."""
    rows = [
        (s.exercise_name, s.weight, s.performed_reps)
        for r in results
        for s in r.set_results
        if s.weight is not None and s.performed_reps
    ]
    if not rows:
        return {}
    frame = pd.DataFrame(rows, columns=["exercise", "weight", "reps"])
    frame["e1rm"] = [estimate_one_rep_max(w, n) for w, n in zip(frame["weight"], frame["reps"])]
    best = frame.groupby("exercise")["e1rm"].max().sort_values(ascending=False)
    return {name: round(float(v), 1) for name, v in best.items()}
