"""Classify past results by workout type for frequency breakdowns."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from program_engine.models.enums import WorkoutType
from program_engine.models.result import AdvancedWorkoutResult


def classify_result(result: AdvancedWorkoutResult) -> WorkoutType:
    """Infer the dominant workout type from which counters a result carries.

    Checked in order: EMOM minutes, Tabata rounds, circuit rounds, generic
    rounds (AMRAP). Anything else counts as straight sets.
    """
    if result.emom_minutes_completed:
        return WorkoutType.EMOM
    if result.tabata_rounds_completed:
        return WorkoutType.TABATA
    if result.circuit_rounds_completed:
        return WorkoutType.CIRCUIT
    if result.total_rounds:
        return WorkoutType.AMRAP
    return WorkoutType.STRAIGHT_SETS


def workout_type_breakdown(results: Sequence[AdvancedWorkoutResult]) -> dict[WorkoutType, int]:
    """Count of results per inferred type, most frequent first."""
    counts = Counter(classify_result(r) for r in results)
    return dict(counts.most_common())
