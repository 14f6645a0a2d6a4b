"""Data models for the program engine."""

from program_engine.models.enums import (
    BlockType,
    EmomCounter,
    ExecutionState,
    MetricKind,
    Period,
    WeightUnit,
    WorkoutCategory,
    WorkoutType,
)
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
from program_engine.models.tempo import Tempo, format_tempo, parse_tempo

__all__ = [
    "AdvancedWorkoutResult",
    "BlockItem",
    "BlockType",
    "EmomCounter",
    "Exercise",
    "ExerciseBlock",
    "ExecutionState",
    "MetricKind",
    "Period",
    "Prescription",
    "Program",
    "ResultHandle",
    "SetResultSummary",
    "Tempo",
    "WeightUnit",
    "WorkoutCategory",
    "WorkoutSession",
    "WorkoutType",
    "format_tempo",
    "parse_tempo",
]
