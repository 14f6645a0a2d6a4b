"""Save-time checks for a Program.

``validate`` returns blocking errors; ``warnings`` returns advisory
per-block issues that never prevent a save.
"""

from __future__ import annotations

from dataclasses import dataclass

from program_engine.errors import ValidationError
from program_engine.models.enums import MAX_TOTAL_WEEKS, MIN_TOTAL_WEEKS
from program_engine.models.program import ExerciseBlock, Program
from program_engine.models.tempo import parse_tempo
from program_engine.registry import constraints_for, display_info, is_emom


@dataclass(frozen=True)
class BlockWarning:
    """Advisory issue located at one block."""

    session_index: int
    block_index: int
    message: str

    def __str__(self) -> str:
        return f"session {self.session_index + 1}, block {self.block_index + 1}: {self.message}"


def validate(program: Program) -> list[ValidationError]:
    """Return every blocking problem; an empty list means the program can be saved."""
    errors: list[ValidationError] = []

    if not program.title or not program.title.strip():
        errors.append(ValidationError("title", "Program title is required"))

    if not MIN_TOTAL_WEEKS <= program.total_weeks <= MAX_TOTAL_WEEKS:
        errors.append(ValidationError(
            "total_weeks",
            f"Total weeks must be between {MIN_TOTAL_WEEKS} and {MAX_TOTAL_WEEKS}",
        ))

    if not any(session.blocks for session in program.sessions):
        errors.append(ValidationError(
            "sessions", "At least one session must contain at least one block"
        ))

    return errors


def warnings(program: Program) -> list[BlockWarning]:
    found: list[BlockWarning] = []
    for s_idx, session in enumerate(program.sessions):
        for b_idx, block in enumerate(session.blocks):
            found.extend(
                BlockWarning(s_idx, b_idx, message) for message in _block_issues(block)
            )
    return found


def _block_issues(block: ExerciseBlock) -> list[str]:
    constraints = constraints_for(block.workout_type)
    name = display_info(block.workout_type).display_name
    label = constraints.exercise_label
    count = len(block.items)
    issues: list[str] = []

    # --- Exercise count ---
    if count < constraints.min_exercises:
        issues.append(
            f"{name} needs at least {constraints.min_exercises} {label}(s), has {count}"
        )
    if constraints.max_exercises is not None and count > constraints.max_exercises:
        issues.append(
            f"{name} allows at most {constraints.max_exercises} {label}(s), has {count}"
        )

    # --- Required structural config ---
    if constraints.requires_rounds and not block.total_rounds:
        what = "total minutes" if is_emom(block.workout_type) else "total rounds"
        issues.append(f"{name} requires {what}")
    if constraints.requires_amrap_duration and not block.amrap_duration_seconds:
        issues.append(f"{name} requires a time cap")
    if constraints.requires_intervals and not (
        block.work_phase_seconds or block.interval_seconds
    ):
        issues.append(f"{name} requires work/rest interval timing")

    # --- Items ---
    for item in block.items:
        who = item.exercise_name or f"item {item.order_index + 1}"
        if not item.prescription.defines_work:
            issues.append(f"{who} has no sets or reps")
        if not parse_tempo(item.prescription.tempo).is_valid:
            issues.append(f"{who} has unrecognised tempo {item.prescription.tempo!r}")

    return issues
