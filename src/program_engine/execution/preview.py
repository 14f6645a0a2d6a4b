"""Human-readable session preview and elapsed-time formatting."""

from __future__ import annotations

from dataclasses import dataclass

from program_engine.models.enums import DEFAULT_WEIGHT_UNIT
from program_engine.models.program import BlockItem, WorkoutSession
from program_engine.registry import display_info


@dataclass(frozen=True)
class BlockPreview:
    """What a user sees for one block before starting the session."""

    label: str
    display_name: str
    item_lines: tuple[str, ...]
    rounds: int | None = None


def describe_item(item: BlockItem) -> str:
    """e.g. ``"Bench Press - 3 sets × 10 reps @ 80kg"``."""
    p = item.prescription
    parts: list[str] = []
    if p.sets:
        parts.append(f"{p.sets} sets")
    if p.target_reps is not None:
        parts.append(f"{p.target_reps} reps")
    elif p.min_reps is not None and p.max_reps is not None:
        parts.append(f"{p.min_reps}-{p.max_reps} reps")
    elif p.max_reps is not None:
        parts.append(f"{p.max_reps} reps")

    line = item.exercise_name or "Unknown"
    if parts:
        line += " - " + " × ".join(parts)
    if p.weight is not None:
        unit = (p.weight_unit or DEFAULT_WEIGHT_UNIT).name.lower()
        line += f" @ {p.weight:g}{unit}"
    return line


def preview(session: WorkoutSession) -> tuple[BlockPreview, ...]:
    return tuple(
        BlockPreview(
            label=block.label,
            display_name=display_info(block.workout_type).display_name,
            item_lines=tuple(describe_item(i) for i in block.items),
            rounds=block.total_rounds,
        )
        for block in session.blocks
    )


def format_elapsed(seconds: int) -> str:
    """Format a duration as ``M:SS``, or ``H:MM:SS`` from one hour up."""
    seconds = max(int(seconds), 0)
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
