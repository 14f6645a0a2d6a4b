"""Program entity graph: Program → WorkoutSession → ExerciseBlock → BlockItem → Prescription.

All entities are frozen. Editing produces new instances via ``merged()`` or
``dataclasses.replace``; the Builder is the only code that assembles them.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Mapping

from program_engine.models.enums import (
    DEFAULT_ITEM_REST_S,
    DEFAULT_REST_AFTER_BLOCK_S,
    DEFAULT_REST_BETWEEN_ITEMS_S,
    DEFAULT_SETS,
    DEFAULT_TARGET_REPS,
    DEFAULT_TOTAL_WEEKS,
    DEFAULT_WEIGHT_UNIT,
    BlockType,
    WeightUnit,
    WorkoutType,
)
from program_engine.models.exercise import Exercise


# ---------------------------------------------------------------------------
# Type coercion for merge-updates (values often arrive as form text)
# ---------------------------------------------------------------------------


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _to_int(value: Any) -> int | None:
    if _blank(value):
        return None
    if isinstance(value, str):
        value = value.strip()
    return int(float(value))


def _to_float(value: Any) -> float | None:
    if _blank(value):
        return None
    return float(value)


def _to_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _to_weight_unit(value: Any) -> WeightUnit | None:
    if _blank(value):
        return None
    if isinstance(value, WeightUnit):
        return value
    try:
        return WeightUnit[str(value).strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown weight unit: {value!r}") from None


def _to_workout_type(value: Any) -> WorkoutType:
    return WorkoutType.parse(value)


def _to_block_type(value: Any) -> BlockType:
    if isinstance(value, BlockType):
        return value
    try:
        return BlockType[str(value).strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown block type: {value!r}") from None


def _merge(instance: Any, changes: Mapping[str, Any], coercers: Mapping[str, Callable[[Any], Any]]) -> Any:
    unknown = set(changes) - set(coercers)
    if unknown:
        raise ValueError(
            f"{type(instance).__name__} has no editable field(s): {', '.join(sorted(unknown))}"
        )
    coerced = {name: coercers[name](value) for name, value in changes.items()}
    return replace(instance, **coerced)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Prescription:
    """Planned execution of one exercise within a block item.

    Every field is optional. Reps are given either as ``target_reps`` or as a
    ``min_reps``/``max_reps`` range; ``rpe`` is on a 1-10 scale.
    """

    sets: int | None = None
    min_reps: int | None = None
    max_reps: int | None = None
    target_reps: int | None = None
    weight: float | None = None
    weight_unit: WeightUnit | None = None
    tempo: str | None = None
    rest_seconds: int | None = None
    rpe: float | None = None
    rir: int | None = None
    percentage_1rm: float | None = None
    notes: str | None = None

    @classmethod
    def default(cls) -> Prescription:
        """Prescription attached to newly added items: 3 x 10, 60 s rest."""
        return cls(
            sets=DEFAULT_SETS,
            target_reps=DEFAULT_TARGET_REPS,
            rest_seconds=DEFAULT_ITEM_REST_S,
            weight_unit=DEFAULT_WEIGHT_UNIT,
        )

    @property
    def effective_target_reps(self) -> int | None:
        """Reps a set is aiming for: the explicit target, else the top of the range."""
        return self.target_reps if self.target_reps is not None else self.max_reps

    @property
    def defines_work(self) -> bool:
        return any(
            v is not None for v in (self.target_reps, self.min_reps, self.max_reps, self.sets)
        )

    def merged(self, changes: Mapping[str, Any]) -> Prescription:
        return _merge(self, changes, _PRESCRIPTION_COERCERS)


_PRESCRIPTION_COERCERS: dict[str, Callable[[Any], Any]] = {
    "sets": _to_int,
    "min_reps": _to_int,
    "max_reps": _to_int,
    "target_reps": _to_int,
    "weight": _to_float,
    "weight_unit": _to_weight_unit,
    "tempo": _to_text,
    "rest_seconds": _to_int,
    "rpe": _to_float,
    "rir": _to_int,
    "percentage_1rm": _to_float,
    "notes": _to_text,
}


@dataclass(frozen=True)
class BlockItem:
    """One exercise slot within a block.

    ``exercise`` is the resolved catalog entry; identity is ``exercise_id``,
    so equality ignores whether the entry has been resolved yet.
    """

    order_index: int
    exercise_id: str
    prescription: Prescription = field(default_factory=Prescription)
    exercise: Exercise | None = field(default=None, compare=False)
    id: str | None = None

    @property
    def exercise_name(self) -> str | None:
        return self.exercise.name if self.exercise is not None else None


@dataclass(frozen=True)
class ExerciseBlock:
    """A structural unit implementing one workout methodology.

    Attributes:
        workout_type: Fine-grained methodology; drives constraint lookup.
        block_type: Coarse structural category.
        total_rounds: Rounds for circuits; total minutes for EMOM variants.
        interval_seconds / work_phase_seconds / rest_phase_seconds:
            Timing for interval-driven types (Tabata, HIIT, timed circuits).
    """

    order_index: int
    label: str
    workout_type: WorkoutType = WorkoutType.STRAIGHT_SETS
    block_type: BlockType = BlockType.STRAIGHT_SETS
    items: tuple[BlockItem, ...] = field(default_factory=tuple)
    rest_between_items_seconds: int | None = DEFAULT_REST_BETWEEN_ITEMS_S
    rest_after_block_seconds: int | None = DEFAULT_REST_AFTER_BLOCK_S
    total_rounds: int | None = None
    amrap_duration_seconds: int | None = None
    interval_seconds: int | None = None
    work_phase_seconds: int | None = None
    rest_phase_seconds: int | None = None
    block_instructions: str | None = None
    notes: str | None = None
    id: str | None = None

    @property
    def exercise_count(self) -> int:
        return len(self.items)

    def merged(self, changes: Mapping[str, Any]) -> ExerciseBlock:
        return _merge(self, changes, _BLOCK_CONFIG_COERCERS)


_BLOCK_CONFIG_COERCERS: dict[str, Callable[[Any], Any]] = {
    "label": lambda v: "" if v is None else str(v),
    "workout_type": _to_workout_type,
    "block_type": _to_block_type,
    "rest_between_items_seconds": _to_int,
    "rest_after_block_seconds": _to_int,
    "total_rounds": _to_int,
    "amrap_duration_seconds": _to_int,
    "interval_seconds": _to_int,
    "work_phase_seconds": _to_int,
    "rest_phase_seconds": _to_int,
    "block_instructions": _to_text,
    "notes": _to_text,
}

# Fields a caller may change through a block-config update
BLOCK_CONFIG_FIELDS = frozenset(_BLOCK_CONFIG_COERCERS)
PRESCRIPTION_FIELDS = frozenset(f.name for f in fields(Prescription))


@dataclass(frozen=True)
class WorkoutSession:
    """An ordered list of blocks performed in one visit to the gym."""

    title: str
    order_index: int
    blocks: tuple[ExerciseBlock, ...] = field(default_factory=tuple)
    id: str | None = None


@dataclass(frozen=True)
class Program:
    """Root aggregate. Persisted by an external program store."""

    title: str
    total_weeks: int = DEFAULT_TOTAL_WEEKS
    sessions: tuple[WorkoutSession, ...] = field(default_factory=tuple)
    id: str | None = None

    @property
    def block_count(self) -> int:
        return sum(len(s.blocks) for s in self.sessions)

    def exercise_ids(self) -> set[str]:
        return {
            item.exercise_id
            for session in self.sessions
            for block in session.blocks
            for item in block.items
        }
