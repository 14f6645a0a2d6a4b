"""Wire-format conversion for programs, results and catalog exercises.

The persisted representation is camelCase JSON. Enumerations travel by
member name. Optional fields that are None are omitted; ``orderIndex`` is
always present. Generated ids are included only once assigned.

All functions are pure (no I/O, no network calls).
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping

from program_engine.models.enums import (
    DEFAULT_TOTAL_WEEKS,
    BlockType,
    WeightUnit,
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
from program_engine.models.result import AdvancedWorkoutResult, SetResultSummary
from program_engine.registry import block_type_for

# (attribute, wire key) pairs in wire order
_PRESCRIPTION_KEYS = (
    ("sets", "sets"),
    ("min_reps", "minReps"),
    ("max_reps", "maxReps"),
    ("target_reps", "targetReps"),
    ("weight", "weight"),
    ("weight_unit", "weightUnit"),
    ("tempo", "tempo"),
    ("rest_seconds", "restSeconds"),
    ("rpe", "rpe"),
    ("rir", "rir"),
    ("percentage_1rm", "percentage1RM"),
    ("notes", "notes"),
)

_BLOCK_CONFIG_KEYS = (
    ("rest_between_items_seconds", "restBetweenItemsSeconds"),
    ("rest_after_block_seconds", "restAfterBlockSeconds"),
    ("total_rounds", "totalRounds"),
    ("amrap_duration_seconds", "amrapDurationSeconds"),
    ("interval_seconds", "intervalSeconds"),
    ("work_phase_seconds", "workPhaseSeconds"),
    ("rest_phase_seconds", "restPhaseSeconds"),
    ("block_instructions", "blockInstructions"),
    ("notes", "notes"),
)

_SET_RESULT_KEYS = (
    ("block_label", "blockLabel"),
    ("block_item_order", "blockItemOrder"),
    ("set_number", "setNumber"),
    ("exercise_name", "exerciseName"),
    ("target_reps", "targetReps"),
    ("performed_reps", "performedReps"),
    ("weight", "weight"),
    ("weight_unit", "weightUnit"),
    ("rpe", "rpe"),
    ("rest_taken_seconds", "restTakenSec"),
)

_RESULT_KEYS = (
    ("session_title", "sessionTitle"),
    ("total_duration_seconds", "totalDurationSeconds"),
    ("total_reps", "totalReps"),
    ("total_volume_load", "totalVolumeLoad"),
    ("total_rounds", "totalRounds"),
    ("wod_result", "wodResult"),
    ("emom_minutes_completed", "emomMinutesCompleted"),
    ("emom_failed_minutes", "emomFailedMinutes"),
    ("tabata_rounds_completed", "tabataRoundsCompleted"),
    ("circuit_rounds_completed", "circuitRoundsCompleted"),
    ("workout_quality", "workoutQuality"),
    ("workout_enjoyment", "workoutEnjoyment"),
    ("notes", "notes"),
)

_INT_FIELDS = frozenset({
    "sets", "min_reps", "max_reps", "target_reps", "rest_seconds", "rir",
    "rest_between_items_seconds", "rest_after_block_seconds", "total_rounds",
    "amrap_duration_seconds", "interval_seconds", "work_phase_seconds",
    "rest_phase_seconds", "block_item_order", "set_number", "performed_reps",
    "rest_taken_seconds", "total_duration_seconds", "total_reps",
    "emom_minutes_completed", "emom_failed_minutes", "tabata_rounds_completed",
    "circuit_rounds_completed", "workout_quality", "workout_enjoyment",
})
_FLOAT_FIELDS = frozenset({"weight", "rpe", "percentage_1rm", "total_volume_load"})


# ---------------------------------------------------------------------------
# Program
# ---------------------------------------------------------------------------


def to_wire_format(program: Program) -> dict:
    """Convert a Program to its persisted JSON-compatible dict."""
    wire: dict[str, Any] = {}
    _put(wire, "id", program.id)
    wire["title"] = program.title
    wire["totalWeeks"] = program.total_weeks
    wire["sessions"] = [_session_to_wire(s) for s in program.sessions]
    return wire


def from_wire_format(
    payload: Mapping[str, Any],
    exercises: Mapping[str, Exercise] | None = None,
) -> Program:
    """Build a Program from its persisted representation.

    Args:
        payload: Wire dict as produced by :func:`to_wire_format` or the
            program-storage service.
        exercises: Optional catalog lookup used to resolve item references.
            Items whose payload embeds an ``exercise`` object are resolved
            from that object when the lookup has no entry.

    Returns:
        The in-memory Program.
    """
    sessions = tuple(
        _session_from_wire(s, exercises or {}) for s in payload.get("sessions") or ()
    )
    total_weeks = _int(payload.get("totalWeeks", payload.get("durationWeeks")))
    return Program(
        title=payload.get("title") or "",
        total_weeks=DEFAULT_TOTAL_WEEKS if total_weeks is None else total_weeks,
        sessions=sessions,
        id=_id(payload.get("id")),
    )


def _session_to_wire(session: WorkoutSession) -> dict:
    wire: dict[str, Any] = {}
    _put(wire, "id", session.id)
    wire["title"] = session.title
    wire["orderIndex"] = session.order_index
    wire["blocks"] = [_block_to_wire(b) for b in session.blocks]
    return wire


def _session_from_wire(payload: Mapping[str, Any], exercises: Mapping[str, Exercise]) -> WorkoutSession:
    return WorkoutSession(
        title=payload.get("title") or "",
        order_index=_order_index(payload),
        blocks=tuple(_block_from_wire(b, exercises) for b in payload.get("blocks") or ()),
        id=_id(payload.get("id")),
    )


def _block_to_wire(block: ExerciseBlock) -> dict:
    wire: dict[str, Any] = {}
    _put(wire, "id", block.id)
    wire["label"] = block.label
    wire["orderIndex"] = block.order_index
    wire["blockType"] = block.block_type.name
    wire["workoutType"] = block.workout_type.name
    for attr, key in _BLOCK_CONFIG_KEYS:
        _put(wire, key, getattr(block, attr))
    wire["items"] = [_item_to_wire(i) for i in block.items]
    return wire


def _block_from_wire(payload: Mapping[str, Any], exercises: Mapping[str, Exercise]) -> ExerciseBlock:
    workout_type = WorkoutType.parse(payload.get("workoutType"))
    raw_block_type = payload.get("blockType")
    block_type = (
        _enum(BlockType, raw_block_type) if raw_block_type else block_type_for(workout_type)
    )
    config = {attr: _coerce(attr, payload.get(key)) for attr, key in _BLOCK_CONFIG_KEYS}
    return ExerciseBlock(
        order_index=_order_index(payload),
        label=payload.get("label") or "",
        workout_type=workout_type,
        block_type=block_type,
        items=tuple(_item_from_wire(i, exercises) for i in payload.get("items") or ()),
        id=_id(payload.get("id")),
        **config,
    )


def _item_to_wire(item: BlockItem) -> dict:
    wire: dict[str, Any] = {}
    _put(wire, "id", item.id)
    wire["orderIndex"] = item.order_index
    wire["exerciseId"] = item.exercise_id
    _put(wire, "exerciseName", item.exercise_name)
    wire["prescription"] = _prescription_to_wire(item.prescription)
    return wire


def _item_from_wire(payload: Mapping[str, Any], exercises: Mapping[str, Exercise]) -> BlockItem:
    embedded = payload.get("exercise")
    exercise_id = _id(payload.get("exerciseId"))
    if exercise_id is None and isinstance(embedded, Mapping):
        exercise_id = _id(embedded.get("id"))
    if exercise_id is None:
        raise ValueError(f"Block item at orderIndex {payload.get('orderIndex')} has no exerciseId")

    exercise = exercises.get(exercise_id)
    if exercise is None and isinstance(embedded, Mapping):
        exercise = exercise_from_wire(embedded)
    if exercise is None and payload.get("exerciseName"):
        exercise = Exercise(id=exercise_id, name=str(payload["exerciseName"]))

    return BlockItem(
        order_index=_order_index(payload),
        exercise_id=exercise_id,
        prescription=_prescription_from_wire(payload.get("prescription") or {}),
        exercise=exercise,
        id=_id(payload.get("id")),
    )


def _prescription_to_wire(prescription: Prescription) -> dict:
    wire: dict[str, Any] = {}
    for attr, key in _PRESCRIPTION_KEYS:
        _put(wire, key, getattr(prescription, attr))
    return wire


def _prescription_from_wire(payload: Mapping[str, Any]) -> Prescription:
    return Prescription(
        **{attr: _coerce(attr, payload.get(key)) for attr, key in _PRESCRIPTION_KEYS}
    )


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


def result_to_wire(result: AdvancedWorkoutResult) -> dict:
    """Convert a session result to its persisted JSON-compatible dict."""
    wire: dict[str, Any] = {}
    _put(wire, "id", result.id)
    wire["date"] = result.date.isoformat()
    for attr, key in _RESULT_KEYS:
        _put(wire, key, getattr(result, attr))
    wire["setResults"] = [_set_result_to_wire(s) for s in result.set_results]
    return wire


def result_from_wire(payload: Mapping[str, Any]) -> AdvancedWorkoutResult:
    fields = {attr: _coerce(attr, payload.get(key)) for attr, key in _RESULT_KEYS}
    # Totals are always numeric on the model
    for attr in ("total_duration_seconds", "total_reps"):
        fields[attr] = fields[attr] or 0
    fields["total_volume_load"] = fields["total_volume_load"] or 0.0
    fields["session_title"] = fields["session_title"] or ""
    return AdvancedWorkoutResult(
        date=_date(payload.get("date") or payload.get("completedAt")),
        set_results=tuple(_set_result_from_wire(s) for s in payload.get("setResults") or ()),
        id=_id(payload.get("id")),
        **fields,
    )


def _set_result_to_wire(summary: SetResultSummary) -> dict:
    wire: dict[str, Any] = {}
    for attr, key in _SET_RESULT_KEYS:
        _put(wire, key, getattr(summary, attr))
    return wire


def _set_result_from_wire(payload: Mapping[str, Any]) -> SetResultSummary:
    fields = {attr: _coerce(attr, payload.get(key)) for attr, key in _SET_RESULT_KEYS}
    fields["block_label"] = fields["block_label"] or ""
    fields["block_item_order"] = fields["block_item_order"] or 0
    fields["set_number"] = fields["set_number"] or 0
    fields["exercise_name"] = fields["exercise_name"] or "Unknown"
    if fields["weight_unit"] is None:
        del fields["weight_unit"]
    return SetResultSummary(**fields)


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


def exercise_from_wire(payload: Mapping[str, Any]) -> Exercise:
    """Build a catalog Exercise from the catalog service's JSON.

    ``secondaryMuscles`` may arrive as a list or a comma-separated string;
    older payloads carry ``muscleGroup`` instead of ``primaryMuscle``.
    """
    secondary = payload.get("secondaryMuscles") or ()
    if isinstance(secondary, str):
        secondary = secondary.split(",")
    return Exercise(
        id=_id(payload.get("id")) or "",
        name=payload.get("name") or "",
        category=payload.get("category") or "",
        primary_muscle=payload.get("primaryMuscle") or payload.get("muscleGroup") or "",
        secondary_muscles=tuple(m.strip() for m in secondary if m and m.strip()),
        equipment=payload.get("equipment"),
        instructions=payload.get("instructions"),
        description=payload.get("description") or "",
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _put(wire: dict, key: str, value: Any) -> None:
    """Set *key* unless *value* is None; enums are written by name."""
    if value is None:
        return
    if isinstance(value, (WeightUnit, BlockType, WorkoutType)):
        value = value.name
    wire[key] = value


def _coerce(attr: str, value: Any) -> Any:
    if value is None:
        return None
    if attr == "weight_unit":
        return _enum(WeightUnit, value)
    if attr in _INT_FIELDS:
        return _int(value)
    if attr in _FLOAT_FIELDS:
        return float(value)
    return value


def _int(value: Any) -> int | None:
    if value is None:
        return None
    return int(value)


def _id(value: Any) -> str | None:
    """Backend ids may be numeric; the model keeps them as strings."""
    if value is None:
        return None
    return str(value)


def _order_index(payload: Mapping[str, Any]) -> int:
    if payload.get("orderIndex") is None:
        raise ValueError(f"Missing orderIndex in {sorted(payload)}")
    return int(payload["orderIndex"])


def _enum(enum_cls: type, value: Any) -> Any:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls[str(value).strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown {enum_cls.__name__}: {value!r}") from None


def _date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        raise ValueError("Result payload has no date")
    return date.fromisoformat(str(value)[:10])
