"""Tests for wire-format conversion of programs, results and catalog exercises."""

from __future__ import annotations

from datetime import date

import pytest

from program_engine.models.enums import BlockType, WeightUnit, WorkoutType
from program_engine.models.program import (
    BlockItem,
    ExerciseBlock,
    Prescription,
    Program,
    WorkoutSession,
)
from program_engine.models.result import AdvancedWorkoutResult, SetResultSummary
from program_engine.serialization import (
    exercise_from_wire,
    from_wire_format,
    result_from_wire,
    result_to_wire,
    to_wire_format,
)


@pytest.fixture
def fully_configured() -> Program:
    """Program that sets every block, item and prescription field somewhere."""
    prescription = Prescription(
        sets=5, min_reps=3, max_reps=5, target_reps=4, weight=102.5,
        weight_unit=WeightUnit.LB, tempo="31X0", rest_seconds=150, rpe=8.5, rir=1,
        percentage_1rm=82.5, notes="pause on chest",
    )
    intervals = ExerciseBlock(
        order_index=0,
        label="Intervals",
        workout_type=WorkoutType.HIIT,
        block_type=BlockType.CUSTOM,
        items=(BlockItem(order_index=0, exercise_id="4", prescription=Prescription(), id="i2"),),
        rest_between_items_seconds=15,
        rest_after_block_seconds=None,
        total_rounds=6,
        amrap_duration_seconds=480,
        interval_seconds=60,
        work_phase_seconds=40,
        rest_phase_seconds=20,
        block_instructions="Go hard on the work phase",
        notes="bike or rower",
        id="b2",
    )
    strength = ExerciseBlock(
        order_index=1,
        label="Main lift",
        items=(BlockItem(order_index=0, exercise_id="1", prescription=prescription, id="i1"),),
        rest_after_block_seconds=240,
        id="b1",
    )
    session = WorkoutSession(title="Heavy day", order_index=0, blocks=(intervals, strength), id="s9")
    return Program(title="Peaking", total_weeks=12, sessions=(session,), id="p9")


class TestProgramToWire:
    def test_top_level(self, sample_program) -> None:
        wire = to_wire_format(sample_program)
        assert wire["id"] == "p1"
        assert wire["title"] == "Hybrid Strength"
        assert wire["totalWeeks"] == 8
        assert [s["title"] for s in wire["sessions"]] == ["Push / Pull", "Legs"]

    def test_enums_by_name(self, sample_program) -> None:
        block = to_wire_format(sample_program)["sessions"][0]["blocks"][0]
        assert block["workoutType"] == "SUPERSETS"
        assert block["blockType"] == "SUPERSET"
        assert block["items"][0]["prescription"]["weightUnit"] == "KG"

    def test_none_fields_omitted(self, sample_program) -> None:
        wire = to_wire_format(sample_program)
        legs = wire["sessions"][1]
        assert "id" not in legs
        assert legs["orderIndex"] == 1
        finisher = wire["sessions"][0]["blocks"][1]
        assert "restBetweenItemsSeconds" not in finisher
        assert finisher["amrapDurationSeconds"] == 600
        prescription = finisher["items"][0]["prescription"]
        assert prescription == {"targetReps": 10, "notes": "chest to floor"}

    def test_order_index_always_present(self, sample_program) -> None:
        item = to_wire_format(sample_program)["sessions"][0]["blocks"][0]["items"][0]
        assert item["orderIndex"] == 0
        assert item["exerciseId"] == "1"
        assert "percentage1RM" not in item["prescription"]


class TestProgramFromWire:
    def test_round_trip(self, sample_program) -> None:
        assert from_wire_format(to_wire_format(sample_program)) == sample_program

    def test_round_trip_every_field(self, fully_configured) -> None:
        assert from_wire_format(to_wire_format(fully_configured)) == fully_configured

    def test_exercise_name_used_without_lookup(self, sample_program) -> None:
        wire = to_wire_format(sample_program)
        assert wire["sessions"][0]["blocks"][0]["items"][0]["exerciseName"] == "Bench Press"
        item = from_wire_format(wire).sessions[0].blocks[0].items[0]
        assert item.exercise_name == "Bench Press"
        assert item.exercise.id == "1"

    def test_resolves_exercises_from_lookup(self, sample_program, catalog) -> None:
        program = from_wire_format(to_wire_format(sample_program), catalog)
        item = program.sessions[1].blocks[0].items[0]
        assert item.exercise_name == "Back Squat"
        assert item.prescription.weight_unit == WeightUnit.LB

    def test_numeric_ids_become_strings(self) -> None:
        payload = {
            "id": 42,
            "title": "Imported",
            "durationWeeks": 6,
            "sessions": [{
                "id": 7,
                "title": "Day",
                "orderIndex": 0,
                "blocks": [{
                    "id": 9,
                    "label": "A",
                    "orderIndex": 0,
                    "workoutType": "emom_2",
                    "items": [{
                        "orderIndex": 0,
                        "exercise": {"id": 15, "name": "Kettlebell Swing"},
                        "prescription": {"targetReps": "12", "weight": 24},
                    }],
                }],
            }],
        }
        program = from_wire_format(payload)
        assert program.id == "42"
        assert program.total_weeks == 6
        block = program.sessions[0].blocks[0]
        assert block.id == "9"
        assert block.workout_type == WorkoutType.EMOM_2
        # derived when the payload carries no blockType
        assert block.block_type == BlockType.EMOM
        item = block.items[0]
        assert item.exercise_id == "15"
        assert item.exercise_name == "Kettlebell Swing"
        assert item.prescription.target_reps == 12
        assert item.prescription.weight == 24.0

    def test_missing_total_weeks_defaults(self) -> None:
        assert from_wire_format({"title": "X"}).total_weeks == 4

    def test_missing_order_index_rejected(self) -> None:
        with pytest.raises(ValueError, match="orderIndex"):
            from_wire_format({"title": "X", "sessions": [{"title": "Day"}]})

    def test_missing_exercise_id_rejected(self) -> None:
        payload = {"title": "X", "sessions": [{
            "title": "Day", "orderIndex": 0,
            "blocks": [{"label": "A", "orderIndex": 0, "items": [{"orderIndex": 0}]}],
        }]}
        with pytest.raises(ValueError, match="exerciseId"):
            from_wire_format(payload)

    def test_unknown_block_type_rejected(self) -> None:
        payload = {"title": "X", "sessions": [{
            "title": "Day", "orderIndex": 0,
            "blocks": [{"label": "A", "orderIndex": 0, "blockType": "SPIRAL"}],
        }]}
        with pytest.raises(ValueError, match="BlockType"):
            from_wire_format(payload)


class TestResults:
    @pytest.fixture
    def result(self) -> AdvancedWorkoutResult:
        return AdvancedWorkoutResult(
            date=date(2025, 3, 10),
            session_title="Push / Pull",
            total_duration_seconds=1800,
            total_reps=13,
            total_volume_load=1140.0,
            set_results=(
                SetResultSummary("A", 0, 1, "Bench Press", target_reps=8, performed_reps=5,
                                 weight=100.0, rpe=8.5),
                SetResultSummary("A", 1, 1, "Barbell Row", performed_reps=8, weight=80.0,
                                 weight_unit=WeightUnit.LB, rest_taken_seconds=45),
            ),
            total_rounds=4,
            workout_quality=8,
            id="r-100",
        )

    def test_round_trip(self, result) -> None:
        assert result_from_wire(result_to_wire(result)) == result

    def test_set_keys(self, result) -> None:
        wire = result_to_wire(result)
        assert wire["date"] == "2025-03-10"
        assert wire["setResults"][1]["restTakenSec"] == 45
        assert wire["setResults"][1]["weightUnit"] == "LB"
        assert "wodResult" not in wire

    def test_completed_at_alias(self) -> None:
        result = result_from_wire({
            "id": 5, "completedAt": "2025-03-09T07:15:00Z", "sessionTitle": "Legs",
        })
        assert result.id == "5"
        assert result.date == date(2025, 3, 9)
        assert result.total_reps == 0
        assert result.set_results == ()

    def test_missing_date_rejected(self) -> None:
        with pytest.raises(ValueError, match="date"):
            result_from_wire({"sessionTitle": "Legs"})


class TestExerciseFromWire:
    def test_comma_separated_secondary_muscles(self) -> None:
        ex = exercise_from_wire({
            "id": 3,
            "name": "Back Squat",
            "category": "Strength",
            "muscleGroup": "Quadriceps",
            "secondaryMuscles": "Glutes, Hamstrings,",
            "equipment": "Barbell",
        })
        assert ex.id == "3"
        assert ex.primary_muscle == "Quadriceps"
        assert ex.secondary_muscles == ("Glutes", "Hamstrings")
        assert ex.equipment == "Barbell"

    def test_list_secondary_muscles(self) -> None:
        ex = exercise_from_wire({"id": "1", "name": "Bench", "primaryMuscle": "Chest",
                                 "secondaryMuscles": ["Triceps"]})
        assert ex.secondary_muscles == ("Triceps",)
        assert ex.instructions is None
        assert ex.description == ""
