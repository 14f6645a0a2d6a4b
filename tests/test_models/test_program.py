"""Tests for the program entity graph: defaults, merge-updates, derived properties."""

from __future__ import annotations

import pytest

from program_engine.models.enums import BlockType, WeightUnit, WorkoutType
from program_engine.models.exercise import Exercise
from program_engine.models.program import (
    BLOCK_CONFIG_FIELDS,
    PRESCRIPTION_FIELDS,
    BlockItem,
    ExerciseBlock,
    Prescription,
)


class TestPrescription:
    def test_default_is_three_by_ten(self) -> None:
        p = Prescription.default()
        assert p.sets == 3
        assert p.target_reps == 10
        assert p.rest_seconds == 60
        assert p.weight_unit == WeightUnit.KG

    def test_effective_target_prefers_target(self) -> None:
        assert Prescription(target_reps=5, max_reps=8).effective_target_reps == 5

    def test_effective_target_falls_back_to_max(self) -> None:
        assert Prescription(min_reps=6, max_reps=8).effective_target_reps == 8

    def test_defines_work(self) -> None:
        assert not Prescription(weight=50.0).defines_work
        assert Prescription(sets=3).defines_work

    def test_merge_coerces_form_text(self) -> None:
        p = Prescription.default().merged({
            "target_reps": "12",
            "weight": "82.5",
            "weight_unit": "lb",
            "rpe": 8,
        })
        assert p.target_reps == 12
        assert p.weight == 82.5
        assert p.weight_unit == WeightUnit.LB
        assert p.rpe == 8.0
        assert p.sets == 3

    def test_merge_blank_clears_field(self) -> None:
        p = Prescription(weight=100.0).merged({"weight": "  "})
        assert p.weight is None

    def test_merge_decimal_text_for_int_field(self) -> None:
        assert Prescription().merged({"sets": "4.0"}).sets == 4

    def test_merge_rejects_unknown_field(self) -> None:
        with pytest.raises(ValueError, match="no editable field"):
            Prescription().merged({"speed": 3})

    def test_merge_rejects_bad_unit(self) -> None:
        with pytest.raises(ValueError, match="weight unit"):
            Prescription().merged({"weight_unit": "stone"})

    def test_merge_does_not_mutate(self) -> None:
        original = Prescription.default()
        original.merged({"sets": 5})
        assert original.sets == 3

    def test_fields_constant(self) -> None:
        assert "percentage_1rm" in PRESCRIPTION_FIELDS
        assert len(PRESCRIPTION_FIELDS) == 12


class TestExerciseBlock:
    def test_default_rest_timings(self) -> None:
        block = ExerciseBlock(order_index=0, label="A")
        assert block.rest_between_items_seconds == 60
        assert block.rest_after_block_seconds == 120
        assert block.items == ()

    def test_merge_workout_type_by_name(self) -> None:
        block = ExerciseBlock(order_index=0, label="A").merged({"workout_type": "tabata"})
        assert block.workout_type == WorkoutType.TABATA

    def test_merge_unknown_workout_type_falls_back(self) -> None:
        block = ExerciseBlock(order_index=0, label="A", workout_type=WorkoutType.EMOM)
        assert block.merged({"workout_type": "???"}).workout_type == WorkoutType.STRAIGHT_SETS

    def test_merge_block_type_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="block type"):
            ExerciseBlock(order_index=0, label="A").merged({"block_type": "spiral"})

    def test_merge_config_values(self) -> None:
        block = ExerciseBlock(order_index=0, label="A").merged({
            "total_rounds": "5",
            "block_instructions": "Go hard",
            "block_type": BlockType.CIRCUIT,
        })
        assert block.total_rounds == 5
        assert block.block_instructions == "Go hard"
        assert block.block_type == BlockType.CIRCUIT

    def test_items_not_editable_through_config(self) -> None:
        assert "items" not in BLOCK_CONFIG_FIELDS
        with pytest.raises(ValueError):
            ExerciseBlock(order_index=0, label="A").merged({"items": ()})


class TestBlockItem:
    def test_equality_ignores_resolved_exercise(self) -> None:
        ex = Exercise(id="9", name="Deadlift")
        assert BlockItem(0, "9", exercise=ex) == BlockItem(0, "9")

    def test_exercise_name(self) -> None:
        assert BlockItem(0, "9", exercise=Exercise(id="9", name="Deadlift")).exercise_name == "Deadlift"
        assert BlockItem(0, "9").exercise_name is None


class TestProgram:
    def test_block_count_and_exercise_ids(self, sample_program) -> None:
        assert sample_program.block_count == 3
        assert sample_program.exercise_ids() == {"1", "2", "3", "4"}
