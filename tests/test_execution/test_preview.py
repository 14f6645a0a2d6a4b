"""Tests for session preview lines and elapsed-time formatting."""

from __future__ import annotations

import pytest

from program_engine.execution import format_elapsed, preview
from program_engine.execution.preview import describe_item
from program_engine.models.program import BlockItem, Prescription


class TestDescribeItem:
    def test_full_line(self, bench) -> None:
        item = BlockItem(0, bench.id, Prescription.default().merged({"weight": 80}), exercise=bench)
        assert describe_item(item) == "Bench Press - 3 sets × 10 reps @ 80kg"

    def test_rep_range(self, sample_program) -> None:
        row_item = sample_program.sessions[0].blocks[0].items[1]
        assert describe_item(row_item) == "Barbell Row - 4 sets × 8-12 reps @ 60kg"

    def test_unresolved_exercise(self) -> None:
        assert describe_item(BlockItem(0, "99")) == "Unknown"


class TestPreview:
    def test_blocks_in_order(self, sample_program) -> None:
        blocks = preview(sample_program.sessions[0])
        assert [b.label for b in blocks] == ["A", "Finisher"]
        assert blocks[0].display_name == "Supersets"
        assert blocks[1].item_lines == ("Burpee - 10 reps",)

    def test_rounds_and_units(self, sample_program) -> None:
        (emom,) = preview(sample_program.sessions[1])
        assert emom.rounds == 10
        assert emom.item_lines == ("Back Squat - 3 reps @ 225lb",)


class TestFormatElapsed:
    @pytest.mark.parametrize(
        "seconds, text",
        [(0, "0:00"), (59, "0:59"), (75, "1:15"), (3599, "59:59"), (3600, "1:00:00"), (3725, "1:02:05")],
    )
    def test_format(self, seconds: int, text: str) -> None:
        assert format_elapsed(seconds) == text

    def test_negative_clamped(self) -> None:
        assert format_elapsed(-5) == "0:00"
