"""Tests for lifting tempo parsing."""

from __future__ import annotations

from program_engine.models.tempo import Tempo, format_tempo, parse_tempo


class TestParseTempo:
    def test_four_digits(self) -> None:
        t = parse_tempo("3010")
        assert (t.eccentric, t.bottom_pause, t.concentric, t.top_pause) == (3, 0, 1, 0)
        assert t.seconds_per_rep == 4
        assert t.is_valid

    def test_explosive_phase(self) -> None:
        t = parse_tempo("30X0")
        assert (t.eccentric, t.bottom_pause, t.concentric, t.top_pause) == (3, 0, 0, 0)

    def test_lowercase_x(self) -> None:
        t = parse_tempo("21x1")
        assert (t.eccentric, t.bottom_pause, t.concentric, t.top_pause) == (2, 1, 0, 1)

    def test_three_digits_default_top_pause(self) -> None:
        t = parse_tempo("301")
        assert t.top_pause == 0
        assert t.seconds_per_rep == 4

    def test_trailing_text_ignored(self) -> None:
        t = parse_tempo("4020 slow negatives")
        assert t.eccentric == 4
        assert t.raw == "4020 slow negatives"

    def test_empty_is_valid(self) -> None:
        assert parse_tempo(None).is_valid
        assert parse_tempo("  ").is_empty

    def test_garbage_is_invalid(self) -> None:
        t = parse_tempo("slow")
        assert not t.is_valid
        assert t.seconds_per_rep == 0

    def test_describe(self) -> None:
        assert parse_tempo("3110").describe() == (
            "Eccentric: 3s, Bottom pause: 1s, Concentric: 1s, Top pause: 0s"
        )
        assert "unspecified" in parse_tempo("bad").describe()


class TestFormatTempo:
    def test_prefers_raw(self) -> None:
        assert format_tempo(parse_tempo(" 30X0 ")) == "30X0"

    def test_from_phases(self) -> None:
        assert format_tempo(Tempo(raw=None, eccentric=2, bottom_pause=0, concentric=1)) == "2010"
