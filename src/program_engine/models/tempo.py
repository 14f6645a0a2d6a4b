"""Lifting tempo notation.

Tempo strings describe seconds spent in each phase of a rep:
eccentric, bottom pause, concentric, top pause. Supported forms:

    "3010"  four phases, one character each
    "30X0"  X marks an explosive phase and counts as 0 seconds
    "301"   three phases; top pause defaults to 0

Anything after the recognised prefix is ignored, so "3010 controlled"
parses as "3010".
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_PHASE = r"([0-9xX])"
_FOUR_PHASES = re.compile(rf"^{_PHASE}{_PHASE}{_PHASE}{_PHASE}(?:\s.*)?$")
_THREE_PHASES = re.compile(rf"^{_PHASE}{_PHASE}{_PHASE}(?:\s.*)?$")


def _phase_seconds(char: str) -> int:
    return 0 if char in "xX" else int(char)


@dataclass(frozen=True)
class Tempo:
    """Parsed tempo. Phases are None when the raw string was not understood."""

    raw: str | None
    eccentric: int | None = None
    bottom_pause: int | None = None
    concentric: int | None = None
    top_pause: int | None = None

    @property
    def is_empty(self) -> bool:
        return self.raw is None or not self.raw.strip()

    @property
    def is_valid(self) -> bool:
        """Empty tempo is valid; otherwise at least one moving phase must parse."""
        if self.is_empty:
            return True
        return self.eccentric is not None or self.concentric is not None

    @property
    def seconds_per_rep(self) -> int:
        return sum(
            p for p in (self.eccentric, self.bottom_pause, self.concentric, self.top_pause)
            if p is not None
        )

    def describe(self) -> str:
        def _fmt(value: int | None) -> str:
            return f"{value}s" if value is not None else "unspecified"

        return (
            f"Eccentric: {_fmt(self.eccentric)}, "
            f"Bottom pause: {_fmt(self.bottom_pause)}, "
            f"Concentric: {_fmt(self.concentric)}, "
            f"Top pause: {_fmt(self.top_pause)}"
        )


def parse_tempo(text: str | None) -> Tempo:
    """Parse a tempo string into its four phases."""
    if text is None or not text.strip():
        return Tempo(raw=text)

    tempo = text.strip()

    match = _FOUR_PHASES.match(tempo)
    if match:
        ecc, bottom, con, top = (_phase_seconds(g) for g in match.groups())
        return Tempo(tempo, ecc, bottom, con, top)

    match = _THREE_PHASES.match(tempo)
    if match:
        ecc, bottom, con = (_phase_seconds(g) for g in match.groups())
        return Tempo(tempo, ecc, bottom, con, 0)

    return Tempo(raw=tempo)


def format_tempo(tempo: Tempo) -> str:
    """Render a tempo back to text, preferring the original string."""
    if not tempo.is_empty:
        return tempo.raw.strip()  # type: ignore[union-attr]
    return "".join(
        str(p if p is not None else 0)
        for p in (tempo.eccentric, tempo.bottom_pause, tempo.concentric, tempo.top_pause)
    )
