"""Exercise catalog entry: owned by the external catalog, read-only here."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Exercise:
    """A single catalog exercise referenced by block items."""

    id: str
    name: str
    category: str = ""
    primary_muscle: str = ""
    secondary_muscles: tuple[str, ...] = field(default_factory=tuple)
    equipment: str | None = None
    instructions: str | None = None
    description: str = ""
