"""Serialization module: convert programs and results to/from the wire format."""

from program_engine.serialization.wire import (
    exercise_from_wire,
    from_wire_format,
    result_from_wire,
    result_to_wire,
    to_wire_format,
)

__all__ = [
    "exercise_from_wire",
    "from_wire_format",
    "result_from_wire",
    "result_to_wire",
    "to_wire_format",
]
