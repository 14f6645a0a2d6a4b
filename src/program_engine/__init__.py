"""Workout program core: type registry, builder, execution engine and analytics."""

from program_engine.builder import ProgramBuilder
from program_engine.execution import ExecutionEngine
from program_engine.registry import constraints_for, display_info

__all__ = ["ExecutionEngine", "ProgramBuilder", "constraints_for", "display_info"]
