"""Execution engine: live session state machine and result aggregation."""

from program_engine.execution.engine import ExecutionEngine
from program_engine.execution.preview import BlockPreview, format_elapsed, preview
from program_engine.execution.run_state import LoggedSet, RunMetrics, RunState

__all__ = [
    "BlockPreview",
    "ExecutionEngine",
    "LoggedSet",
    "RunMetrics",
    "RunState",
    "format_elapsed",
    "preview",
]
