"""Program builder: constraint-checked editing of programs."""

from program_engine.builder.builder import ProgramBuilder
from program_engine.builder.state import BuilderState
from program_engine.builder.validation import BlockWarning

__all__ = ["BlockWarning", "BuilderState", "ProgramBuilder"]
