"""Program text parser for coach bulk imports."""
from .models import (
    ParseError,
    ParsedDay,
    ParsedExercise,
    ParsedProgram,
    ParsedWeek,
    ProgramSummary,
    ProgramType,
    Section,
)
from .program_parser import FORMAT_GUIDE, parse_program
from .summary import (
    expand_weeks,
    format_errors,
    get_unique_exercise_names,
    summarize_program,
)

__all__ = [
    "FORMAT_GUIDE",
    "ParseError",
    "ParsedDay",
    "ParsedExercise",
    "ParsedProgram",
    "ParsedWeek",
    "ProgramSummary",
    "ProgramType",
    "Section",
    "expand_weeks",
    "format_errors",
    "get_unique_exercise_names",
    "parse_program",
    "summarize_program",
]
