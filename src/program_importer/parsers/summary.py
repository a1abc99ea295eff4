"""
Program Summary

Derived views over a completed ParsedProgram. Used by the import review screen
and by the persistence layer, which resolves exercise names against the catalog
before writing weeks and days.
"""

from typing import Iterator, List, Tuple

from .models import ParsedDay, ParsedProgram, ProgramSummary


def get_unique_exercise_names(program: ParsedProgram) -> List[str]:
    """All distinct exercise names in the program, sorted ascending"""
    names = set()
    for week in program.weeks:
        for day in week.days:
            for exercise in day.exercises:
                names.add(exercise.name)
    return sorted(names)


def expand_weeks(program: ParsedProgram) -> Iterator[Tuple[int, ParsedDay]]:
    """
    Yield (week_number, day) once per week number.

    A [WEEKS 1-3] template with two days yields six pairs, in week order as
    written, which is the row layout the persistence layer stores.
    """
    for week in program.weeks:
        for week_number in week.week_numbers:
            for day in week.days:
                yield week_number, day


def format_errors(program: ParsedProgram) -> List[str]:
    return [f"Line {error.line}: {error.message}" for error in program.errors]


def summarize_program(program: ParsedProgram) -> ProgramSummary:
    days = [day for week in program.weeks for day in week.days]

    return ProgramSummary(
        week_templates=len(program.weeks),
        total_weeks=sum(len(week.week_numbers) for week in program.weeks),
        total_days=len(days),
        rest_days=sum(1 for day in days if day.is_rest_day),
        total_exercises=sum(len(day.exercises) for day in days),
        unique_exercises=len(get_unique_exercise_names(program)),
        can_import=not program.errors,
    )
