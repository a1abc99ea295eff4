"""
Program Text Parser

Single-pass translator from the coach import format into a ParsedProgram:

    PROGRAM: Program Name
    TYPE: strength
    [WEEKS 1-3]
    [DAY 1] Push
    [STRENGTH]
    A1. Bench Press | 3x10 | Rest: 90s | RPE: 8 | Note: Control the descent

Errors never abort the parse. They are collected per line so a partially
malformed document still produces a preview of everything that did parse.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from program_importer.utils import inclusive_range
from .base import ErrorCollector
from .lines import (
    Blank,
    DayMarker,
    DescriptionHeader,
    ExerciseCandidate,
    HeaderLine,
    IndefiniteHeader,
    LineKind,
    MarkerLine,
    ProgramHeader,
    RestMarker,
    SectionMarker,
    TypeHeader,
    WeekMarker,
    classify_line,
    is_header,
    is_marker,
)
from .models import (
    ParsedDay,
    ParsedExercise,
    ParsedProgram,
    ParsedWeek,
    ProgramType,
    Section,
)
from .values import parse_exercise_line

logger = logging.getLogger(__name__)

# Two years of weekly programming
MAX_WEEK_NUMBER = 104

FORMAT_GUIDE = """PROGRAM: Program Name
TYPE: strength
INDEFINITE: yes
DESCRIPTION: Brief description of the program.

[WEEK 1]

[DAY 1] Day Name
[WARMUP]
A1. Exercise | 1x10 | Note: Optional note
A2. Exercise | 1x8 per side

[STRENGTH]
A1. Exercise | 3x10 | Rest: 60s | RPE: 6 | Note: Optional
A2. Exercise | 3x12 | Rest: 60s | RPE: 6
B1. Exercise | 3x10 per side | Rest: 45s

[COOLDOWN]
A1. Stretch | 1x30s per side
A2. Stretch | 1x45s

[DAY 2] Rest Day
[REST]
Light walking or mobility work as desired."""


@dataclass
class DayBuilder:
    day_number: int
    name: str
    is_rest_day: bool = False
    exercises: List[ParsedExercise] = field(default_factory=list)

    def build(self, rest_notes: List[str]) -> ParsedDay:
        notes = "\n".join(rest_notes) if self.is_rest_day and rest_notes else None
        return ParsedDay(
            day_number=self.day_number,
            name=self.name,
            is_rest_day=self.is_rest_day,
            rest_day_notes=notes,
            exercises=list(self.exercises),
        )


@dataclass
class WeekBuilder:
    week_numbers: List[int]
    days: List[ParsedDay] = field(default_factory=list)

    def build(self) -> ParsedWeek:
        return ParsedWeek(week_numbers=self.week_numbers, days=list(self.days))


@dataclass
class ParseState:
    """Cursor for one parse call. Never shared between calls."""
    name: str = ""
    type: ProgramType = ProgramType.STRENGTH
    is_indefinite: bool = False
    description: Optional[str] = None
    weeks: List[ParsedWeek] = field(default_factory=list)
    current_week: Optional[WeekBuilder] = None
    current_day: Optional[DayBuilder] = None
    current_section: Optional[Section] = None
    collecting_rest_notes: bool = False
    rest_note_lines: List[str] = field(default_factory=list)
    collector: ErrorCollector = field(default_factory=ErrorCollector)

    @property
    def in_section(self) -> bool:
        return self.current_section is not None and not self.collecting_rest_notes

    def reset_day_cursor(self):
        self.current_section = None
        self.collecting_rest_notes = False
        self.rest_note_lines = []

    def flush_day(self):
        if self.current_day and self.current_week:
            self.current_week.days.append(self.current_day.build(self.rest_note_lines))
        self.current_day = None
        self.reset_day_cursor()

    def flush_week(self):
        self.flush_day()
        if self.current_week:
            self.weeks.append(self.current_week.build())
        self.current_week = None


def parse_program(text: str) -> ParsedProgram:
    """
    Parse program text into a ParsedProgram.

    Never raises. Problems are reported through ``ParsedProgram.errors`` with
    the 1-based line number they were found on.
    """
    state = ParseState()

    for index, line in enumerate(text.split("\n")):
        trimmed = line.strip()
        kind = classify_line(trimmed, in_section=state.in_section)
        _apply_line(state, kind, trimmed, index + 1)

    state.flush_week()

    if not state.name:
        state.collector.add_error(1, "Missing PROGRAM: header")
    if not state.weeks:
        state.collector.add_error(1, "No weeks found. Add [WEEK 1] marker.")

    program = ParsedProgram(
        name=state.name,
        type=state.type,
        is_indefinite=state.is_indefinite,
        description=state.description,
        weeks=state.weeks,
        errors=state.collector.errors,
    )
    logger.info(
        f"Parsed program '{program.name}': {len(program.weeks)} week blocks, "
        f"{len(program.errors)} errors"
    )
    return program


def _apply_line(state: ParseState, kind: LineKind, trimmed: str, line_number: int):
    """Fold one classified line into the parse state"""
    if isinstance(kind, Blank):
        return

    if is_header(kind):
        _apply_header(state, kind)
    elif is_marker(kind):
        _apply_marker(state, kind, line_number)
    elif state.collecting_rest_notes:
        state.rest_note_lines.append(trimmed)
    elif isinstance(kind, ExerciseCandidate):
        _add_exercise(state, kind, line_number)

    # Remaining Other lines carry no meaning outside a rest block


def _apply_header(state: ParseState, header: HeaderLine):
    # Headers update the program wherever they appear
    if isinstance(header, ProgramHeader):
        state.name = header.name
    elif isinstance(header, TypeHeader):
        state.type = header.type
    elif isinstance(header, IndefiniteHeader):
        state.is_indefinite = True
    elif isinstance(header, DescriptionHeader):
        state.description = header.text


def _apply_marker(state: ParseState, marker: MarkerLine, line_number: int):
    if isinstance(marker, WeekMarker):
        _open_week(state, marker, line_number)
    elif isinstance(marker, DayMarker):
        _open_day(state, marker, line_number)
    elif isinstance(marker, SectionMarker):
        state.current_section = marker.section
        state.collecting_rest_notes = False
    elif isinstance(marker, RestMarker):
        _start_rest_block(state, line_number)


def _open_week(state: ParseState, marker: WeekMarker, line_number: int):
    if marker.start < 1 or marker.start > marker.end or marker.end > MAX_WEEK_NUMBER:
        state.collector.add_error(line_number, f'Invalid week range: "{marker.raw}"')
        return

    state.flush_week()
    state.current_week = WeekBuilder(week_numbers=inclusive_range(marker.start, marker.end))


def _open_day(state: ParseState, marker: DayMarker, line_number: int):
    state.flush_day()

    if not state.current_week:
        state.collector.add_error(line_number, "Day found before week marker")
        return
    if marker.number < 1:
        state.collector.add_error(line_number, f"Invalid day number: {marker.number}")
        return

    state.current_day = DayBuilder(
        day_number=marker.number,
        name=marker.name or f"Day {marker.number}",
    )


def _start_rest_block(state: ParseState, line_number: int):
    state.current_section = None
    state.collecting_rest_notes = True
    state.rest_note_lines = []

    day = state.current_day
    if not day:
        return
    if day.exercises:
        state.collector.add_error(line_number, "Rest marker found in a day with exercises")
        return
    day.is_rest_day = True


def _add_exercise(state: ParseState, candidate: ExerciseCandidate, line_number: int):
    # Orphan days (no week open) drop their lines without a second error
    if not state.current_day or state.current_section is None:
        return
    if state.current_day.is_rest_day:
        state.collector.add_error(line_number, f'Exercise found in a rest day: "{candidate.raw}"')
        return

    exercise = parse_exercise_line(candidate.raw, line_number, state.current_section)
    if exercise:
        state.current_day.exercises.append(exercise)
    else:
        state.collector.add_error(line_number, f'Could not parse exercise: "{candidate.raw}"')
