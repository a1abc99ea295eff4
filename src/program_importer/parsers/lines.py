"""
Line Classifier

Maps one trimmed line of program text onto the grammar rule it belongs to.
Classification is pure: validation (week ranges, orphan days) happens in the
program parser, which owns the cursor.
"""

import re
from dataclasses import dataclass
from typing import Union

from .models import ProgramType, Section

PROGRAM_PATTERN = re.compile(r'^PROGRAM:\s*(.+)$', re.IGNORECASE)
TYPE_PATTERN = re.compile(r'^TYPE:\s*(strength|mobility|cardio)$', re.IGNORECASE)
INDEFINITE_PATTERN = re.compile(r'^INDEFINITE:\s*yes$', re.IGNORECASE)
DESCRIPTION_PATTERN = re.compile(r'^DESCRIPTION:\s*(.+)$', re.IGNORECASE)

# Longer numbers than this are clamped rather than converted
MAX_MARKER_DIGITS = 9

# [WEEK 1], [WEEKS 1-3]
WEEK_PATTERN = re.compile(r'^\[WEEKS?\s+(\d+)(?:\s*-\s*(\d+))?\]$', re.IGNORECASE)
# [DAY 1] Push Day
DAY_PATTERN = re.compile(r'^\[DAY\s+(\d+)\]\s*(.*)$', re.IGNORECASE)

SECTION_MARKERS = {
    '[WARMUP]': Section.WARMUP,
    '[STRENGTH]': Section.STRENGTH,
    '[COOLDOWN]': Section.COOLDOWN,
}
REST_MARKER = '[REST]'


@dataclass(frozen=True)
class ProgramHeader:
    name: str


@dataclass(frozen=True)
class TypeHeader:
    type: ProgramType


@dataclass(frozen=True)
class IndefiniteHeader:
    pass


@dataclass(frozen=True)
class DescriptionHeader:
    text: str


@dataclass(frozen=True)
class WeekMarker:
    start: int
    end: int
    raw: str


@dataclass(frozen=True)
class DayMarker:
    number: int
    name: str


@dataclass(frozen=True)
class SectionMarker:
    section: Section


@dataclass(frozen=True)
class RestMarker:
    pass


@dataclass(frozen=True)
class ExerciseCandidate:
    raw: str


@dataclass(frozen=True)
class Blank:
    pass


@dataclass(frozen=True)
class Other:
    raw: str


HeaderLine = Union[ProgramHeader, TypeHeader, IndefiniteHeader, DescriptionHeader]
MarkerLine = Union[WeekMarker, DayMarker, SectionMarker, RestMarker]
LineKind = Union[HeaderLine, MarkerLine, ExerciseCandidate, Blank, Other]


def _marker_number(digits: str) -> int:
    if len(digits) > MAX_MARKER_DIGITS:
        return 10 ** MAX_MARKER_DIGITS
    return int(digits)


def classify_line(text: str, in_section: bool = False) -> LineKind:
    """
    Classify a single trimmed line.

    Args:
        text: The line, already stripped of surrounding whitespace
        in_section: True while a section is active and no rest block is open;
            unrecognized text is then an exercise candidate instead of Other
    """
    if not text:
        return Blank()

    program = PROGRAM_PATTERN.match(text)
    if program:
        return ProgramHeader(name=program.group(1).strip())

    program_type = TYPE_PATTERN.match(text)
    if program_type:
        return TypeHeader(type=ProgramType(program_type.group(1).lower()))

    if INDEFINITE_PATTERN.match(text):
        return IndefiniteHeader()

    description = DESCRIPTION_PATTERN.match(text)
    if description:
        return DescriptionHeader(text=description.group(1).strip())

    week = WEEK_PATTERN.match(text)
    if week:
        start = _marker_number(week.group(1))
        end = _marker_number(week.group(2)) if week.group(2) else start
        return WeekMarker(start=start, end=end, raw=text)

    day = DAY_PATTERN.match(text)
    if day:
        return DayMarker(number=_marker_number(day.group(1)), name=day.group(2).strip())

    token = text.upper()
    if token in SECTION_MARKERS:
        return SectionMarker(section=SECTION_MARKERS[token])
    if token == REST_MARKER:
        return RestMarker()

    if in_section:
        return ExerciseCandidate(raw=text)
    return Other(raw=text)


def is_marker(kind: LineKind) -> bool:
    return isinstance(kind, (WeekMarker, DayMarker, SectionMarker, RestMarker))


def is_header(kind: LineKind) -> bool:
    return isinstance(kind, (ProgramHeader, TypeHeader, IndefiniteHeader, DescriptionHeader))
