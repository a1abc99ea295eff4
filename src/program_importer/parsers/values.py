"""
Value Parsers

Pure string -> value helpers used by the program text parser:
durations, sets/reps splitting and pipe-delimited exercise lines.
None of them raise; unparseable input returns None (or a default) and the
caller decides whether that is worth an error.
"""

import re
from typing import Optional, Tuple

from program_importer.utils import to_int
from .models import ParsedExercise, Section

# "2min", "2 min"
MINUTES_PATTERN = re.compile(r'^(\d{1,9})\s*min$', re.IGNORECASE)
# "90s", "90 s"
SECONDS_PATTERN = re.compile(r'^(\d{1,9})\s*s$', re.IGNORECASE)
PLAIN_NUMBER_PATTERN = re.compile(r'^(\d{1,9})$')

# "3x10", "4x8-10 per side", "3x30s"
SETS_REPS_PATTERN = re.compile(r'^(\d+)x(.+)$', re.IGNORECASE)

# "A1. Bench Press | ..."
LABEL_PATTERN = re.compile(r'^([A-Z]\d+)\.\s*(.+)$', re.IGNORECASE)

REST_FIELD_PATTERN = re.compile(r'^Rest:\s*(.+)$', re.IGNORECASE)
RPE_FIELD_PATTERN = re.compile(r'^RPE:\s*(\d+)$', re.IGNORECASE)
NOTE_FIELD_PATTERN = re.compile(r'^Note:\s*(.+)$', re.IGNORECASE)

# Coach editor rest input: "1m30s", "2m", "45s"
REST_MINUTES_PATTERN = re.compile(r'(\d{1,9})m')
REST_SECONDS_PATTERN = re.compile(r'(\d{1,9})s')


def parse_duration(value: str) -> Optional[int]:
    """
    Parse a duration into seconds.

    "30s" -> 30, "1min" -> 60, "45" -> 45. Anything else -> None.
    """
    v = value.strip().lower()
    if not v:
        return None

    minutes = MINUTES_PATTERN.match(v)
    if minutes:
        return int(minutes.group(1)) * 60

    seconds = SECONDS_PATTERN.match(v)
    if seconds:
        return int(seconds.group(1))

    plain = PLAIN_NUMBER_PATTERN.match(v)
    if plain:
        return int(plain.group(1))

    return None


def split_sets_reps(value: str) -> Tuple[str, str]:
    """
    Split "3x8-10 per side" into ("3", "8-10 per side").

    Without a leading "<int>x" the whole string is the reps and sets is "1".
    """
    v = value.strip()
    match = SETS_REPS_PATTERN.match(v)
    if match:
        return match.group(1), match.group(2).strip()
    return "1", v


def parse_exercise_line(raw: str, line_number: int, section: Section) -> Optional[ParsedExercise]:
    """
    Parse "A1. Exercise Name | 3x10 | Rest: 60s | RPE: 7 | Note: text".

    Returns None when the line has fewer than two pipe-delimited parts or no
    exercise name. Unknown trailing parts are ignored.
    """
    trimmed = raw.strip()
    if not trimmed:
        return None

    label = None
    body = trimmed
    label_match = LABEL_PATTERN.match(trimmed)
    if label_match:
        label = label_match.group(1).upper()
        body = label_match.group(2)

    parts = [p.strip() for p in body.split('|')]
    if len(parts) < 2:
        return None

    name = parts[0]
    if not name:
        return None

    sets, reps = split_sets_reps(parts[1])

    rest_seconds = None
    rpe = None
    notes = None

    for part in parts[2:]:
        rest_match = REST_FIELD_PATTERN.match(part)
        if rest_match:
            rest_seconds = parse_duration(rest_match.group(1))
            continue

        rpe_match = RPE_FIELD_PATTERN.match(part)
        if rpe_match:
            rpe = to_int(rpe_match.group(1))
            continue

        note_match = NOTE_FIELD_PATTERN.match(part)
        if note_match:
            notes = note_match.group(1)

    return ParsedExercise(
        section=section,
        label=label,
        name=name,
        sets=sets,
        reps=reps,
        rest_seconds=rest_seconds,
        rpe=rpe,
        notes=notes,
        source_line=line_number,
    )


def parse_rest_input(value: str) -> Optional[int]:
    """
    Parse rest typed into the program editor.

    Accepts "30s", "2m", "1m30s" and plain seconds ("90").
    Empty, invalid and zero inputs return None.
    """
    v = value.strip().lower()
    if not v:
        return None

    minutes = REST_MINUTES_PATTERN.search(v)
    seconds = REST_SECONDS_PATTERN.search(v)

    total = 0
    if minutes:
        total += int(minutes.group(1)) * 60
    if seconds:
        total += int(seconds.group(1))
    if not minutes and not seconds:
        plain = PLAIN_NUMBER_PATTERN.match(v)
        if plain:
            total = int(plain.group(1))

    return total or None


def format_rest_time(seconds: Optional[int]) -> str:
    """Format seconds as "30s", "2m" or "1m30s". None and 0 give ""."""
    if not seconds:
        return ""
    if seconds >= 60:
        mins, secs = divmod(seconds, 60)
        return f"{mins}m{secs}s" if secs else f"{mins}m"
    return f"{seconds}s"
