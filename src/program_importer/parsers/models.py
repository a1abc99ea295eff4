"""
Parser Models

Pydantic models for the program tree produced by the program text parser.
Every model is frozen: a parse call builds the tree once and nothing mutates it
afterwards. A re-import produces a new ParsedProgram.
"""

from typing import List, Optional
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ProgramType(str, Enum):
    """Program categories accepted by the TYPE: header"""
    STRENGTH = "strength"
    MOBILITY = "mobility"
    CARDIO = "cardio"


class Section(str, Enum):
    """Exercise grouping within a day"""
    WARMUP = "warmup"
    STRENGTH = "strength"
    COOLDOWN = "cooldown"


class ParseError(BaseModel):
    """Non-fatal problem found on a given line"""
    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=1)
    message: str


class ParsedExercise(BaseModel):
    """Single exercise line inside a day section"""
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    section: Section
    label: Optional[str] = Field(default=None, description="Superset position, e.g. 'A1'")
    name: str = Field(..., min_length=1)
    sets: str = Field(default="1", description="Sets kept as text")
    reps: str = Field(default="", description="Reps as text to preserve '8-10 per side', '30s'")
    rest_seconds: Optional[int] = Field(default=None, ge=0)
    rpe: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None
    source_line: int = Field(..., ge=1)


class ParsedDay(BaseModel):
    """Training or rest day within a week block"""
    model_config = ConfigDict(frozen=True)

    day_number: int = Field(..., ge=1)
    name: str
    is_rest_day: bool = False
    rest_day_notes: Optional[str] = None
    exercises: List[ParsedExercise] = Field(default_factory=list)

    @model_validator(mode="after")
    def _rest_day_has_no_exercises(self) -> "ParsedDay":
        if self.is_rest_day and self.exercises:
            raise ValueError("rest days cannot contain exercises")
        return self


class ParsedWeek(BaseModel):
    """Week block; one template may cover a range of weeks ([WEEKS 1-3])"""
    model_config = ConfigDict(frozen=True)

    week_numbers: List[int] = Field(..., min_length=1)
    days: List[ParsedDay] = Field(default_factory=list)


class ParsedProgram(BaseModel):
    """Result of a single parse call. Always returned, even on failure."""
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    name: str = ""
    type: ProgramType = ProgramType.STRENGTH
    is_indefinite: bool = False
    description: Optional[str] = None
    weeks: List[ParsedWeek] = Field(default_factory=list)
    errors: List[ParseError] = Field(default_factory=list)

    @model_validator(mode="after")
    def _failure_is_reported(self) -> "ParsedProgram":
        if (not self.name or not self.weeks) and not self.errors:
            raise ValueError("a program without a name or weeks must carry errors")
        return self


class ProgramSummary(BaseModel):
    """Counts shown on the import review screen"""
    week_templates: int = Field(default=0, ge=0)
    total_weeks: int = Field(default=0, ge=0, description="Weeks after expanding ranges")
    total_days: int = Field(default=0, ge=0)
    rest_days: int = Field(default=0, ge=0)
    total_exercises: int = Field(default=0, ge=0)
    unique_exercises: int = Field(default=0, ge=0)
    can_import: bool = False
