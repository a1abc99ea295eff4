"""
Program import endpoints

Provides POST /programs/import/parse, which turns pasted program text into a
preview for the coach review screen: the parsed tree, the exercise names the
catalog step must resolve, summary counts and "Line N: message" errors.

Parsing never fails outright. A request only errors on transport problems
(missing auth, blank or oversized text).
"""

import logging
from pydantic import BaseModel, Field
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from program_importer.auth import get_current_coach
from program_importer.config import settings
from program_importer.parsers.models import ParsedProgram, ProgramSummary
from program_importer.parsers.program_parser import FORMAT_GUIDE, parse_program
from program_importer.parsers.summary import (
    format_errors,
    get_unique_exercise_names,
    summarize_program,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/programs/import")


# ---------------------------------------------------------------------------
# Request/Response Models
# ---------------------------------------------------------------------------

class ImportProgramRequest(BaseModel):
    """Request model for POST /programs/import/parse"""
    text: str = Field(..., description="Program text in the import format")


class ImportPreviewResponse(BaseModel):
    """Response model for POST /programs/import/parse"""
    program: ParsedProgram
    unique_exercise_names: list[str] = Field(default_factory=list)
    summary: ProgramSummary
    error_messages: list[str] = Field(default_factory=list, description="'Line N: message' entries")


# ---------------------------------------------------------------------------
# API Endpoints
# ---------------------------------------------------------------------------

@router.get("/format-guide")
def get_format_guide() -> dict:
    """Example document describing the import format."""
    return {"format_guide": FORMAT_GUIDE}


@router.post("/parse")
def parse_program_text(
    request: ImportProgramRequest,
    coach: dict = Depends(get_current_coach),
) -> JSONResponse:
    """
    Parse program text into a reviewable preview.

    ## Request Body
    - **text**: The program text (PROGRAM:/TYPE: headers, [WEEK]/[DAY] markers,
      sections and pipe-delimited exercise lines)

    ## Response
    - program: parsed weeks, days and exercises plus collected errors
    - unique_exercise_names: sorted names to resolve against the catalog
    - summary: counts for the review screen; can_import is false while errors remain
    - error_messages: errors rendered as "Line N: message"
    """
    if not request.text.strip():
        raise HTTPException(status_code=400, detail="Text is required")

    if len(request.text) > settings.MAX_IMPORT_CHARS:
        logger.info(f"Rejected import from {coach['user_id']}: {len(request.text)} chars")
        raise HTTPException(
            status_code=413,
            detail=f"Program text exceeds {settings.MAX_IMPORT_CHARS} characters",
        )

    program = parse_program(request.text)
    summary = summarize_program(program)
    if not summary.can_import:
        logger.info(f"Import preview for {coach['user_id']} has {len(program.errors)} errors")

    response = ImportPreviewResponse(
        program=program,
        unique_exercise_names=get_unique_exercise_names(program),
        summary=summary,
        error_messages=format_errors(program),
    )
    return JSONResponse(response.model_dump(mode="json"))
