"""
Test fixtures for program-importer.

Provides an authenticated TestClient and sample program documents.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import program_importer...`
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from program_importer.main import app
from program_importer.auth import get_current_coach


# ---------------------------------------------------------------------------
# Auth Mock
# ---------------------------------------------------------------------------


TEST_USER_ID = "coach-test-123"


async def mock_get_current_coach() -> dict:
    """Mock auth dependency that returns a test coach."""
    return {"user_id": TEST_USER_ID, "role": "coach"}


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def client() -> TestClient:
    """TestClient with the auth dependency overridden."""
    app.dependency_overrides[get_current_coach] = mock_get_current_coach
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def unauthenticated_client() -> TestClient:
    app.dependency_overrides.clear()
    return TestClient(app)


# ---------------------------------------------------------------------------
# Sample Programs
# ---------------------------------------------------------------------------


@pytest.fixture
def full_program_text() -> str:
    """Two week blocks covering sections, ranges and a rest day."""
    return """PROGRAM: Hypertrophy Block
TYPE: strength
DESCRIPTION: Four week upper/lower split.

[WEEKS 1-3]

[DAY 1] Upper
[WARMUP]
A1. Arm Circles | 1x10 | Note: Both directions
[STRENGTH]
A1. Bench Press | 3x10 | Rest: 90s | RPE: 8 | Note: Control the descent
A2. Row | 3x12 | Rest: 60s
B1. Curl | 3x10 per side | Rest: 45s
[COOLDOWN]
A1. Doorway Stretch | 1x30s per side

[DAY 2] Rest Day
[REST]
Light walking or mobility work.
Stay hydrated.

[WEEK 4]

[DAY 1] Deload
[STRENGTH]
A1. Bench Press | 2x8 | Rest: 2min | RPE: 6
"""


@pytest.fixture
def minimal_program_text() -> str:
    return """PROGRAM: Test
TYPE: strength
[WEEK 1]
[DAY 1]
[STRENGTH]
A1. Squat | 3x10"""
