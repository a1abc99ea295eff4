"""Service-level API routes."""

from fastapi import APIRouter

from program_importer.config import settings

router = APIRouter()


@router.get("/health")
def health():
    """Health check endpoint."""
    return {"ok": True}


@router.get("/version")
def get_version():
    """Service name and deployment environment."""
    return {"service": "program-importer", "environment": settings.ENVIRONMENT}
