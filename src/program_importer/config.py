"""Configuration settings for the program importer API."""
import os
from typing import List, Literal


EnvironmentType = Literal["development", "staging", "production"]

DEFAULT_MAX_IMPORT_CHARS = 50000
DEFAULT_ALLOWED_ORIGINS = "http://localhost:3000,http://localhost:3001"
DEFAULT_COACH_ROLES = "coach,admin"


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"

    # Import limits
    MAX_IMPORT_CHARS: int = DEFAULT_MAX_IMPORT_CHARS

    # CORS
    ALLOWED_ORIGINS: List[str] = []

    # JWT roles allowed to import programs
    COACH_ROLES: List[str] = []

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        # Import limits
        try:
            self.MAX_IMPORT_CHARS = int(os.getenv("MAX_IMPORT_CHARS", str(DEFAULT_MAX_IMPORT_CHARS)))
        except ValueError:
            self.MAX_IMPORT_CHARS = DEFAULT_MAX_IMPORT_CHARS

        # CORS
        origins = os.getenv("ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS)
        self.ALLOWED_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]

        # Auth
        roles = os.getenv("COACH_ROLES", DEFAULT_COACH_ROLES)
        self.COACH_ROLES = [r.strip().lower() for r in roles.split(",") if r.strip()]


settings = Settings()
