"""
Brain Cards Backend — Application Configuration
================================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.

Environment variables:
    PORT          Listening port (default 3024)
    HOST          Bind address (default 0.0.0.0)
    API_PREFIX    URI prefix for every API route (default /api)
    DB_CARD_PATH  Path of the JSON file holding all categories
    ENVIRONMENT   "test" silences the startup banner
    LOG_LEVEL     DEBUG, INFO, WARNING, ERROR or CRITICAL
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting has a default that works for local development, so the
    server starts with no configuration at all.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3024, ge=1, le=65535)

    # What: Prefix shared by every API route, e.g. /api/category
    # Requests outside the prefix are answered with 404
    api_prefix: str = Field(default="/api")

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        """Normalizes the prefix to a leading slash and no trailing slash."""
        v = v.strip()
        if not v.startswith("/"):
            raise ValueError(f"Invalid api_prefix '{v}'. Must start with '/'")
        v = v.rstrip("/")
        if not v:
            raise ValueError("api_prefix must name at least one path segment")
        return v

    # ── Storage ───────────────────────────────────────────────────────────
    # What: The flat JSON "database" holding every category
    # Relative paths resolve against the process working directory
    db_card_path: str = Field(default="./db_card.json")

    # ── Runtime ───────────────────────────────────────────────────────────
    # What: Deployment environment name; "test" suppresses the startup banner
    environment: str = Field(default="development")

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @property
    def is_test(self) -> bool:
        return self.environment.lower() == "test"

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance — imported throughout the application
settings = Settings()
