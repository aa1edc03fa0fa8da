"""
Web App — Application Configuration
====================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads WEB_APP_* environment variables (or .env),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py (logging, lifespan) and server.py (bind address).
When:  Loaded once at module import time.

Every field has a default that reproduces the fixed service contract
(0.0.0.0:8080, INFO logging), so the server starts with no environment at all.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=8080, ge=1, le=65535, description="TCP port to bind")

    # ── Logging ───────────────────────────────────────────────────────────
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    # What: Run mode, same three modes as the Gin engine
    #   debug:   route table is logged at startup
    #   release: quiet startup
    #   test:    access log silenced
    mode: str = Field(default="debug")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("mode")
    @classmethod
    def validate_mode(cls, v: str) -> str:
        valid_modes = {"debug", "release", "test"}
        lower = v.lower()
        if lower not in valid_modes:
            raise ValueError(f"Invalid mode '{v}'. Must be one of: {valid_modes}")
        return lower

    @property
    def is_debug(self) -> bool:
        return self.mode == "debug"

    @property
    def is_test(self) -> bool:
        return self.mode == "test"

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = SettingsConfigDict(
        env_prefix="WEB_APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # WEB_APP_PORT and web_app_port both work
        extra="ignore",
    )


# Singleton instance, imported throughout the application
settings = Settings()
