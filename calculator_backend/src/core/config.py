"""Application configuration utilities.

This module centralizes environment configuration for the calculator backend:
listen address, log level, allowed CORS origins and the reported version.

Controls:
- Avoid crashing on missing or malformed env; fall back to safe defaults.
- Validate enum-like env values (LOG_LEVEL) and numeric ranges (PORT).

Environment variables:
- PORT: Listen port, defaults to 3000
- HOST: Listen address, defaults to 0.0.0.0
- LOG_LEVEL: One of DEBUG, INFO, WARNING, ERROR, CRITICAL; defaults to INFO
- CORS_ORIGINS: Comma separated origins, defaults to "*"
- APP_VERSION: Version reported by GET / and OpenAPI, defaults to 1.0.0
"""
from __future__ import annotations

import os
from typing import Optional
from pydantic import BaseModel, Field

DEFAULT_PORT = 3000
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseModel):
    """Configuration settings loaded from environment with safe defaults."""
    app_name: str = Field(default="Sample Calculator App", description="Service display name.")
    app_version: str = Field(default="1.0.0", description="Reported service version.")
    host: str = Field(default="0.0.0.0", description="Listen address.")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535, description="Listen port.")
    log_level: str = Field(default="INFO", description="Root log level name.")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins.",
    )


def _parse_port(raw: Optional[str]) -> int:
    """Parse PORT, falling back to the default for empty, non-integer or out-of-range values."""
    if not raw or not raw.strip():
        return DEFAULT_PORT
    try:
        port = int(raw.strip())
    except ValueError:
        return DEFAULT_PORT
    if port < 1 or port > 65535:
        return DEFAULT_PORT
    return port


def load_settings() -> Settings:
    """Load settings from environment with robust defaults and validation.

    Returns:
        Settings: Validated settings object.
    """
    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = "INFO"

    cors_origins_raw = os.getenv("CORS_ORIGINS", "*")
    cors_origins = [o.strip() for o in cors_origins_raw.split(",") if o.strip()] or ["*"]

    return Settings(
        app_version=os.getenv("APP_VERSION", "1.0.0").strip() or "1.0.0",
        host=os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0",
        port=_parse_port(os.getenv("PORT")),
        log_level=log_level,
        cors_origins=cors_origins,
    )


# Singleton-style accessor
_settings: Optional[Settings] = None

# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Get cached application settings."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings

# PUBLIC_INTERFACE
def reset_settings_cache() -> None:
    """Reset the cached settings.

    Intended for tests so that changes to environment variables (e.g., PORT,
    LOG_LEVEL) take effect on subsequent calls to get_settings().
    """
    global _settings
    _settings = None
