"""
Centralized settings for the portal tool service.
"""
import logging
import os
from dataclasses import dataclass, field
from typing import Optional


ENV_PREFIX = "PORTAL_TOOL_"
DEFAULT_LOG_LEVEL = "INFO"


def _env(name: str, default: str) -> str:
    return os.environ.get(f"{ENV_PREFIX}{name}", default).strip()


@dataclass
class Settings:
    """Service settings with sensible defaults."""

    # API metadata
    api_title: str = "Portal Tool API"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Comma separated in the environment
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from PORTAL_TOOL_* environment variables."""
        origins = [o.strip() for o in _env('CORS_ORIGINS', '*').split(',') if o.strip()]

        try:
            port = int(_env('PORT', '8000'))
        except ValueError:
            port = 8000

        log_level = _env('LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
        if log_level not in logging.getLevelNamesMapping():
            log_level = DEFAULT_LOG_LEVEL

        return cls(
            api_title=_env('API_TITLE', 'Portal Tool API'),
            host=_env('HOST', '0.0.0.0'),
            port=port,
            cors_origins=origins or ["*"],
            log_level=log_level,
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings():
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
