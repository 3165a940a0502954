"""
Configuration management.
"""

import os
from dataclasses import dataclass, field


def _is_production() -> bool:
    return (
        os.getenv("RAILWAY_ENVIRONMENT") is not None
        or os.getenv("PRODUCTION", "").lower() == "true"
    )


def _allowed_origins() -> list[str]:
    raw = os.getenv("ALLOWED_ORIGINS", "")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    if not origins and not _is_production():
        # Development fallback only
        origins = ["http://localhost:8000", "http://127.0.0.1:8000"]
    return origins


@dataclass
class Config:
    """
    Application configuration.

    Loads from environment variables with sensible defaults.
    """

    # Server
    host: str = field(default_factory=lambda: os.getenv("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))
    production: bool = field(default_factory=_is_production)
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    # CORS
    allowed_origins: list[str] = field(default_factory=_allowed_origins)

    def __post_init__(self) -> None:
        # Debug mode is never enabled in production
        if self.production:
            self.debug = False

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from environment."""
        return cls()

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "host": self.host,
            "port": self.port,
            "production": self.production,
            "debug": self.debug,
            "log_level": self.log_level,
            "allowed_origins": list(self.allowed_origins),
        }
