"""
Configuration helpers for the Creatives backend.

Routers and services read settings through ``get_settings`` instead of
touching ``os.environ`` directly, so tests can swap the environment and
clear the cache.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    jwt_secret: str
    jwt_algorithm: str
    token_ttl_seconds: int
    github_client_id: str
    github_secret: str
    github_api_url: str
    github_timeout_seconds: float
    port: int
    log_level: str
    log_file: str
    cors_origins: tuple[str, ...]
    auto_create_tables: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _float(value: str | None, default: float = 0.0) -> float:
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    origins = tuple(o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./creatives.db"),
        jwt_secret=os.getenv("JWT_SECRET", "change-me"),
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        token_ttl_seconds=_int(os.getenv("TOKEN_TTL_SECONDS", "3600"), 3600),
        github_client_id=os.getenv("GITHUB_CLIENT_ID", ""),
        github_secret=os.getenv("GITHUB_SECRET", ""),
        github_api_url=os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/"),
        github_timeout_seconds=_float(os.getenv("GITHUB_TIMEOUT_SECONDS", "10"), 10.0),
        port=_int(os.getenv("PORT", "5055"), 5055),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_file=os.getenv("LOG_FILE", ""),
        cors_origins=origins,
        auto_create_tables=_bool(os.getenv("AUTO_CREATE_TABLES"), True),
    )
