"""
Configuration helpers for the Chirpy backend.

Settings are read from environment variables once and cached; tests call
``get_settings.cache_clear()`` after changing the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    database_path: str
    db_autocreate: bool
    static_dir: str
    jwt_secret: str
    jwt_issuer: str
    token_ttl_seconds: int
    max_chirp_length: int
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "8080"), 8080),
        database_path=os.getenv("DATABASE_PATH", "database.json"),
        db_autocreate=_bool(os.getenv("DB_AUTOCREATE"), False),
        static_dir=os.getenv("STATIC_DIR", "."),
        jwt_secret=os.getenv("JWT_SECRET", ""),
        jwt_issuer=os.getenv("JWT_ISSUER", "chirpy"),
        token_ttl_seconds=_int(os.getenv("TOKEN_TTL_SECONDS", "86400"), 86400),
        max_chirp_length=_int(os.getenv("MAX_CHIRP_LENGTH", "140"), 140),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
