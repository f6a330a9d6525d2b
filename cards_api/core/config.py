"""
Configuration helpers for the card catalogue backend.

Routers and services read a Settings object instead of fetching os.environ
directly, so tests can build one by hand and pass it to create_app().
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
    jwt_secret: str
    token_ttl_seconds: int
    cards_path: str
    users_path: str
    card_store: str
    database_url: str
    log_level: str
    cors_origins: tuple[str, ...] = ()


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _csv(value: str | None) -> tuple[str, ...]:
        if not value:
            return ()
        return tuple(part.strip().rstrip("/") for part in value.split(",") if part.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        jwt_secret=os.getenv("JWT_SECRET", ""),
        token_ttl_seconds=_int(os.getenv("TOKEN_TTL_SECONDS", "3600"), 3600),
        cards_path=os.getenv("CARDS_PATH", "cards.json"),
        users_path=os.getenv("USERS_PATH", "users.json"),
        card_store=(os.getenv("CARD_STORE") or "json").strip().lower(),
        database_url=os.getenv("DATABASE_URL", ""),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        cors_origins=_csv(os.getenv("CORS_ORIGINS")),
    )
