from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from ``BLOG_API_*`` environment variables."""

    app_title: str = "Blog API"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Listen address in host:port form; an empty host binds every interface
    addr: str = ":8080"

    # Embedded store
    db: str = "blog.db"
    db_busy_timeout_ms: int = 30000

    # Requests per client per fixed one-minute window
    rate_limit_per_minute: int = 264

    cors_origins: list[str] = ["*"]

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine / aiosqlite
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_store: str = "INFO"            # embedded article store

    model_config = {
        "env_prefix": "BLOG_API_",
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def listen_host(self) -> str:
        host, _, _ = self.addr.rpartition(":")
        return host or "0.0.0.0"

    @property
    def listen_port(self) -> int:
        _, _, port = self.addr.rpartition(":")
        return int(port) if port else 8080


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
