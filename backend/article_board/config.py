import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Article Board"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./articles.db"
    database_echo: bool = False
    cors_origins: list[str] = ["http://localhost:8020"]

    # HTML templates: empty means the templates bundled with the package
    templates_dir: str = ""

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine: SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_web: str = "INFO"              # Controllers and article service

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Warn when a configured templates directory does not exist."""
        if self.templates_dir and not Path(self.templates_dir).is_dir():
            _config_logger.warning(
                "templates_dir '%s' does not exist; falling back to bundled templates",
                self.templates_dir,
            )
            object.__setattr__(self, "templates_dir", "")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
