"""Centralized logging configuration.

Applies per-category log levels from Settings so that noisy loggers
(e.g. SQLAlchemy SQL statements) can be silenced without affecting
other parts of the application.

Usage:
    from article_board.infrastructure.logging.log_config import setup_logging
    setup_logging()   # Call once at startup (in main.py or lifespan)
"""

import logging
import sys

from article_board.config import get_settings


# ── Logger-name → Settings-field mapping ────────────────────────────
#
# Each entry maps one or more Python logger names to a Settings field.
# When setup_logging() runs, it sets the level of each listed logger
# to the value of the corresponding setting.

_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_sql": [
        "sqlalchemy.engine",
        "sqlalchemy.pool",
        "aiosqlite",
    ],
    "log_level_uvicorn": [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
    ],
    "log_level_web": [
        "article_board.presentation",
        "article_board.application",
    ],
}


def setup_logging() -> None:
    """Configure Python logging levels from application settings.

    Call this once during startup (e.g. in the FastAPI lifespan).
    """
    settings = get_settings()
    root_level = _parse_level(settings.log_level)

    # ── Root logger ────────────────────────────────────────────────
    root = logging.getLogger()
    root.setLevel(root_level)

    # uvicorn usually installs a handler; tests and scripts may not
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            )
        )
        root.addHandler(handler)

    # ── Per-category loggers ───────────────────────────────────────
    for settings_field, logger_names in _CATEGORY_MAP.items():
        raw_level: str = getattr(settings, settings_field, "INFO")
        level = _parse_level(raw_level)

        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s, sql=%s, uvicorn=%s, web=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_uvicorn,
        settings.log_level_web,
    )


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
