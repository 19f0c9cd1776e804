"""
Logging setup for the Blogful API.

Call ``setup_logging()`` once at startup (the FastAPI lifespan does).
Every module logs through ``logging.getLogger(__name__)``; this only
decides levels and makes sure a handler exists when nothing else
(uvicorn, pytest) installed one.
"""
import logging
import sys

from blogful.config import settings

# Loggers that are noisy at INFO and only interesting while debugging.
_QUIET_LOGGERS: tuple[str, ...] = (
    "sqlalchemy.engine",
    "sqlalchemy.pool",
    "aiosqlite",
)


def _parse_level(raw: str) -> int:
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging() -> None:
    root = logging.getLogger()
    root.setLevel(_parse_level(settings.LOG_LEVEL))

    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s - %(message)s")
        )
        root.addHandler(handler)

    quiet_level = logging.DEBUG if settings.DEBUG else logging.WARNING
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    logging.getLogger(__name__).debug(
        "Logging configured (level=%s, env=%s)", settings.LOG_LEVEL, settings.APP_ENV
    )
