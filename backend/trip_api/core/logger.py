# backend/trip_api/core/logger.py

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from trip_api.core.config_loader import Settings, settings


DEFAULT_LOG_DIR = Path(__file__).resolve().parents[2] / "logs"

LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
)


# -------------------------------------------------------------------
# SETUP
# -------------------------------------------------------------------
def configure_logger(config: Settings, name: str = "trip_planner") -> logging.Logger:
    """
    File handler (rotating, LOG_LEVEL) unless LOG_TO_FILE is off, plus a
    console handler that goes down to DEBUG in development.
    """
    log = logging.getLogger(name)
    log.setLevel(logging.DEBUG)

    # uvicorn --reload re-imports modules
    if log.handlers:
        return log

    level = logging.getLevelName(config.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    formatter = logging.Formatter(LOG_FORMAT)

    if config.LOG_TO_FILE:
        log_dir = Path(config.LOG_DIR) if config.LOG_DIR else DEFAULT_LOG_DIR
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_dir / "app.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        log.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.DEBUG if config.environment == "development" else level)
    log.addHandler(console_handler)

    return log


logger = configure_logger(settings)
