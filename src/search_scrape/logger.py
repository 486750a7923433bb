"""
Logger Configuration Module

Handles logging setup for search and scrape operations. Modules log to named
loggers under ``search_scrape``; a log file is only attached when the
settings name a log directory.
"""

import logging
from pathlib import Path

from .settings import Settings, get_settings

LOGGER_NAME = "search_scrape"


def create_logger(settings: Settings) -> logging.Logger:
    search_logger = logging.getLogger(LOGGER_NAME)
    search_logger.setLevel(settings.log_level)

    if settings.log_dir is None:
        return search_logger

    log_dir = Path(settings.log_dir)
    try:
        # Create logs directory if it doesn't exist
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / "web_search.log", encoding="utf-8")
    except OSError as e:
        search_logger.warning(f"⚠️ File logging disabled, cannot write to {log_dir}: {e}")
        return search_logger

    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    )
    search_logger.addHandler(file_handler)

    return search_logger


search_logger: logging.Logger | None = None


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    global search_logger
    if search_logger is None:
        search_logger = create_logger(settings or get_settings())
    return search_logger
