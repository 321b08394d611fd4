from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .rate_service.config import load_rate_service_config

LOGGER_NAME = "sherlock_currency"


def configure_logging() -> None:
    """Configure project-wide logging on stderr with optional rotating file.

    Stdout is reserved for the JSON result document. Idempotent:
    subsequent calls won't duplicate handlers.
    """
    cfg = load_rate_service_config()
    level = getattr(logging, cfg.LOG_LEVEL, logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        # Already configured
        logger.setLevel(level)
        return

    fmt = logging.Formatter(
        fmt="%(levelname)s %(asctime)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    logger.setLevel(level)
    logger.propagate = False

    stream = logging.StreamHandler(sys.stderr)
    stream.setLevel(level)
    stream.setFormatter(fmt)
    logger.addHandler(stream)

    if cfg.LOG_FILE:
        log_file = Path(cfg.LOG_FILE)
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                log_file,
                maxBytes=1_048_576,
                backupCount=5,
                encoding="utf-8",
            )
        except OSError as exc:
            logger.warning(
                "Log file %s unavailable, logging to stderr only: %s", log_file, exc
            )
            return
        handler.setFormatter(fmt)
        logger.addHandler(handler)
