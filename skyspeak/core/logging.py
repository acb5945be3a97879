from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger("skyspeak")
    logger.setLevel(getattr(logging, level.upper()))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
