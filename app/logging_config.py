"""Root logger configuration."""
from __future__ import annotations

import logging
import sys

from pythonjsonlogger import jsonlogger

from app.config import settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Configure the root logger from settings (idempotent)."""
    numeric_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if (fmt or settings.LOG_FORMAT) == "json":
        handler.setFormatter(jsonlogger.JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logging.basicConfig(level=numeric_level, handlers=[handler], force=True)
