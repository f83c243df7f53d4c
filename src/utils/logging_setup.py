"""Logging configuration."""

import logging
import sys
from typing import Optional

import config.settings as settings


def setup_logging(log_level: Optional[str] = None):
    """Configure logging for the entire application."""
    level = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level),
        format=settings.LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
