# dojo_api/core/logging.py
"""Logging configuration."""
import logging
import sys

from .config import Settings


def setup_logging(settings: Settings):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
