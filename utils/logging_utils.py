"""
Logging Utilities

Centralized logging configuration for the app and its services.

Usage:
    from utils.logging_utils import get_logger

    logger = get_logger(__name__)
    logger.info("Checklist reset for plan week %s", plan_week_id)
"""

import logging
import logging.config

from config import LOGGING_CONFIG

_configured = False


def setup_logging(level=None):
    """
    Initialize logging configuration once.

    Safe to call multiple times; only the first call applies LOGGING_CONFIG.
    A level passed later still updates the root logger.
    """
    global _configured
    if not _configured:
        logging.config.dictConfig(LOGGING_CONFIG)
        _configured = True
    if level:
        logging.getLogger().setLevel(level)


def get_logger(name):
    """Get logger for module (pass __name__)."""
    return logging.getLogger(name)
