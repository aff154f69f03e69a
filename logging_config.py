"""
Logging configuration for the property registry API.

Sets the root level from LOG_LEVEL and quiets the chattier third-party loggers.
"""

import os
import logging


LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

# Third-party loggers that are always held at WARNING
QUIET_LOGGERS = [
    "sqlalchemy.engine",
    "sqlalchemy.pool",
    "passlib",
    "multipart",
]


def configure_logging():
    """Configure logging for the application."""
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
