"""
Logging Setup - Console logging for the CLI.

Records go to stderr with timestamp, level and logger name; stdout stays
reserved for answers and traces.
"""

import logging.config
import sys


def configure_logging(level: str = "WARNING"):
    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        # stderr keeps stdout clean for answers and traces
        "handlers": {
            "console": {
                "level": level,
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            "": {
                "handlers": ["console"],
                "level": level,
                "propagate": True,
            },
        },
    }

    logging.config.dictConfig(logging_config)
