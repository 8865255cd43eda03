"""Console logging setup for the API process."""

from __future__ import annotations

import logging.config

from dealer_credit.infra.config import log_level


def configure_logging(level: str | None = None) -> None:
    """
    Apply the process-wide logging configuration.

    Safe to call more than once (each call replaces the previous config).

    Args:
        level: Root log level; defaults to the LOG_LEVEL environment variable
    """
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {
                "level": level or log_level(),
                "handlers": ["console"],
            },
        }
    )
