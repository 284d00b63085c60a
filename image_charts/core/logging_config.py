"""Centralized logging configuration for image-charts.

Configures structured JSON logging for production environments
and human-readable logging for development/CLI usage.
"""

from __future__ import annotations

import copy
import logging
import logging.config
from pathlib import Path
from typing import Any


# Default logging configuration
LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            "datefmt": "%Y-%m-%dT%H:%M:%S%z",
        },
        "console": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "console",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "image_charts": {
            "level": "DEBUG",
            "handlers": ["console"],
            "propagate": False,
        },
    },
    "root": {
        "level": "WARNING",
        "handlers": ["console"],
    },
}


def build_logging_config(
    json_output: bool = False,
    log_level: str = "INFO",
    log_file: str | Path | None = None,
) -> dict[str, Any]:
    """Return a dictConfig mapping for the requested options.

    The module-level LOGGING_CONFIG is never modified.
    """
    config = copy.deepcopy(LOGGING_CONFIG)

    # Override console formatter if JSON output requested
    if json_output:
        config["handlers"]["console"]["formatter"] = "json"

    if log_level:
        level = log_level.upper()
        config["handlers"]["console"]["level"] = level
        config["loggers"]["image_charts"]["level"] = level

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        config["handlers"]["json_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "json",
            "filename": str(log_file),
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
        }
        config["loggers"]["image_charts"]["handlers"].append("json_file")

    return config


def setup_logging(
    json_output: bool = False,
    log_level: str = "INFO",
    log_file: str | Path | None = None,
) -> None:
    """Configure logging for the application.

    Args:
        json_output: If True, use JSON formatter for console output (for production)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of a rotating JSON log file
    """
    logging.config.dictConfig(
        build_logging_config(json_output=json_output, log_level=log_level, log_file=log_file)
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("Chart downloaded", extra={"status_code": 200, "size": 1024})
    """
    return logging.getLogger(name)
