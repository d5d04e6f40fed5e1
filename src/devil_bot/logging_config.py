"""Structured JSON logging configuration for AWS Lambda and local runs.

Emits one JSON object per line on stdout, which CloudWatch Logs indexes by
top-level field (`severity`, `message`, `logger`, ...).

Usage:
    from devil_bot.logging_config import configure_logging
    configure_logging("INFO")
"""

import copy
import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "devil-bot",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: str = "INFO") -> None:
    """Apply structured JSON logging configuration at the given root level.

    Call once at application startup (the FastAPI lifespan does this).
    Unknown level names fall back to INFO.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    level = level.upper()
    if level not in logging.getLevelNamesMapping():
        level = "INFO"
    config["root"]["level"] = level
    logging.config.dictConfig(config)
