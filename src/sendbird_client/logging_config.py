"""JSON logging for the webhook service and for library users.

The transport logs each outbound Sendbird request at DEBUG and error
responses, transport failures and observer failures at WARNING. The webhook
logs rejected callbacks at WARNING and failed bot handlers at ERROR.
`configure_logging` routes all of it to stdout as one JSON object per line,
tagged `service: sendbird-client`.

Usage:
    from sendbird_client.logging_config import configure_logging
    configure_logging()
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
                "service": "sendbird-client",
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
    """Apply structured JSON logging configuration.

    Call once at application startup (the webhook app does it in its lifespan).
    ``level`` sets the root logger level, e.g. ``"DEBUG"`` to see every
    outbound request.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    config["root"]["level"] = level.upper()
    logging.config.dictConfig(config)
