"""
Logging setup and request-scoped structured log helper.

Records are emitted as JSON lines (python-json-logger) so that the extra
fields attached by log_with_fields end up as top-level keys.
"""
# Standard library imports
import logging
import logging.config
from typing import Any, Optional

# External package imports
from starlette.requests import Request

# Local application imports
from .config import get_settings


def build_logging_config(level: str, log_format: str) -> dict:
    """Build the dictConfig used by configure_logging"""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "text": {
                "format": "{levelname} {asctime} {name} {message}",
                "style": "{",
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
                "rename_fields": {"asctime": "time", "levelname": "level", "message": "msg"},
                "datefmt": "%Y-%m-%dT%H:%M:%S%z",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "formatter": "json" if log_format == "json" else "text",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
    }


def configure_logging() -> None:
    """Configure root logging from settings (LOG_LEVEL, LOG_FORMAT)"""
    settings = get_settings()
    logging.config.dictConfig(build_logging_config(settings.log_level, settings.log_format))


def log_with_fields(
    logger: logging.Logger,
    request: Optional[Request],
    level: str,
    message: Any,
    **fields: Any,
) -> None:
    """
    Log a message with structured fields, adding request context when available
    
    Args:
        logger: Logger to emit on
        request: Current HTTP request, or None outside a request
        level: Level name ("error", "warning", "info", "debug")
        message: Message; non-string values are rendered with str()
        **fields: Extra structured fields
    """
    if request is not None:
        fields["path"] = request.url.path
        fields["reqMethod"] = request.method
        fields["header"] = dict(request.headers)
    
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO
    logger.log(log_level, str(message), extra=fields)
