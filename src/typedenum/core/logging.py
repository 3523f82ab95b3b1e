"""Structured logging configuration for typedenum."""

import logging
import logging.config
from typing import Optional

import structlog

from typedenum.core.config import Settings, get_settings

# Silent until the host application configures logging
logging.getLogger("typedenum").addHandler(logging.NullHandler())


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog with JSON or console output.

    Call this from the host application; the library never configures
    logging on import.
    """
    settings = settings or get_settings()

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            # Add timestamp
            structlog.processors.TimeStamper(fmt="iso"),
            # Add log level
            structlog.processors.add_log_level,
            # Format exceptions properly
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Route the typedenum stdlib logger through the structlog renderer
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "default": {
                    "level": settings.log_level,
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                "typedenum": {
                    "handlers": ["default"],
                    "level": settings.log_level,
                    "propagate": False,
                }
            },
        }
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger over the stdlib ``name`` logger, bound to the typedenum component."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        component="typedenum",
    )
