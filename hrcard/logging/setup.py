"""Structlog configuration for hrcard."""

import logging
import sys

import structlog

from hrcard.config import CardConfig, LogFormat


def configure_logging(config: CardConfig | None = None) -> None:
    """
    Configure structlog processors and output format.

    Args:
        config: CardConfig instance, uses defaults if None
    """
    if config is None:
        config = CardConfig()

    log_level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if config.log_format == LogFormat.JSON:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])
    else:
        processors.extend([
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a structlog logger, optionally bound to a name.

    Args:
        name: Optional logger name for context

    Returns:
        structlog BoundLogger
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()
