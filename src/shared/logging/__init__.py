"""Structured logging setup with stdlib integration."""

import logging
import sys

import structlog


def setup_logging(level: str = "WARNING") -> None:
    """Route structlog and stdlib logging through one stderr handler.

    stdout carries the wizard prompts, so nothing is logged there. JSON lines
    unless level is DEBUG, which switches to the colored console renderer.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    shared_processors = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if log_level == logging.DEBUG:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers[:] = [handler]
