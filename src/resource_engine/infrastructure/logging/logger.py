"""Structured logging built on structlog over the standard logging module."""

import logging
import os
import threading
from typing import Any, Optional

import structlog

from resource_engine.config.settings import settings

_configure_lock = threading.Lock()
_configured = False

ROOT_LOGGER_NAME = "resource_engine"


def _shared_processors() -> list[Any]:
    return [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def setup_logging(
    log_dir: Optional[str] = None,
    log_filename: Optional[str] = None,
    log_level: Optional[str] = None,
    log_destination: Optional[str] = None,
    log_format: Optional[str] = None,
) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the engine using structlog.

    Arguments left as None fall back to the ``LOG_*`` settings and then to
    defaults (stdout only, INFO, console rendering).

    Args:
        log_dir: Directory where the log file will be stored
        log_filename: Name of the log file
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_destination: Where to send logs ("file", "stdout", or "both")
        log_format: "console" or "json"

    Returns:
        Configured root engine logger
    """
    global _configured

    log_level = log_level or settings.get("LOG_LEVEL", "INFO")
    log_destination = log_destination or settings.get("LOG_DESTINATION", "stdout")
    log_format = log_format or settings.get("LOG_FORMAT", "console")

    if log_format == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_shared_processors(),
    )

    handlers: list[logging.Handler] = []
    if log_destination in ("file", "both"):
        log_dir = log_dir or settings.get("LOG_DIR", "./logs")
        log_filename = log_filename or settings.get("LOG_FILENAME", "resource_engine.log")
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(os.path.join(log_dir, log_filename)))

    if log_destination in ("stdout", "both"):
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setFormatter(formatter)

    with _configure_lock:
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                *_shared_processors(),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        root = logging.getLogger(ROOT_LOGGER_NAME)
        for existing in list(root.handlers):
            root.removeHandler(existing)
            existing.close()
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(getattr(logging, str(log_level).upper(), logging.INFO))
        _configured = True

    return structlog.get_logger(ROOT_LOGGER_NAME)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger, configuring defaults on first use.

    Args:
        name: Logger name, usually ``__name__``

    Returns:
        structlog bound logger
    """
    if not _configured:
        setup_logging()
    return structlog.get_logger(name)
