"""Structured logging for purchase_analyzer.

structlog renders event-style records (``property_added``, ``override_set``)
through standard library handlers: stdout always, plus a rotating file
under ``logs/`` outside of test runs. Level and output format come from
``AppSettings`` unless given explicitly.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

from purchase_analyzer.core.exceptions import ConfigurationError
from purchase_analyzer.core.settings import get_settings

LOG_DIR = Path(__file__).parent.parent.parent / "logs"
LOG_FILE = LOG_DIR / "purchase_analyzer.log"
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3

_configured: bool = False


def _build_handlers() -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if os.environ.get("PYTEST_CURRENT_TEST"):
        return handlers

    try:
        LOG_DIR.mkdir(exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                str(LOG_FILE),
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )
    except OSError as exc:
        sys.stderr.write(f"purchase_analyzer: file logging disabled ({exc})\n")
    return handlers


def _build_processors(json_output: bool) -> list[Any]:
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False)
    return [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    level: str | None = None,
    json_output: bool | None = None,
) -> structlog.BoundLogger:
    """Set up structlog and the root handlers once per process.

    Invalid settings do not block logging: the built-in defaults are used
    and a ``settings_invalid`` warning is emitted.

    Args:
        level: Level name; falls back to ``LOGLEVEL``, then ``AppSettings.log_level``
        json_output: JSON lines instead of console text; falls back to
            ``AppSettings.json_logs``

    Returns:
        Root structlog logger
    """
    global _configured

    if _configured:
        return structlog.get_logger()

    settings_error: str | None = None
    try:
        settings = get_settings()
        default_level, default_json = settings.log_level, settings.json_logs
    except ConfigurationError as exc:
        settings_error = str(exc)
        default_level, default_json = "INFO", False

    log_level = (level or os.environ.get("LOGLEVEL") or default_level).upper()
    if json_output is None:
        json_output = default_json

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level, logging.INFO),
        handlers=_build_handlers(),
        force=True,
    )
    structlog.configure(
        processors=_build_processors(json_output),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _configured = True

    logger = structlog.get_logger()
    if settings_error:
        logger.warning("settings_invalid", error=settings_error)
    return logger


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Logger bound to ``name``; configures logging if nobody has yet."""
    if not _configured:
        configure_logging()

    logger = structlog.get_logger()
    return logger.bind(logger_name=name) if name else logger
