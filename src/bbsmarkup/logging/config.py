# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Centralized logging configuration for bbsmarkup.

Logs always go to stderr because the CLI writes rendered markup to stdout.
The level comes from BBSMARKUP_LOG_LEVEL (default: WARNING) and the output
format from BBSMARKUP_LOG_FORMAT: ``console`` for humans, ``json`` when the
render service runs behind a log collector.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from bbsmarkup.settings import Settings

__all__ = ["get_logger", "configure_logging"]


def _renderer(log_format: str) -> Any:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog for bbsmarkup.

    Call once at startup (the CLI and ``create_app`` both do).

    Args:
        settings: Settings instance (will be created if None)
    """
    if settings is None:
        from bbsmarkup.settings import Settings

        settings = Settings()

    log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _renderer(settings.log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger bound to *name* (usually ``__name__``)."""
    return structlog.get_logger(name)
