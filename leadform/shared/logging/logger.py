# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Loguru setup shared by the web app and the CLI.

Every record carries the request correlation id and passes through
``sanitize_record`` before it reaches a sink, so contact numbers and secrets
never land in a log file.
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar
from pathlib import Path

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_QUIET_LOGGERS = {
    "werkzeug": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
}

_correlation_id: ContextVar[str] = ContextVar("leadform_correlation_id", default="-")

_logger.configure(extra={"correlation_id": "-"})


def default_log_file() -> Path:
    configured = os.getenv("LOG_FILE")
    if configured:
        return Path(configured)
    return Path.cwd() / "instance" / "app.log"


class _InterceptHandler(logging.Handler):
    """Forwards werkzeug and SQLAlchemy records into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _logger.bind(correlation_id=_correlation_id.get()).opt(
            depth=6, exception=record.exc_info
        ).log(level, record.getMessage())


class ContextualLogger:
    """Proxy that binds the current correlation id on every call."""

    def __getattr__(self, name: str):
        return getattr(_logger.bind(correlation_id=_correlation_id.get()), name)


def set_correlation_id(value: str | None) -> None:
    _correlation_id.set(value or "-")


def get_correlation_id() -> str:
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set("-")


def setup_logging(level: str | None = None, *, log_file: str | Path | None = None) -> None:
    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    path = Path(log_file) if log_file else default_log_file()
    path.parent.mkdir(parents=True, exist_ok=True)

    _logger.remove()
    common = {"level": level, "format": LOG_FORMAT, "filter": sanitize_record, "diagnose": False}
    _logger.add(sys.stderr, colorize=True, backtrace=False, **common)
    _logger.add(
        str(path),
        colorize=False,
        enqueue=True,
        rotation="10 MB",
        retention=5,
        encoding="utf-8",
        **common,
    )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name, logger_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(logger_level)


logger = ContextualLogger()

__all__ = [
    "LOG_FORMAT",
    "clear_correlation_id",
    "default_log_file",
    "get_correlation_id",
    "logger",
    "set_correlation_id",
    "setup_logging",
]
