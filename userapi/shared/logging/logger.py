"""Loguru setup shared by the HTTP layer and the store.

Every record is passed through :func:`sanitize_record` before it reaches a
sink, so tokens, passwords and digests never hit stderr or the log file.
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>rid={extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_DEFAULT_LOG_FILE = Path(__file__).resolve().parents[2] / "instance" / "userapi.log"

# stdlib loggers that are chatty at DEBUG
_QUIET_LOGGERS = {
    "werkzeug": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
}

_request_id: ContextVar[str] = ContextVar("correlation_id", default="-")

_logger.configure(extra={"correlation_id": "-"})


class _InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _logger.opt(depth=6, exception=record.exc_info).bind(
            correlation_id=_request_id.get()
        ).log(level, record.getMessage())


class ContextualLogger:
    """Loguru proxy that binds the current request id on every call."""

    def __getattr__(self, name):  # pragma: no cover
        return getattr(_logger.bind(correlation_id=_request_id.get()), name)


def set_correlation_id(value: str | None) -> None:
    _request_id.set(value or "-")


def get_correlation_id() -> str:
    return _request_id.get()


def clear_correlation_id() -> None:
    _request_id.set("-")


def _resolve_log_file() -> Path:
    path = Path(os.getenv("LOG_FILE") or _DEFAULT_LOG_FILE)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def setup_logging(level: str | None = None, *, debug_mode: bool = False) -> None:
    """Replace loguru's sinks with a stderr sink and an appending file sink."""
    level = (level or os.getenv("LOG_LEVEL") or ("DEBUG" if debug_mode else "INFO")).upper()
    common: dict[str, Any] = {
        "level": level,
        "format": _FMT,
        "filter": sanitize_record,
        "backtrace": False,
        "diagnose": False,
    }

    _logger.remove()
    _logger.add(sys.stderr, colorize=True, **common)
    _logger.add(
        _resolve_log_file(),
        colorize=False,
        enqueue=True,
        mode="a",
        encoding="utf-8",
        **common,
    )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)


logger = ContextualLogger()

__all__ = [
    "logger",
    "setup_logging",
    "set_correlation_id",
    "clear_correlation_id",
    "get_correlation_id",
]
