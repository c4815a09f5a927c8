"""Logging setup: rich console output plus a log file rotated at midnight."""
from __future__ import annotations

import logging
from logging.handlers import QueueHandler, QueueListener, TimedRotatingFileHandler
from pathlib import Path
from queue import SimpleQueue
from threading import RLock

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install as install_rich_traceback

from social_insurance.core.config import LogSettings, get_settings

from .context import ContextFilter, log_context
from .timing import timeit

__all__ = [
    "init_logging",
    "get_logger",
    "shutdown_logging",
    "log_context",
    "timeit",
]

APP_LOGGER = "social_insurance"
LOG_FILE_NAME = "social_insurance.log"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(context)s%(message)s"

_lock = RLock()
_active: tuple[LogSettings, bool] | None = None
_installed: list[logging.Handler] = []
_listener: QueueListener | None = None
_context_filter = ContextFilter()


def _level_number(level: str | int) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO


def _console_handler(level: int) -> logging.Handler:
    install_rich_traceback(show_locals=False)
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        markup=False,
        log_time_format="%Y-%m-%d %H:%M:%S",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(context)s%(message)s"))
    handler.addFilter(_context_filter)
    return handler


def _file_handler(log_dir: Path, level: int) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = TimedRotatingFileHandler(
        log_dir / LOG_FILE_NAME, when="midnight", backupCount=30, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler.addFilter(_context_filter)
    return handler


def init_logging(settings: LogSettings | None = None, *, queue: bool = True) -> None:
    """Install the handlers described by ``settings`` on the root logger.

    ``settings`` defaults to the configured ``LOG_LEVEL``, ``LOG_DIR`` and
    ``LOG_CONSOLE``.

    Repeating a call with the same arguments does nothing. Different
    arguments replace the handlers installed by the previous call, leaving
    handlers added by anyone else alone. With ``queue`` the handlers run on
    a listener thread behind a :class:`QueueHandler`.
    """

    settings = settings or get_settings().logging
    with _lock:
        global _active, _listener, _installed
        if _active == (settings, queue):
            return
        _teardown_locked()

        level = _level_number(settings.level)
        handlers: list[logging.Handler] = []
        if settings.console:
            handlers.append(_console_handler(level))
        if settings.log_dir:
            handlers.append(_file_handler(Path(settings.log_dir), level))

        root = logging.getLogger()
        root.setLevel(logging.NOTSET)
        if queue and handlers:
            queue_handler = QueueHandler(SimpleQueue())
            queue_handler.setLevel(level)
            # The listener thread cannot see the caller's contextvars.
            queue_handler.addFilter(_context_filter)
            _listener = QueueListener(queue_handler.queue, *handlers, respect_handler_level=True)
            _listener.start()
            _installed = [queue_handler]
        else:
            _installed = handlers
        for handler in _installed:
            root.addHandler(handler)
        _active = (settings, queue)


def _teardown_locked() -> None:
    global _active, _listener, _installed
    root = logging.getLogger()
    for handler in _installed:
        root.removeHandler(handler)
    if _listener:
        _listener.stop()
    for handler in [*_installed, *(_listener.handlers if _listener else ())]:
        handler.close()
    _active = None
    _listener = None
    _installed = []


def shutdown_logging() -> None:
    """Flush and remove the handlers installed by :func:`init_logging`."""

    with _lock:
        _teardown_locked()


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name or APP_LOGGER)
