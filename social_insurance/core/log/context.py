"""Key-value context that is prefixed to log messages."""
from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Iterator

_context_var: contextvars.ContextVar[dict[str, object]] = contextvars.ContextVar(
    "log_context", default={}
)


class LogContext:
    """Binds values to every record logged inside a ``with`` block."""

    @contextmanager
    def bound(self, **values: object) -> Iterator[None]:
        merged = {**_context_var.get(), **{k: v for k, v in values.items() if v is not None}}
        token = _context_var.set(merged)
        try:
            yield
        finally:
            _context_var.reset(token)


class ContextFilter(logging.Filter):
    """Sets ``record.context`` to the bound values, e.g. ``"city=佛山 year=2024 "``."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "context", None) is None:
            values = _context_var.get()
            record.context = "".join(f"{k}={v} " for k, v in values.items())
        return True


log_context = LogContext()
