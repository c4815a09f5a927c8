"""Log how long an operation took and how much it processed."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from time import perf_counter
from typing import Iterator, Optional

from sqlalchemy import event
from sqlalchemy.orm import Session


class _Timer:
    def __init__(self, label: str, unit: str, total: Optional[int]) -> None:
        self.label = label
        self.unit = unit
        self.total = total
        self.statements = 0
        self.start = perf_counter()

    def set_total(self, total: int) -> None:
        self.total = total

    def count_statement(self, orm_execute_state) -> None:
        self.statements += 1

    def summary(self, elapsed: float) -> str:
        parts = []
        if self.total is not None:
            volume = f"{self.total:,} {self.unit}"
            if self.total and elapsed > 0:
                volume += f" @ {self.total / elapsed:,.0f} {self.unit}/s"
            parts.append(volume)
        if self.statements:
            parts.append(f"{self.statements:,} DB calls")
        return "".join(f" ({part})" for part in parts)


@contextmanager
def timeit(
    label: str,
    *,
    logger: Optional[logging.Logger] = None,
    level: int = logging.INFO,
    unit: str = "items",
    total: Optional[int] = None,
    session: Optional[Session] = None,
) -> Iterator[_Timer]:
    """Time the ``with`` block and log the outcome.

    ``total`` (or a later :meth:`_Timer.set_total`) adds throughput to the
    message. When ``session`` is given, ORM statements executed through it
    are counted as well.
    """

    log = logger or logging.getLogger("social_insurance.timer")
    timer = _Timer(label, unit, total)
    if session is not None:
        event.listen(session, "do_orm_execute", timer.count_statement)
    try:
        yield timer
    except Exception:
        elapsed = perf_counter() - timer.start
        log.error("%s failed after %.2fs%s", label, elapsed, timer.summary(0))
        raise
    else:
        elapsed = perf_counter() - timer.start
        log.log(level, "%s completed in %.2fs%s", label, elapsed, timer.summary(elapsed))
    finally:
        if session is not None:
            event.remove(session, "do_orm_execute", timer.count_statement)
