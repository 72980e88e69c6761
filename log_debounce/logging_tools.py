from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence
from datetime import timedelta

from log_debounce.config import settings
from log_debounce.log_gate import LogGate
from log_debounce.registry import GateRegistry, coerce_duration

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def record_site(record: logging.LogRecord) -> Hashable:
    """Return the gate key for ``record``.

    ``record.debounce_key`` (set through ``extra``) wins over the source
    location the record was logged from.
    """

    key = getattr(record, "debounce_key", None)
    if key is not None:
        return key
    return (record.pathname, record.lineno, record.funcName)


class DebounceFilter(logging.Filter):
    """Filter that throttles records per originating call site.

    The first record from a site passes; later records from the same site
    are dropped until ``interval`` seconds have elapsed. When ``levels`` is
    given only records at those levels are throttled and the rest always
    pass.
    """

    def __init__(
        self,
        interval: float | timedelta | None = None,
        *,
        levels: Sequence[int] = (),
    ) -> None:
        super().__init__()
        if interval is None:
            interval = settings.default_interval_s
        self.interval = coerce_duration(interval)
        self._levels = frozenset(levels)
        self._gate = LogGate(interval_s=self.interval)

    def filter(self, record: logging.LogRecord) -> bool:
        if self._levels and record.levelno not in self._levels:
            return True
        return self._gate.should_emit(record_site(record))


class OnceFilter(logging.Filter):
    """Filter that lets each call site through exactly once."""

    def __init__(self, *, levels: Sequence[int] = ()) -> None:
        super().__init__()
        self._levels = frozenset(levels)
        self._registry = GateRegistry()

    def filter(self, record: logging.LogRecord) -> bool:
        if self._levels and record.levelno not in self._levels:
            return True
        return self._registry.should_emit_once(record_site(record))


__all__ = ["TRACE", "DebounceFilter", "OnceFilter", "record_site"]
