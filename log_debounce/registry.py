"""Process-wide registry of per call-site gates.

The registry answers the single question a logging call asks before it
formats anything: *may I emit now?* Two policies are supported:

``should_emit_timed``
    Emit immediately, then suppress the same site until ``duration`` has
    elapsed since the last emission. The boundary is inclusive.

``should_emit_once``
    Emit the first time a site is seen and never again.

Timed and once entries live in separate maps, so the same identifier used
with both policies yields two independent gates. Entries are created on
first use and are never removed.

Call-site identifiers are opaque hashables supplied by the caller. Reusing
one identifier for two logically distinct sites merges their gates.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from collections.abc import Callable, Hashable
from datetime import timedelta

from log_debounce.gates import OnceGate, TimedGate

logger = logging.getLogger(__name__)

Duration = float | int | timedelta


def coerce_duration(duration: Duration) -> float:
    """Return ``duration`` in seconds, normalising out-of-domain values.

    Negative and NaN durations become ``0.0`` so the gate errs toward
    emitting. ``math.inf`` is kept and suppresses every call after the
    first.
    """

    if isinstance(duration, timedelta):
        seconds = duration.total_seconds()
    elif isinstance(duration, (int, float)) and not isinstance(duration, bool):
        seconds = float(duration)
    else:
        raise TypeError(
            f"duration must be seconds or a timedelta, not {type(duration).__name__}"
        )
    if math.isnan(seconds) or seconds < 0.0:
        return 0.0
    return seconds


class GateRegistry:
    """Concurrency-safe map from call-site identifier to gate state."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or time.monotonic
        self._timed: dict[Hashable, TimedGate] = {}
        self._once: dict[Hashable, OnceGate] = {}
        self._lock = threading.Lock()

    @property
    def timed_count(self) -> int:
        return len(self._timed)

    @property
    def once_count(self) -> int:
        return len(self._once)

    def _timed_entry(self, site_id: Hashable) -> TimedGate:
        entry = self._timed.get(site_id)
        if entry is None:
            with self._lock:
                entry = self._timed.get(site_id)
                if entry is None:
                    entry = TimedGate()
                    self._timed[site_id] = entry
                    logger.debug("timed gate created for %r", site_id)
        return entry

    def _once_entry(self, site_id: Hashable) -> OnceGate:
        entry = self._once.get(site_id)
        if entry is None:
            with self._lock:
                entry = self._once.get(site_id)
                if entry is None:
                    entry = OnceGate()
                    self._once[site_id] = entry
                    logger.debug("once gate created for %r", site_id)
        return entry

    def should_emit_timed(
        self,
        site_id: Hashable,
        duration: Duration,
        now: float | None = None,
    ) -> bool:
        """Return ``True`` when ``site_id`` may emit under a timed window.

        ``now`` is a monotonic timestamp in seconds; it is read from the
        registry clock when omitted.
        """

        window = coerce_duration(duration)
        timestamp = self._clock() if now is None else float(now)
        return self._timed_entry(site_id).try_fire(timestamp, window)

    def should_emit_once(self, site_id: Hashable) -> bool:
        """Return ``True`` for exactly one call per ``site_id``."""

        return self._once_entry(site_id).try_fire()


_REGISTRY = GateRegistry()


def get_registry() -> GateRegistry:
    """Return the process-wide registry."""

    return _REGISTRY


def should_emit_timed(
    site_id: Hashable, duration: Duration, now: float | None = None
) -> bool:
    return _REGISTRY.should_emit_timed(site_id, duration, now)


def should_emit_once(site_id: Hashable) -> bool:
    return _REGISTRY.should_emit_once(site_id)


__all__ = [
    "Duration",
    "GateRegistry",
    "coerce_duration",
    "get_registry",
    "should_emit_once",
    "should_emit_timed",
]
