"""Per call-site gate entries."""

from __future__ import annotations

import threading


class TimedGate:
    """Leading-edge throttle state for a single call site.

    ``last_fired`` holds the monotonic timestamp of the most recent emission,
    or ``None`` until the first one. Suppressed calls are decided from an
    unlocked read; only a call that may fire takes the entry lock and
    re-checks, so one contender wins each window.
    """

    __slots__ = ("last_fired", "_lock")

    def __init__(self) -> None:
        self.last_fired: float | None = None
        self._lock = threading.Lock()

    def try_fire(self, now: float, duration: float) -> bool:
        """Return ``True`` when the caller may emit at ``now``."""

        if duration <= 0.0:
            # a zero window keeps no state past the first fire
            if self.last_fired is None:
                with self._lock:
                    if self.last_fired is None:
                        self.last_fired = now
            return True

        last = self.last_fired
        if last is not None and now - last < duration:
            return False

        with self._lock:
            last = self.last_fired
            if last is not None and now - last < duration:
                return False
            self.last_fired = now
            return True

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"TimedGate(last_fired={self.last_fired!r})"


class OnceGate:
    """Fire-once state for a single call site."""

    __slots__ = ("fired", "_lock")

    def __init__(self) -> None:
        self.fired = False
        self._lock = threading.Lock()

    def try_fire(self) -> bool:
        if self.fired:
            return False
        with self._lock:
            if self.fired:
                return False
            self.fired = True
            return True

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"OnceGate(fired={self.fired!r})"


__all__ = ["TimedGate", "OnceGate"]
