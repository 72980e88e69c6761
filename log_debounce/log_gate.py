"""Fixed-interval keyed throttle for repetitive log messages."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field

from log_debounce.config import DEFAULT_INTERVAL_S
from log_debounce.registry import GateRegistry


@dataclass(slots=True)
class LogGate:
    """Gatekeeper used to throttle repetitive log messages.

    Each key gets its own leading-edge window of ``interval_s`` seconds.
    The gate keeps a private :class:`GateRegistry`, so keys never share
    state with the process-wide registry or with another ``LogGate``.
    """

    interval_s: float = DEFAULT_INTERVAL_S
    _registry: GateRegistry = field(default_factory=GateRegistry, init=False, repr=False)

    def __post_init__(self) -> None:
        try:
            self.interval_s = float(self.interval_s)
        except (TypeError, ValueError):
            self.interval_s = DEFAULT_INTERVAL_S
        if not self.interval_s >= 0.0:
            self.interval_s = 0.0

    def should_emit(self, key: Hashable, *, now: float | None = None) -> bool:
        """Return ``True`` when the log identified by ``key`` should emit."""

        return self._registry.should_emit_timed(key, self.interval_s, now)


__all__ = ["LogGate"]
