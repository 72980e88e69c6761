"""Global pytest fixtures and environment configuration."""

from __future__ import annotations

import os

# Keep gating on and the root handlers quiet unless a test opts in, even if
# the developer shell exports overrides.
os.environ["LOG_DEBOUNCE_ENABLED"] = "true"
os.environ.pop("LOG_DEBOUNCE_HANDLER_INTERVAL_S", None)

from types import SimpleNamespace

import pytest

from log_debounce import emit, registry
from log_debounce.registry import GateRegistry


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = float(start)

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def _fresh_registry(monkeypatch: pytest.MonkeyPatch, clock: FakeClock) -> GateRegistry:
    """Give every test its own process-wide registry driven by ``clock``."""

    reg = GateRegistry(clock=clock)
    monkeypatch.setattr(registry, "_REGISTRY", reg)
    monkeypatch.setattr(emit, "settings", SimpleNamespace(enabled=True))
    return reg


@pytest.fixture
def process_registry(_fresh_registry: GateRegistry) -> GateRegistry:
    return _fresh_registry
