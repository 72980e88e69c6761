"""Contention tests for the gate registry."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from log_debounce.registry import GateRegistry

THREADS = 16
TRIALS = 50


def _race(fn, n: int = THREADS) -> list[bool]:
    barrier = threading.Barrier(n)

    def worker() -> bool:
        barrier.wait()
        return fn()

    with ThreadPoolExecutor(max_workers=n) as pool:
        futures = [pool.submit(worker) for _ in range(n)]
        return [f.result() for f in futures]


def test_concurrent_first_once_call_has_single_winner() -> None:
    reg = GateRegistry()
    for trial in range(TRIALS):
        results = _race(lambda: reg.should_emit_once(("once", trial)))
        assert results.count(True) == 1
    assert reg.once_count == TRIALS


def test_once_with_single_caller() -> None:
    reg = GateRegistry()
    assert _race(lambda: reg.should_emit_once("solo"), n=1) == [True]


def test_concurrent_first_timed_call_creates_one_entry() -> None:
    reg = GateRegistry()
    for trial in range(TRIALS):
        results = _race(lambda: reg.should_emit_timed(("fresh", trial), 10.0, now=0.0))
        assert results.count(True) == 1
    assert reg.timed_count == TRIALS


def test_exactly_one_fire_when_window_elapses() -> None:
    reg = GateRegistry()
    duration = 1.0
    for trial in range(TRIALS):
        site = ("window", trial)
        assert reg.should_emit_timed(site, duration, now=0.0) is True
        for k in range(1, 4):
            at = k * duration
            results = _race(lambda: reg.should_emit_timed(site, duration, now=at))
            assert results.count(True) == 1, (trial, k, results)


def test_contention_on_one_site_leaves_other_sites_alone() -> None:
    reg = GateRegistry()
    assert reg.should_emit_timed("quiet", 5.0, now=0.0) is True
    _race(lambda: reg.should_emit_timed("busy", 5.0, now=0.0))
    assert reg.should_emit_timed("quiet", 5.0, now=4.0) is False
    assert reg.should_emit_timed("quiet", 5.0, now=5.0) is True
