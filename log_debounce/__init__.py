"""
log-debounce - per call-site gating for noisy log statements
=============================================================

Two policies keep hot code paths from flooding a log sink:

* timed: emit, then stay quiet at that call site until a duration elapses
* once: emit the first time a call site runs and never again

Usage:
    >>> from log_debounce import info_debounce, warn_once
    >>> for reading in sensor:
    ...     info_debounce(30, "Temperature: %.1f", reading)
    >>> warn_once("Deprecated configuration detected")

    # Direct registry access for custom facades
    >>> from log_debounce import get_registry
    >>> get_registry().should_emit_timed("poll-loop", 5.0)
    True
"""

from .callsite import CallSite, call_site, caller_site
from .config import DebounceSettings, load_settings, settings
from .emit import (
    debug_debounce,
    debug_once,
    error_debounce,
    error_once,
    info_debounce,
    info_once,
    log_debounce,
    log_once,
    trace_debounce,
    trace_once,
    warn_debounce,
    warn_once,
)
from .log_gate import LogGate
from .logger_setup import setup_logging
from .logging_tools import TRACE, DebounceFilter, OnceFilter
from .registry import (
    GateRegistry,
    coerce_duration,
    get_registry,
    should_emit_once,
    should_emit_timed,
)

__all__ = [
    # Gate registry
    "GateRegistry",
    "get_registry",
    "should_emit_timed",
    "should_emit_once",
    "coerce_duration",
    # Call sites
    "CallSite",
    "call_site",
    "caller_site",
    # Gated logging helpers
    "log_debounce",
    "log_once",
    "trace_debounce",
    "debug_debounce",
    "info_debounce",
    "warn_debounce",
    "error_debounce",
    "trace_once",
    "debug_once",
    "info_once",
    "warn_once",
    "error_once",
    # Logging integration
    "TRACE",
    "DebounceFilter",
    "OnceFilter",
    "LogGate",
    "setup_logging",
    # Configuration
    "DebounceSettings",
    "load_settings",
    "settings",
]

__version__ = "0.1.0"
