"""Gated logging helpers.

Usage::

    from datetime import timedelta
    from log_debounce import info_debounce, warn_once

    info_debounce(timedelta(minutes=1), "Measured current salinity as %.1f ppt", salinity)
    warn_once("Salinometer disconnected, no measurements are available")

Every source location calling one of these helpers keeps its own gate. Pass
``key=`` for call sites that are generated dynamically and should share (or
split) state explicitly. Suppressed calls return ``False`` before any
formatting happens.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Hashable
from types import FrameType
from typing import Any

from pydantic import ValidationError

from log_debounce.callsite import call_site
from log_debounce.config import settings
from log_debounce.logging_tools import TRACE
from log_debounce.registry import Duration, get_registry

# _emit <- public helper <- caller
_CALLER_DEPTH = 2

_ONCE = object()

LoggerLike = logging.Logger | str | None

log = logging.getLogger(__name__)

# logging.getLogger takes the logging module lock; names resolve once
_LOGGERS: dict[str | None, logging.Logger] = {}

_settings_failed = False


def _resolve_logger(logger: LoggerLike, frame: FrameType) -> logging.Logger:
    if isinstance(logger, logging.Logger):
        return logger
    name = frame.f_globals.get("__name__") if logger is None else logger
    target = _LOGGERS.get(name)
    if target is None:
        target = _LOGGERS.setdefault(name, logging.getLogger(name))
    return target


def _gating_enabled() -> bool:
    """Return the configured switch, or ``True`` when settings fail to load."""

    global _settings_failed
    if _settings_failed:
        return True
    try:
        return bool(settings.enabled)
    except ValidationError:
        _settings_failed = True
        log.warning("invalid log_debounce settings; gating stays enabled", exc_info=True)
        return True


def _emit(
    level: int,
    duration: Any,
    msg: object,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    key: Hashable | None,
    logger: LoggerLike,
) -> bool:
    frame = sys._getframe(_CALLER_DEPTH)
    target = _resolve_logger(logger, frame)
    if not target.isEnabledFor(level):
        return False

    if _gating_enabled():
        site = call_site(frame) if key is None else key
        registry = get_registry()
        if duration is _ONCE:
            allowed = registry.should_emit_once(site)
        else:
            allowed = registry.should_emit_timed(site, duration)
        if not allowed:
            return False

    kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + _CALLER_DEPTH
    target.log(level, msg, *args, **kwargs)
    return True


def log_debounce(
    level: int,
    duration: Duration,
    msg: object,
    *args: Any,
    key: Hashable | None = None,
    logger: LoggerLike = None,
    **kwargs: Any,
) -> bool:
    """Log at ``level`` at most once per ``duration`` from this call site.

    ``duration`` is seconds or a :class:`datetime.timedelta`. A zero or
    negative duration never suppresses. Remaining keyword arguments
    (``exc_info``, ``stack_info``, ``extra``, ``stacklevel``) go to
    :meth:`logging.Logger.log`.

    Returns ``True`` when the record was handed to the logger.
    """

    return _emit(level, duration, msg, args, kwargs, key, logger)


def log_once(
    level: int,
    msg: object,
    *args: Any,
    key: Hashable | None = None,
    logger: LoggerLike = None,
    **kwargs: Any,
) -> bool:
    """Log at ``level`` the first time this call site runs and never again."""

    return _emit(level, _ONCE, msg, args, kwargs, key, logger)


def trace_debounce(
    duration: Duration,
    msg: object,
    *args: Any,
    key: Hashable | None = None,
    logger: LoggerLike = None,
    **kwargs: Any,
) -> bool:
    return _emit(TRACE, duration, msg, args, kwargs, key, logger)


def debug_debounce(
    duration: Duration,
    msg: object,
    *args: Any,
    key: Hashable | None = None,
    logger: LoggerLike = None,
    **kwargs: Any,
) -> bool:
    return _emit(logging.DEBUG, duration, msg, args, kwargs, key, logger)


def info_debounce(
    duration: Duration,
    msg: object,
    *args: Any,
    key: Hashable | None = None,
    logger: LoggerLike = None,
    **kwargs: Any,
) -> bool:
    return _emit(logging.INFO, duration, msg, args, kwargs, key, logger)


def warn_debounce(
    duration: Duration,
    msg: object,
    *args: Any,
    key: Hashable | None = None,
    logger: LoggerLike = None,
    **kwargs: Any,
) -> bool:
    return _emit(logging.WARNING, duration, msg, args, kwargs, key, logger)


def error_debounce(
    duration: Duration,
    msg: object,
    *args: Any,
    key: Hashable | None = None,
    logger: LoggerLike = None,
    **kwargs: Any,
) -> bool:
    return _emit(logging.ERROR, duration, msg, args, kwargs, key, logger)


def trace_once(
    msg: object,
    *args: Any,
    key: Hashable | None = None,
    logger: LoggerLike = None,
    **kwargs: Any,
) -> bool:
    return _emit(TRACE, _ONCE, msg, args, kwargs, key, logger)


def debug_once(
    msg: object,
    *args: Any,
    key: Hashable | None = None,
    logger: LoggerLike = None,
    **kwargs: Any,
) -> bool:
    return _emit(logging.DEBUG, _ONCE, msg, args, kwargs, key, logger)


def info_once(
    msg: object,
    *args: Any,
    key: Hashable | None = None,
    logger: LoggerLike = None,
    **kwargs: Any,
) -> bool:
    return _emit(logging.INFO, _ONCE, msg, args, kwargs, key, logger)


def warn_once(
    msg: object,
    *args: Any,
    key: Hashable | None = None,
    logger: LoggerLike = None,
    **kwargs: Any,
) -> bool:
    return _emit(logging.WARNING, _ONCE, msg, args, kwargs, key, logger)


def error_once(
    msg: object,
    *args: Any,
    key: Hashable | None = None,
    logger: LoggerLike = None,
    **kwargs: Any,
) -> bool:
    return _emit(logging.ERROR, _ONCE, msg, args, kwargs, key, logger)


__all__ = [
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
]
