from __future__ import annotations

import json
import logging
import os
import sys
import time

from log_debounce.config import settings
from log_debounce.logging_tools import DebounceFilter


class _JsonFormatter(logging.Formatter):
    def format(self, record):
        base = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "lvl": record.levelname,
            "logger": record.name,
            "site": f"{record.pathname}:{record.lineno}",
            "msg": record.getMessage(),
        }
        if record.exc_info:
            base["exc"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """Configure the root logger from settings and return it.

    Existing root handlers are replaced. When ``handler_interval_s`` is
    positive every handler gets its own :class:`DebounceFilter`, which
    throttles each call site in the process, gated helpers or not.
    """

    cfg = settings
    if level is None:
        level = cfg.log_level
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.INFO

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    formatter: logging.Formatter
    if cfg.log_json:
        formatter = _JsonFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    file_error: OSError | None = None
    if cfg.log_path:
        try:
            os.makedirs(os.path.dirname(cfg.log_path) or ".", exist_ok=True)
            handlers.append(logging.FileHandler(cfg.log_path))
        except OSError as exc:
            file_error = exc

    for h in handlers:
        h.setFormatter(formatter)
        if cfg.handler_interval_s > 0.0:
            h.addFilter(DebounceFilter(cfg.handler_interval_s))
        root.addHandler(h)
    root.setLevel(level)
    if file_error is not None:
        logging.getLogger(__name__).warning(
            "log_file_setup_failed path=%s", cfg.log_path, exc_info=file_error
        )
    return root


__all__ = ["setup_logging"]
