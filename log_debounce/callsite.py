"""Identify logging call sites from the caller's frame."""

from __future__ import annotations

import sys
from types import FrameType
from typing import NamedTuple


class CallSite(NamedTuple):
    """Stable identity of one lexical invocation point.

    ``offset`` is the bytecode offset of the call inside its code object,
    which keeps two calls on the same source line apart.
    """

    filename: str
    qualname: str
    lineno: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno} in {self.qualname} @{self.offset}"


def call_site(frame: FrameType) -> CallSite:
    """Return the :class:`CallSite` currently executing in ``frame``."""

    code = frame.f_code
    qualname = getattr(code, "co_qualname", code.co_name)
    return CallSite(code.co_filename, qualname, frame.f_lineno, frame.f_lasti)


def caller_site(depth: int = 1) -> CallSite:
    """Return the call site ``depth`` frames above the function calling this.

    ``caller_site()`` inside ``helper`` identifies the line that called
    ``helper``.
    """

    return call_site(sys._getframe(depth + 1))


__all__ = ["CallSite", "call_site", "caller_site"]
