"""Runtime configuration for gated logging.

Settings are read from the environment (and a local ``.env`` when present).
Nothing here is needed for the gate registry itself; the settings only tune
the logging helpers built around it.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from log_debounce.log_gate import LogGate


DEFAULT_INTERVAL_S = 1.0


class DebounceSettings(BaseSettings):
    enabled: bool = Field(
        True,
        validation_alias=AliasChoices("LOG_DEBOUNCE_ENABLED"),
        description="When false every gated log call is emitted.",
    )
    default_interval_s: float = Field(
        DEFAULT_INTERVAL_S,
        validation_alias=AliasChoices("LOG_DEBOUNCE_INTERVAL_S"),
        description="Window used by DebounceFilter and LogGate when none is given.",
    )
    handler_interval_s: float = Field(
        0.0,
        validation_alias=AliasChoices("LOG_DEBOUNCE_HANDLER_INTERVAL_S"),
        description="Seconds to debounce each call site at the root handlers (0 disables).",
    )
    log_level: str = Field("INFO", validation_alias=AliasChoices("LOG_LEVEL"))
    log_json: bool = Field(False, validation_alias=AliasChoices("LOG_JSON"))
    log_path: Path | None = Field(
        None,
        validation_alias=AliasChoices("LOG_PATH", "LOG_FILE"),
        description="Optional log file written alongside stdout.",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("default_interval_s", "handler_interval_s", mode="after")
    @classmethod
    def _clamp_interval(cls, v: float) -> float:
        if math.isnan(v) or v < 0.0:
            return 0.0
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper() or "INFO"
        return v


def load_settings() -> DebounceSettings:
    """Return settings loaded from ``.env`` and the process environment."""

    load_dotenv(override=False)
    cfg = DebounceSettings()
    logging.getLogger("log_debounce.config").debug(
        "settings snapshot: %s", cfg.model_dump()
    )
    return cfg


class _SettingsProxy:
    """Lazily load settings on first attribute access."""

    _settings: DebounceSettings | None = None

    def _load(self) -> DebounceSettings:
        if self._settings is None:
            self._settings = load_settings()
        return self._settings

    def __getattr__(self, item: str):  # pragma: no cover - passthrough
        return getattr(self._load(), item)

    def reload(self) -> DebounceSettings:
        """Discard cached settings and read the environment again."""

        self._settings = None
        return self._load()

    def build_log_gate(self, interval_s: float | None = None) -> "LogGate":
        """Return a ``LogGate`` honouring an optional interval override."""

        from log_debounce.log_gate import LogGate

        base = interval_s
        if base is None:
            base = self._load().default_interval_s
        return LogGate(interval_s=base)


# Public singleton used by the rest of the package
settings = _SettingsProxy()

__all__ = [
    "DEFAULT_INTERVAL_S",
    "DebounceSettings",
    "load_settings",
    "settings",
]
