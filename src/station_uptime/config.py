"""Runtime configuration read from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass

from .data import DEFAULT_TIMEOUT

OUTPUT_FORMATS = ("text", "json")


@dataclass
class Settings:
    """Defaults for the command line, overridable by flags."""

    source: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    output_format: str = "text"
    debug: bool = False


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off"}


def _parse_timeout(value: str | None) -> float:
    if value is None:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        raise ValueError(f"STATION_UPTIME_TIMEOUT must be a number, got {value!r}") from None
    if timeout <= 0:
        raise ValueError("STATION_UPTIME_TIMEOUT must be positive")
    return timeout


def load_settings() -> Settings:
    """Load configuration from ``STATION_UPTIME_*`` environment variables."""

    output_format = os.getenv("STATION_UPTIME_FORMAT", "text").strip().lower()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"STATION_UPTIME_FORMAT must be one of {', '.join(OUTPUT_FORMATS)}"
        )
    return Settings(
        source=os.getenv("STATION_UPTIME_SOURCE") or None,
        timeout=_parse_timeout(os.getenv("STATION_UPTIME_TIMEOUT")),
        output_format=output_format,
        debug=_parse_bool(os.getenv("STATION_UPTIME_DEBUG"), False),
    )
