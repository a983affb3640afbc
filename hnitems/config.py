import logging
import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from hnitems.errors import ConfigError

DEFAULT_BASE_URL = "https://hacker-news.firebaseio.com/v0"
DEFAULT_MAX_WORKERS = 8
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None  # seconds; None waits indefinitely
    max_workers: int = DEFAULT_MAX_WORKERS
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read settings from HACKERNEWS_* environment variables."""
        env = os.environ if environ is None else environ
        base_url = (env.get("HACKERNEWS_BASE_URL") or "").strip() or DEFAULT_BASE_URL
        log_level = (env.get("HACKERNEWS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"HACKERNEWS_LOG_LEVEL is not a logging level: {log_level!r}")
        return cls(
            base_url=base_url.rstrip("/"),
            timeout=_parse(env, "HACKERNEWS_TIMEOUT", float, None),
            max_workers=_parse(env, "HACKERNEWS_MAX_WORKERS", int, DEFAULT_MAX_WORKERS),
            log_level=log_level,
        )


def _parse(env, key, convert, default):
    raw = (env.get(key) or "").strip()
    if not raw:
        return default
    try:
        value = convert(raw)
    except ValueError:
        raise ConfigError(f"{key} must be a number, got {raw!r}") from None
    if not math.isfinite(value):
        raise ConfigError(f"{key} must be a finite number, got {raw!r}")
    if value <= 0:
        raise ConfigError(f"{key} must be positive, got {raw!r}")
    return value
