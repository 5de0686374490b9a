from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional


DEFAULT_BACKEND = "glop"


@dataclass(frozen=True)
class Settings:
    backend: str = DEFAULT_BACKEND
    time_limit: Optional[float] = None  # seconds
    log_level: str = "INFO"
    port: int = 8000
    reload: bool = False


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from the environment. Raises ValueError on a malformed time limit."""
    env = os.environ if environ is None else environ

    return Settings(
        backend=env.get("LPMODEL_BACKEND", DEFAULT_BACKEND).strip().lower() or DEFAULT_BACKEND,
        time_limit=_parse_time_limit(env.get("LPMODEL_TIME_LIMIT", "")),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
        port=int(env.get("PORT", 8000)),
        reload=env.get("RELOAD", "false").lower() == "true",
    )


def _parse_time_limit(raw: str) -> Optional[float]:
    raw = raw.strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"LPMODEL_TIME_LIMIT must be a number of seconds, got '{raw}'.") from None
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"LPMODEL_TIME_LIMIT must be a positive number of seconds, got '{raw}'.")
    return value
