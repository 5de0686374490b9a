from __future__ import annotations

from typing import Callable, Dict, List, Optional

from lpmodel.core.config import Settings, load_settings
from lpmodel.core.errors import SolverError
from lpmodel.solvers.lp.backend import LPBackend
from lpmodel.solvers.lp.glop import GlopBackend
from lpmodel.solvers.lp.highs import HighsBackend

BackendFactory = Callable[[Optional[float]], LPBackend]

BACKENDS: Dict[str, BackendFactory] = {
    GlopBackend.name: GlopBackend,
    HighsBackend.name: HighsBackend,
}


def available_backends() -> List[str]:
    return sorted(BACKENDS)


def default_backend() -> str:
    return _settings().backend


def get_backend(name: Optional[str] = None, time_limit: Optional[float] = None) -> LPBackend:
    """Instantiate a backend by name; arguments left as None come from the environment."""
    if name is None or time_limit is None:
        settings = _settings()
        name = name or settings.backend
        time_limit = time_limit if time_limit is not None else settings.time_limit

    key = name.lower()
    factory = BACKENDS.get(key)
    if factory is None:
        raise SolverError(
            f"Unknown LP backend '{key}'. Available: {', '.join(available_backends())}."
        )
    return factory(time_limit)


def _settings() -> Settings:
    try:
        return load_settings()
    except ValueError as exc:
        raise SolverError(f"Invalid solver configuration: {exc}") from exc
