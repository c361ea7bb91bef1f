"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

from device_ping.core.config import Settings, get_settings
from device_ping.infrastructure.database.session import get_engine
from device_ping.modules.ping import ReachabilityEvaluator


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    reachability_evaluator: ReachabilityEvaluator = field(init=False)

    def __post_init__(self) -> None:
        self.reachability_evaluator = ReachabilityEvaluator(self.settings.ping_timeout_ms)

    def init_infrastructure(self) -> None:
        """Ensure infrastructure singletons (database engine, etc.) are initialised."""
        get_engine()


@lru_cache()
def get_container() -> ApplicationContainer:
    container = ApplicationContainer(settings=get_settings())
    container.init_infrastructure()
    return container


__all__ = ["ApplicationContainer", "get_container"]
