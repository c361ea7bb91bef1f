"""Reusable FastAPI dependencies."""

from .database import get_db_session
from .devices import get_device_service, get_ping_service, get_reachability_evaluator

__all__ = [
    "get_db_session",
    "get_device_service",
    "get_ping_service",
    "get_reachability_evaluator",
]
