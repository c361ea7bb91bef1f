"""Device reachability: evaluation, result assembly and attribute lookup."""

from .assembler import assemble_ping_result
from .evaluator import ReachabilityEvaluator, current_millis
from .fetcher import ActivityAttributeFetcher
from .models import ACTIVE, ACTIVITY_KEYS, LAST_ACTIVITY_TIME, ActivitySnapshot, PingResult, Reachability
from .service import DevicePingService

__all__ = [
    "ACTIVE",
    "ACTIVITY_KEYS",
    "LAST_ACTIVITY_TIME",
    "ActivityAttributeFetcher",
    "ActivitySnapshot",
    "DevicePingService",
    "PingResult",
    "Reachability",
    "ReachabilityEvaluator",
    "assemble_ping_result",
    "current_millis",
]
