"""Reachability decision from the stored activity signals."""

from __future__ import annotations

import time
from typing import Callable, Optional

from .models import MAX_EPOCH_MILLIS, Reachability, from_epoch_millis

Clock = Callable[[], int]


def current_millis() -> int:
    return time.time_ns() // 1_000_000


def _seconds_toward_zero(millis: int) -> int:
    seconds = abs(millis) // 1000
    return -seconds if millis < 0 else seconds


class ReachabilityEvaluator:
    """Decides whether a device counts as reachable.

    A device is reachable when its last activity is at most ``timeout_ms`` old
    (inclusive). Otherwise an explicit ``active`` flag set to ``True`` still marks
    it reachable. Timestamps that are not positive or lie beyond the last
    representable date count as never active. The evaluator holds no mutable
    state and can be shared freely.
    """

    __slots__ = ("_timeout_ms", "_clock")

    def __init__(self, timeout_ms: int, clock: Clock = current_millis) -> None:
        if timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {timeout_ms}")
        self._timeout_ms = timeout_ms
        self._clock = clock

    @property
    def timeout_ms(self) -> int:
        return self._timeout_ms

    def is_reachable(self, last_activity_time: int, now_ms: Optional[int] = None) -> bool:
        if now_ms is None:
            now_ms = self._clock()
        return now_ms - last_activity_time <= self._timeout_ms

    def evaluate(self, last_activity_time: Optional[int], active: Optional[bool] = None) -> Reachability:
        reachable = False
        last_seen = None
        inactivity_seconds = None

        if last_activity_time is not None and 0 < last_activity_time <= MAX_EPOCH_MILLIS:
            now_ms = self._clock()
            last_seen = from_epoch_millis(last_activity_time)
            # clock skew can make this negative; reported as is
            inactivity_seconds = _seconds_toward_zero(now_ms - last_activity_time)
            reachable = self.is_reachable(last_activity_time, now_ms)

        if not reachable and active is True:
            reachable = True

        return Reachability(
            reachable=reachable,
            last_seen=last_seen,
            inactivity_seconds=inactivity_seconds,
        )
