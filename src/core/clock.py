"""Clock implementations.

SystemClock reads the wall clock; ManualClock only moves when told to, which
keeps expiration tests free of real sleeps.
"""

from __future__ import annotations

import logging
import time

from core.errors import ValidationError

logger = logging.getLogger("aged_cache.clock")


class SystemClock:
    # Wall-clock time source, milliseconds since the epoch.

    def millis(self) -> int:
        return time.time_ns() // 1_000_000


class ManualClock:
    """Controllable time source.

    Starts at ``start_millis`` and changes only through ``advance`` or ``set``.
    """

    def __init__(self, start_millis: int = 0) -> None:
        self._now = int(start_millis)

    def millis(self) -> int:
        return self._now

    def advance(self, delta_millis: int) -> int:
        delta = int(delta_millis)
        if delta < 0:
            raise ValidationError("delta_millis must be non-negative; use set() to go back in time")
        self._now += delta
        return self._now

    def set(self, millis: int) -> None:
        new_now = int(millis)
        if new_now < self._now:
            logger.debug("Manual clock moved backwards from %d to %d", self._now, new_now)
        self._now = new_now
