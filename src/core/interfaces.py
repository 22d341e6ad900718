"""Core protocol and interface definitions.

Defines the Clock protocol the cache reads "now" from, so the wall clock
(SystemClock) and a controllable clock (ManualClock) are interchangeable.
"""

from __future__ import annotations

from typing import Protocol


class Clock(Protocol):
    """Contract for any time source (system, manual, etc.)."""
    def millis(self) -> int:
        """Return the current absolute time in milliseconds since the epoch."""
        ...
