"""In-memory cache whose entries expire after a per-entry retention period.

Entries live on a singly linked list, newest first. Expired entries are not
removed on a timer; every query (get/size/is_empty) sweeps them out first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import config
from core.clock import SystemClock
from core.errors import ValidationError
from core.interfaces import Clock
from core.logging_config import configure_logging

logger = logging.getLogger("aged_cache.cache")

_MISSING = object()


@dataclass(slots=True, eq=False)
class _ExpirableEntry:
    # One key/value pair plus its absolute expiration time (ms since epoch)
    key: Any
    value: Any
    expires_at: int
    next: Optional["_ExpirableEntry"] = None


class AgedCache:
    """Key/value cache with time-based expiry over a hand-rolled linked list.

    Purpose:
      - put(key, value, retention_millis) -> None
      - get(key, default=None) -> value or default
      - size() -> int, is_empty() -> bool

    Key behavior:
      - An entry expires once ``expires_at < now``; ``expires_at == now`` is still live.
      - Expired entries are swept lazily at the start of every query, never on put.
      - Keys are compared with ``==``; putting an equal key replaces the old entry.

    Not thread-safe. Callers sharing an instance across threads must guard
    every call with their own lock.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        *,
        default_retention_millis: Optional[int] = None,
    ) -> None:
        configure_logging()

        if default_retention_millis is None:
            default_retention_millis = config.DEFAULT_RETENTION_MILLIS
        if isinstance(default_retention_millis, bool) or not isinstance(default_retention_millis, int):
            raise ValidationError("default_retention_millis must be an integer")

        self._clock: Clock = clock if clock is not None else SystemClock()
        self._default_retention_millis = default_retention_millis
        self._head: Optional[_ExpirableEntry] = None

    @property
    def default_retention_millis(self) -> int:
        return self._default_retention_millis

    def put(self, key: Any, value: Any, retention_millis: Optional[int] = None) -> None:
        if retention_millis is None:
            retention_millis = self._default_retention_millis

        expires_at = self._clock.millis() + retention_millis

        # Keep keys unique: drop the previous entry before linking the new one
        self._remove(key)

        entry = _ExpirableEntry(key, value, expires_at)
        entry.next = self._head
        self._head = entry

    def get(self, key: Any, default: Any = None) -> Any:
        self._sweep()
        current = self._head
        while current is not None:
            if current.key == key:
                return current.value
            current = current.next
        return default

    def is_empty(self) -> bool:
        self._sweep()
        return self._head is None

    def size(self) -> int:
        self._sweep()
        count = 0
        current = self._head
        while current is not None:
            count += 1
            current = current.next
        return count

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __contains__(self, key: Any) -> bool:
        return self.get(key, _MISSING) is not _MISSING

    def _sweep(self) -> None:
        """Unlink every expired entry in one full pass.

        ``now`` is read once so the whole pass is judged against one instant.
        Entries are in insertion order, not expiry order, so the pass never
        stops early.
        """
        now = self._clock.millis()
        evicted = 0
        prev: Optional[_ExpirableEntry] = None
        current = self._head

        while current is not None:
            if current.expires_at < now:
                if prev is None:
                    self._head = current.next
                else:
                    prev.next = current.next
                evicted += 1
            else:
                prev = current
            current = current.next

        if evicted and config.LOG_SWEEPS:
            logger.debug("Swept %d expired entr%s at %d", evicted, "y" if evicted == 1 else "ies", now)

    def _remove(self, key: Any) -> None:
        prev: Optional[_ExpirableEntry] = None
        current = self._head

        while current is not None:
            if current.key == key:
                if prev is None:
                    self._head = current.next
                else:
                    prev.next = current.next
                logger.debug("Replacing existing entry for key %r", key)
                return
            prev = current
            current = current.next
