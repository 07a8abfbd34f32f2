"""Instance accounting for CalendarDate.

This module provides InstanceCounter, a small thread-safe tally of how
many dates have ever been created and how many are still alive. It exists
for diagnostics and tests; the calendar logic never reads it.
"""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)


class InstanceCounter:
    """Thread-safe creation/liveness counter.

    ``total_created`` only ever grows. ``alive`` grows on every
    registration and shrinks when a registered object is finalized.

    Examples:
        >>> counter = InstanceCounter()
        >>> counter.register()
        >>> counter.register()
        >>> counter.release()
        >>> (counter.alive, counter.total_created)
        (1, 2)
    """

    __slots__ = ("_lock", "_alive", "_total_created")

    def __init__(self) -> None:
        # release() may run from a GC finalizer while this thread holds the lock
        self._lock = threading.RLock()
        self._alive = 0
        self._total_created = 0

    @property
    def alive(self) -> int:
        """Return the number of registered objects not yet finalized."""
        with self._lock:
            return self._alive

    @property
    def total_created(self) -> int:
        """Return the number of objects ever registered."""
        with self._lock:
            return self._total_created

    def register(self) -> None:
        """Record a newly created object."""
        with self._lock:
            self._alive += 1
            self._total_created += 1
            alive, total = self._alive, self._total_created
        logger.debug("registered instance (alive=%d, total=%d)", alive, total)

    def release(self) -> None:
        """Record that an object has been finalized."""
        with self._lock:
            self._alive -= 1

    def reset(self) -> None:
        """Zero both counts."""
        with self._lock:
            self._alive = 0
            self._total_created = 0

    def __repr__(self) -> str:
        with self._lock:
            return (
                f"InstanceCounter(alive={self._alive}, "
                f"total_created={self._total_created})"
            )


__all__ = ["InstanceCounter"]
