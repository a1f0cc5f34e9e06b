"""Process-wide live-count of employee records.

LiveCounter is a stateful service owned by the EmployeeRecord type. It is
initialized once at import time and never reset during normal operation.
"""

from __future__ import annotations

import threading


class LiveCounter:
    """Counts currently constructed, not-yet-destroyed records.

    Every update happens under a lock so the count stays exact if records are
    created or destroyed from more than one thread.
    """

    def __init__(self) -> None:
        """Initialize counter at zero."""
        self._lock = threading.Lock()
        self._value = 0

    @property
    def value(self) -> int:
        """Current number of live records."""
        with self._lock:
            return self._value

    def increment(self) -> int:
        """Register one newly constructed record.

        Returns:
            The live-count after the increment.
        """
        with self._lock:
            self._value += 1
            return self._value

    def decrement(self) -> int:
        """Register one destroyed record.

        Returns:
            The live-count after the decrement.

        Raises:
            ValueError: If no record is currently live.
        """
        with self._lock:
            if self._value == 0:
                raise ValueError("Cannot decrement live-count below zero")
            self._value -= 1
            return self._value


# Module-level counter instance
_live_counter = LiveCounter()


def get_live_counter() -> LiveCounter:
    """Access the process-wide live-count.

    Returns:
        The LiveCounter shared by every EmployeeRecord.
    """
    return _live_counter
