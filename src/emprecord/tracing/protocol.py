"""Protocols for lifecycle tracing.

Observers receive every construction, copy and destruction of an
EmployeeRecord, allowing different sinks (in-memory log, metrics, audit).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from emprecord.tracing.models import LifecycleEvent


@runtime_checkable
class LifecycleObserver(Protocol):
    """Protocol for receiving record lifecycle events.

    Usage:
        log = InMemoryLifecycleLog()
        EmployeeRecord.add_observer(log)

        record = EmployeeRecord("Ahmed Khan", 101, 50000.0, "Engineering")
        record.destroy()

        kinds = [event.kind for event in log.events]

    Note:
        Observers are called synchronously, in registration order, after the
        live-count has been updated. Exceptions raised by an observer
        propagate to the code that created, copied or destroyed the record.
    """

    def on_event(self, event: LifecycleEvent) -> None:
        """Handle one lifecycle transition.

        Args:
            event: The transition that just happened.
        """
        ...
