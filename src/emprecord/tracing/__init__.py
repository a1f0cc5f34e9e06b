"""Lifecycle tracing for employee records.

Usage:
    from emprecord import EmployeeRecord
    from emprecord.tracing import InMemoryLifecycleLog, LifecycleKind

    log = InMemoryLifecycleLog()
    EmployeeRecord.add_observer(log)
    ...
    created = log.of_kind(LifecycleKind.CREATED)
"""

from emprecord.tracing.memory import InMemoryLifecycleLog
from emprecord.tracing.models import LifecycleEvent, LifecycleKind
from emprecord.tracing.protocol import LifecycleObserver

__all__ = [
    "InMemoryLifecycleLog",
    "LifecycleEvent",
    "LifecycleKind",
    "LifecycleObserver",
]
