"""Core functionalities: the record value type and its shared state.

Architecture Note:
    core/ holds the EmployeeRecord type, its read-only view and the
    process-wide live-count. Configuration lives in config/, lifecycle
    observation in tracing/.
"""

from emprecord.core.counter import LiveCounter, get_live_counter
from emprecord.core.record import (
    EmployeeRecord,
    ReadOnlyRecord,
    ReadOnlyViolationError,
    RecordDestroyedError,
)
from emprecord.core.types import Copy

__all__ = [
    # Types
    "Copy",
    # Counter
    "LiveCounter",
    "get_live_counter",
    # Record
    "EmployeeRecord",
    "ReadOnlyRecord",
    "RecordDestroyedError",
    "ReadOnlyViolationError",
]
