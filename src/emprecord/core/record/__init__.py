"""Employee record value type and its read-only view."""

from emprecord.core.record.models import EmployeeRecord, RecordDestroyedError
from emprecord.core.record.view import ReadOnlyRecord, ReadOnlyViolationError

__all__ = [
    "EmployeeRecord",
    "RecordDestroyedError",
    "ReadOnlyRecord",
    "ReadOnlyViolationError",
]
