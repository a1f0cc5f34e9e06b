"""Read-only view over an EmployeeRecord.

Usage:
    record = EmployeeRecord("Hassan Ahmed", 107, 56000.0, "QA")
    const = record.as_read_only()

    print(const.display())      # allowed
    const.update_salary(1.0)    # raises ReadOnlyViolationError
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn

from emprecord.core.types import Copy

if TYPE_CHECKING:
    from emprecord.core.record.models import EmployeeRecord


class ReadOnlyViolationError(AttributeError):
    """Raised when a read-only view is asked to mutate its record."""

    pass


class ReadOnlyRecord:
    """Exposes only the read-only contract of an EmployeeRecord.

    The view does not copy: it reads the wrapped record live, so it never
    changes the live-count. Copying the view yields an ordinary mutable record.
    `copy.copy(view)` gives another view over the same record.

    Args:
        record: Record to expose.
    """

    __slots__ = ("_record",)

    def __init__(self, record: EmployeeRecord):
        object.__setattr__(self, "_record", record)

    @property
    def name(self) -> str:
        return self._record.name

    @property
    def employee_id(self) -> int:
        return self._record.employee_id

    @property
    def salary(self) -> float:
        return self._record.salary

    @property
    def department(self) -> str:
        return self._record.department

    @property
    def is_alive(self) -> bool:
        return self._record.is_alive

    def display(self) -> str:
        return self._record.display()

    def to_dict(self) -> dict[str, Any]:
        return self._record.to_dict()

    def copy(self) -> Copy[EmployeeRecord]:
        """Copy-construct a mutable record from the viewed one."""
        return self._record.copy()

    def update_salary(self, new_salary: float) -> NoReturn:
        raise ReadOnlyViolationError(
            f"Cannot update salary of '{self._record.name}' through a read-only view"
        )

    def update_name(self, new_name: str) -> NoReturn:
        raise ReadOnlyViolationError(
            f"Cannot rename '{self._record.name}' through a read-only view"
        )

    def __copy__(self) -> ReadOnlyRecord:
        return ReadOnlyRecord(self._record)

    def __setattr__(self, attr: str, value: Any) -> NoReturn:
        raise ReadOnlyViolationError(
            f"Cannot set '{attr}' on '{self._record.name}' through a read-only view"
        )

    def __delattr__(self, attr: str) -> NoReturn:
        raise ReadOnlyViolationError(
            f"Cannot delete '{attr}' on '{self._record.name}' through a read-only view"
        )

    def __repr__(self) -> str:
        return f"ReadOnlyRecord({self._record!r})"
