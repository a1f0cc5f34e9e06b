"""EmployeeRecord value type.

Usage:
    record = EmployeeRecord("Zain Malik", 105, 58000.0, "IT")
    duplicate = record.copy()

    record.update_name("Zain Malik (Senior)")
    assert duplicate.name == "Zain Malik"

    with EmployeeRecord("Ali Raza", 104, 52000.0, "HR") as temp:
        print(temp.display())
    # temp destroyed here

    print(EmployeeRecord.company_info())
"""

from __future__ import annotations

import logging
import time
import warnings
from typing import TYPE_CHECKING, Any, ClassVar

from emprecord.config import CompanySettings
from emprecord.core.counter import LiveCounter, get_live_counter
from emprecord.core.types import Copy
from emprecord.tracing.models import LifecycleEvent, LifecycleKind

if TYPE_CHECKING:
    from emprecord.core.record.view import ReadOnlyRecord
    from emprecord.tracing.protocol import LifecycleObserver

logger = logging.getLogger(__name__)


class RecordDestroyedError(RuntimeError):
    """Raised when a destroyed record is used or destroyed again."""

    pass


def _format_salary(salary: float) -> str:
    """Render salary in shortest general form (50000, 52500.5)."""
    return f"{salary:g}"


class EmployeeRecord:
    """One employee with value semantics.

    Every construction and every copy increments the shared live-count; every
    destroy() decrements it. `department` is fixed at construction and has no
    mutator. Copies never share state with their source.

    Args:
        name: Employee name, owned by this record.
        employee_id: Numeric employee ID.
        salary: Current salary.
        department: Department, fixed for the lifetime of the record.
    """

    __slots__ = ("_name", "_employee_id", "_salary", "_department", "_alive")

    company_name: ClassVar[str] = CompanySettings().name
    _live: ClassVar[LiveCounter] = get_live_counter()
    _observers: ClassVar[list[LifecycleObserver]] = []

    def __init__(self, name: str, employee_id: int, salary: float, department: str):
        if salary < 0:
            warnings.warn(
                f"Employee '{name}' constructed with negative salary {salary}",
                stacklevel=2,
            )
        self._set_fields(name, employee_id, salary, department)
        count = self._live.increment()
        logger.info("Employee created: %s", name)
        self._publish_or_release(LifecycleKind.CREATED, name, employee_id, count)

    def _set_fields(self, name: str, employee_id: int, salary: float, department: str) -> None:
        self._name = name
        self._employee_id = employee_id
        self._salary = salary
        self._department = department
        self._alive = True

    def _publish_or_release(
        self, kind: LifecycleKind, name: str, employee_id: int, live_count: int
    ) -> None:
        # An observer failure aborts construction: the record never becomes live
        try:
            self._publish(kind, name, employee_id, live_count)
        except BaseException:
            self._alive = False
            self._live.decrement()
            raise

    def _check_alive(self, operation: str) -> None:
        if not self._alive:
            raise RecordDestroyedError(
                f"Cannot {operation} employee '{self._name}': record was destroyed"
            )

    # Copy construction

    def copy(self) -> Copy[EmployeeRecord]:
        """Copy-construct an independent record.

        The copy holds its own name, ID, salary and department. Renaming or
        re-salarying either record afterwards is never visible through the
        other. The copy is a live record of its own.

        Returns:
            New record equal to this one at the moment of copying.

        Raises:
            RecordDestroyedError: If this record was destroyed.
        """
        self._check_alive("copy")
        cls = type(self)
        duplicate = cls.__new__(cls)
        duplicate._set_fields(self._name, self._employee_id, self._salary, self._department)
        count = self._live.increment()
        logger.info("Creating deep copy of: %s", self._name)
        duplicate._publish_or_release(LifecycleKind.COPIED, self._name, self._employee_id, count)
        return duplicate

    def __copy__(self) -> EmployeeRecord:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> EmployeeRecord:
        duplicate = self.copy()
        memo[id(self)] = duplicate
        return duplicate

    # Destruction

    def destroy(self) -> None:
        """Release this record and decrement the live-count.

        Raises:
            RecordDestroyedError: If the record was already destroyed.
        """
        self._check_alive("destroy")
        self._alive = False
        count = self._live.decrement()
        logger.info("Destroying employee: %s", self._name)
        self._publish(LifecycleKind.DESTROYED, self._name, self._employee_id, count)

    def __enter__(self) -> EmployeeRecord:
        return self

    def __exit__(self, *exc_info: object) -> None:
        # Destroyed inside the block already: nothing left to release
        if self._alive:
            self.destroy()

    # Accessors

    @property
    def name(self) -> str:
        return self._name

    @property
    def employee_id(self) -> int:
        return self._employee_id

    @employee_id.setter
    def employee_id(self, value: int) -> None:
        self._check_alive("change ID of")
        self._employee_id = value

    @property
    def salary(self) -> float:
        return self._salary

    @property
    def department(self) -> str:
        """Department assigned at construction. Read-only."""
        return self._department

    @property
    def is_alive(self) -> bool:
        """False once destroy() has been called."""
        return self._alive

    # Mutators

    def update_salary(self, new_salary: float) -> None:
        """Replace the salary.

        Raises:
            RecordDestroyedError: If the record was destroyed.
        """
        self._check_alive("update salary of")
        if new_salary < 0:
            warnings.warn(
                f"Employee '{self._name}' given negative salary {new_salary}",
                stacklevel=2,
            )
        self._salary = new_salary

    def update_name(self, new_name: str) -> None:
        """Replace the name.

        Raises:
            RecordDestroyedError: If the record was destroyed.
        """
        self._check_alive("rename")
        self._name = new_name

    # Rendering

    def display(self) -> str:
        """Render every field plus the company name. Never mutates the record.

        Raises:
            RecordDestroyedError: If the record was destroyed.
        """
        self._check_alive("display")
        return "\n".join(
            [
                "--- Employee Details ---",
                f"Company: {self.company_name}",
                f"Name: {self._name}",
                f"ID: {self._employee_id}",
                f"Department: {self._department}",
                f"Salary: ${_format_salary(self._salary)}",
            ]
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain snapshot of the record fields."""
        return {
            "name": self._name,
            "employee_id": self._employee_id,
            "salary": self._salary,
            "department": self._department,
        }

    def as_read_only(self) -> ReadOnlyRecord:
        """Read-only view over this record."""
        # Late import to avoid circular dependency
        from emprecord.core.record.view import ReadOnlyRecord

        return ReadOnlyRecord(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmployeeRecord):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "" if self._alive else ", destroyed"
        return (
            f"EmployeeRecord(name={self._name!r}, employee_id={self._employee_id}, "
            f"salary={self._salary!r}, department={self._department!r}{state})"
        )

    # Class-level state

    @classmethod
    def total_employees(cls) -> int:
        """Number of records currently live."""
        return cls._live.value

    @classmethod
    def company_info(cls) -> str:
        """Render company name and live-count. Needs no live instance."""
        return "\n".join(
            [
                "=== Company Information ===",
                f"Company: {cls.company_name}",
                f"Total Employees: {cls.total_employees()}",
            ]
        )

    @classmethod
    def add_observer(cls, observer: LifecycleObserver) -> None:
        """Register an observer for every record's lifecycle events."""
        cls._observers.append(observer)

    @classmethod
    def remove_observer(cls, observer: LifecycleObserver) -> None:
        """Unregister an observer.

        Raises:
            ValueError: If the observer is not registered.
        """
        cls._observers.remove(observer)

    @classmethod
    def _publish(cls, kind: LifecycleKind, name: str, employee_id: int, live_count: int) -> None:
        if not cls._observers:
            return
        event = LifecycleEvent(
            kind=kind,
            name=name,
            employee_id=employee_id,
            live_count=live_count,
            timestamp=time.time(),
        )
        for observer in list(cls._observers):
            observer.on_event(event)
