"""Argument passing: by value, by reference, and returning a new record.

By value the callee works on its own copy, which is destroyed when the call
returns, so the live-count is back at its prior value afterwards. By reference
the callee reads the caller's record through a read-only view and the
live-count never moves.
"""

from __future__ import annotations

from emprecord.core.record import EmployeeRecord, ReadOnlyRecord


def print_employee_by_value(record: EmployeeRecord) -> str:
    """Print the name of a callee-owned copy of `record`.

    Returns:
        The printed line.
    """
    with record.copy() as employee:
        line = f"[Passed by Value] {employee.name}"
        print(f"\n{line}")
    return line


def print_employee_by_reference(record: EmployeeRecord | ReadOnlyRecord) -> str:
    """Print the caller's record through a read-only view, without copying.

    Returns:
        The printed text.
    """
    view = record if isinstance(record, ReadOnlyRecord) else record.as_read_only()
    text = f"[Passed by Reference]\n{view.display()}"
    print(f"\n{text}")
    return text


def create_new_employee(
    name: str, employee_id: int, salary: float, department: str
) -> EmployeeRecord:
    """Build a record and hand ownership to the caller.

    The caller is responsible for destroying the returned record.
    """
    return EmployeeRecord(name, employee_id, salary, department)
