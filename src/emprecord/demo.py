"""Console demonstration of EmployeeRecord value semantics.

Run with `python -m emprecord` or the `emprecord-demo` script.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack

from emprecord.config import CompanySettings
from emprecord.core.record import EmployeeRecord
from emprecord.passing import (
    create_new_employee,
    print_employee_by_reference,
    print_employee_by_value,
)

BANNER_RULE = "=" * 38


def _banner(title: str) -> None:
    print(BANNER_RULE)
    print(f"   {title}")
    print(BANNER_RULE)


def _show(record: EmployeeRecord) -> None:
    print(f"\n{record.display()}")


def run_demo() -> None:
    """Run the fixed demonstration sequence.

    Records still alive at the end are destroyed in reverse order of creation.
    """
    _banner(f"{EmployeeRecord.company_name.upper()} EMPLOYEE SYSTEM")
    print(f"\n{EmployeeRecord.company_info()}")

    with ExitStack() as scope:
        print("\n--- Creating Employees ---")
        emp1 = scope.enter_context(EmployeeRecord("Ahmed Khan", 101, 50000.0, "Engineering"))
        emp2 = scope.enter_context(EmployeeRecord("Sara Ali", 102, 55000.0, "Marketing"))
        _show(emp1)
        _show(emp2)

        print("\n--- Dynamic Allocation ---")
        emp3 = EmployeeRecord("Fatima Hassan", 103, 60000.0, "Finance")
        _show(emp3)

        print("\n--- Identity Demo ---")
        alias = emp1
        print(f"Address of emp1: {id(emp1):#x}")
        print(f"Address of alias: {id(alias):#x}")
        print(f"Same object: {alias is emp1}")

        print("\n--- Passing Objects ---")
        print_employee_by_value(emp1)
        print_employee_by_reference(emp2)

        print("\n--- Returning Object ---")
        emp4 = scope.enter_context(create_new_employee("Ali Raza", 104, 52000.0, "HR"))
        _show(emp4)

        print()
        _banner("DEEP COPY DEMONSTRATION")

        original = scope.enter_context(EmployeeRecord("Zain Malik", 105, 58000.0, "IT"))
        print("\nOriginal Employee:")
        _show(original)

        deep_copy = scope.enter_context(original.copy())
        print("\nDeep Copy Created:")
        _show(deep_copy)

        print("\n--- Modifying Original ---")
        original.update_name("Zain Malik (Senior)")
        original.update_salary(65000.0)

        print("\nAfter Modification:")
        print("\nOriginal (Modified):")
        _show(original)
        print("\nDeep Copy (Unchanged):")
        _show(deep_copy)
        print("\n** Deep copy has independent memory **")

        print("\n--- Adding New Employee ---")
        scope.enter_context(EmployeeRecord("Ayesha Iqbal", 106, 54000.0, "Operations"))
        print(f"\n{EmployeeRecord.company_info()}")

        print("\n--- Const Object ---")
        const_emp = scope.enter_context(EmployeeRecord("Hassan Ahmed", 107, 56000.0, "QA"))
        print(f"\n{const_emp.as_read_only().display()}")

        emp3.destroy()

        print("\n--- Final Statistics ---")
        print(f"\n{EmployeeRecord.company_info()}")

        print()
        _banner("PROGRAM COMPLETED")
        print()


def main() -> int:
    """Entry point: configure logging and run the demonstration."""
    settings = CompanySettings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    run_demo()
    return 0
