"""emprecord: value semantics of a single employee record.

Usage:
    from emprecord import EmployeeRecord

    record = EmployeeRecord("Zain Malik", 105, 58000.0, "IT")
    duplicate = record.copy()
    record.update_name("Zain Malik (Senior)")

    assert duplicate.name == "Zain Malik"
    print(EmployeeRecord.company_info())

    duplicate.destroy()
    record.destroy()
"""

__version__ = "0.1.0"

# Core primitives
from emprecord.core import (
    Copy,
    EmployeeRecord,
    LiveCounter,
    ReadOnlyRecord,
    ReadOnlyViolationError,
    RecordDestroyedError,
    get_live_counter,
)

# Configuration
from emprecord.config import CompanySettings

# Argument passing
from emprecord.passing import (
    create_new_employee,
    print_employee_by_reference,
    print_employee_by_value,
)

# Tracing
from emprecord.tracing import (
    InMemoryLifecycleLog,
    LifecycleEvent,
    LifecycleKind,
    LifecycleObserver,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Copy",
    "EmployeeRecord",
    "ReadOnlyRecord",
    "RecordDestroyedError",
    "ReadOnlyViolationError",
    "LiveCounter",
    "get_live_counter",
    # Config
    "CompanySettings",
    # Passing
    "print_employee_by_value",
    "print_employee_by_reference",
    "create_new_employee",
    # Tracing
    "InMemoryLifecycleLog",
    "LifecycleEvent",
    "LifecycleKind",
    "LifecycleObserver",
]
