"""Lifecycle tracing example.

Demonstrates:
- Registering an observer for record lifecycle events
- Copy independence
- Read-only views
- Scope-based destruction with ExitStack
"""

from contextlib import ExitStack

from emprecord import EmployeeRecord, InMemoryLifecycleLog, ReadOnlyViolationError


def main() -> None:
    log = InMemoryLifecycleLog()
    EmployeeRecord.add_observer(log)

    with ExitStack() as scope:
        original = scope.enter_context(EmployeeRecord("Zain Malik", 105, 58000.0, "IT"))
        duplicate = scope.enter_context(original.copy())

        original.update_name("Zain Malik (Senior)")
        print(f"Original: {original.name}, copy: {duplicate.name}")

        view = duplicate.as_read_only()
        try:
            view.update_salary(0.0)
        except ReadOnlyViolationError as e:
            print(f"Rejected: {e}")

        print(EmployeeRecord.company_info())

    EmployeeRecord.remove_observer(log)
    for event in log.events:
        print(f"{event.kind.value:>9}  {event.name}  live={event.live_count}")


if __name__ == "__main__":
    main()
