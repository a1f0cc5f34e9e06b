"""Tests for EmployeeRecord construction, copying and destruction.

Critical Invariants:
- Copies never alias their source
- Department never changes after construction
- Live-count moves by exactly one per construction, copy and destruction
- A destroyed record cannot be destroyed again or mutated
"""

import copy
import warnings

import pytest

from emprecord import EmployeeRecord, RecordDestroyedError


# Copy independence tests - critical for value semantics


def test_copy_equals_source_at_copy_time(zain, scope):
    """Copy has equal content but is a distinct record."""
    duplicate = scope.enter_context(zain.copy())

    assert duplicate is not zain
    assert duplicate == zain
    assert duplicate.to_dict() == {
        "name": "Zain Malik",
        "employee_id": 105,
        "salary": 58000.0,
        "department": "IT",
    }


def test_mutating_original_leaves_copy_unchanged(zain, scope):
    """CRITICAL: Renaming and re-salarying the source never reaches the copy.

    Why: This is the deep copy contract the record exists to demonstrate.
    """
    duplicate = scope.enter_context(zain.copy())

    zain.update_name("Zain Malik (Senior)")
    zain.update_salary(65000.0)

    assert zain.name == "Zain Malik (Senior)"
    assert zain.salary == 65000.0
    assert duplicate.name == "Zain Malik"
    assert duplicate.salary == 58000.0


def test_mutating_copy_leaves_original_unchanged(zain, scope):
    """Independence holds in the other direction too."""
    duplicate = scope.enter_context(zain.copy())

    duplicate.update_name("Someone Else")
    duplicate.update_salary(1.0)
    duplicate.employee_id = 999

    assert zain.name == "Zain Malik"
    assert zain.salary == 58000.0
    assert zain.employee_id == 105


@pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy], ids=["copy", "deepcopy"])
def test_copy_module_routes_through_copy_construction(zain, scope, copier):
    """copy.copy and copy.deepcopy produce counted, independent records."""
    before = EmployeeRecord.total_employees()

    duplicate = scope.enter_context(copier(zain))

    assert EmployeeRecord.total_employees() == before + 1
    duplicate.update_name("Changed")
    assert zain.name == "Zain Malik"


def test_deepcopy_of_container_copies_each_record_once(zain, scope):
    """A record referenced twice in a container is copied once (memo honored)."""
    before = EmployeeRecord.total_employees()

    pair = copy.deepcopy([zain, zain])
    scope.enter_context(pair[0])

    assert pair[0] is pair[1]
    assert pair[0] is not zain
    assert EmployeeRecord.total_employees() == before + 1


# Department immutability tests


def test_department_has_no_mutator(zain):
    """CRITICAL: department cannot be assigned after construction."""
    with pytest.raises(AttributeError):
        zain.department = "Finance"  # type: ignore[misc]

    assert zain.department == "IT"
    assert not hasattr(zain, "update_department")


def test_department_survives_every_mutator(zain, scope):
    """No mutator and no copy changes department."""
    zain.update_name("Renamed")
    zain.update_salary(1.0)
    zain.employee_id = 1
    duplicate = scope.enter_context(zain.copy())

    assert zain.department == "IT"
    assert duplicate.department == "IT"


def test_records_reject_new_attributes(zain):
    """Slots keep records from growing ad-hoc fields."""
    with pytest.raises(AttributeError):
        zain.nickname = "Z"  # type: ignore[attr-defined]


def test_employee_id_is_mutable(zain):
    """employee_id may be reassigned after construction."""
    zain.employee_id = 205
    assert zain.employee_id == 205


# Live-count tests


def test_construction_and_copy_increment_live_count(scope):
    """Each construction and each copy adds exactly one live record."""
    before = EmployeeRecord.total_employees()

    record = scope.enter_context(EmployeeRecord("Ahmed Khan", 101, 50000.0, "Engineering"))
    assert EmployeeRecord.total_employees() == before + 1

    scope.enter_context(record.copy())
    assert EmployeeRecord.total_employees() == before + 2


def test_destroy_decrements_live_count():
    """Destroying removes exactly one live record."""
    before = EmployeeRecord.total_employees()
    record = EmployeeRecord("Sara Ali", 102, 55000.0, "Marketing")

    record.destroy()

    assert EmployeeRecord.total_employees() == before
    assert not record.is_alive


def test_company_info_tracks_live_records():
    """Two records reported, then one after destroying one."""
    before = EmployeeRecord.total_employees()
    first = EmployeeRecord("Ahmed Khan", 101, 50000.0, "Engineering")
    second = EmployeeRecord("Sara Ali", 102, 55000.0, "Marketing")

    assert f"Total Employees: {before + 2}" in EmployeeRecord.company_info()

    first.destroy()
    assert f"Total Employees: {before + 1}" in EmployeeRecord.company_info()

    second.destroy()
    assert EmployeeRecord.total_employees() == before


def test_context_manager_destroys_on_exit():
    """Leaving a with block destroys the record exactly once."""
    before = EmployeeRecord.total_employees()

    with EmployeeRecord("Ali Raza", 104, 52000.0, "HR") as record:
        assert EmployeeRecord.total_employees() == before + 1

    assert not record.is_alive
    assert EmployeeRecord.total_employees() == before


def test_context_manager_tolerates_explicit_destroy():
    """Destroying inside the block does not decrement twice."""
    before = EmployeeRecord.total_employees()

    with EmployeeRecord("Ali Raza", 104, 52000.0, "HR") as record:
        record.destroy()

    assert EmployeeRecord.total_employees() == before


# Destroyed record tests


def test_double_destroy_raises():
    """CRITICAL: A record cannot be destroyed twice.

    Why: A second decrement would make the live-count undercount.
    """
    record = EmployeeRecord("Fatima Hassan", 103, 60000.0, "Finance")
    record.destroy()
    before = EmployeeRecord.total_employees()

    with pytest.raises(RecordDestroyedError, match="Fatima Hassan"):
        record.destroy()

    assert EmployeeRecord.total_employees() == before


@pytest.mark.parametrize(
    "operation",
    [
        lambda r: r.copy(),
        lambda r: r.display(),
        lambda r: r.update_name("x"),
        lambda r: r.update_salary(1.0),
        lambda r: setattr(r, "employee_id", 1),
    ],
    ids=["copy", "display", "update_name", "update_salary", "set_employee_id"],
)
def test_destroyed_record_rejects_use(operation):
    """Copying, rendering and mutating a destroyed record all raise."""
    record = EmployeeRecord("Fatima Hassan", 103, 60000.0, "Finance")
    record.destroy()

    with pytest.raises(RecordDestroyedError):
        operation(record)


# Rendering tests


def test_display_renders_all_fields(zain):
    """display() lists company, name, ID, department and salary."""
    assert zain.display() == "\n".join(
        [
            "--- Employee Details ---",
            f"Company: {EmployeeRecord.company_name}",
            "Name: Zain Malik",
            "ID: 105",
            "Department: IT",
            "Salary: $58000",
        ]
    )


def test_display_keeps_fractional_salary(scope):
    record = scope.enter_context(EmployeeRecord("Sara Ali", 102, 52500.5, "Marketing"))
    assert record.display().endswith("Salary: $52500.5")


def test_display_does_not_mutate(zain):
    """display() is read-only."""
    before = zain.to_dict()
    zain.display()
    assert zain.to_dict() == before


def test_company_info_needs_no_instance():
    """company_info() is available on the class itself."""
    info = EmployeeRecord.company_info()

    assert info.splitlines()[0] == "=== Company Information ==="
    assert f"Company: {EmployeeRecord.company_name}" in info
    assert f"Total Employees: {EmployeeRecord.total_employees()}" in info


def test_default_company_name():
    assert EmployeeRecord.company_name == "TechSolutions"


# Value comparison tests


def test_records_compare_by_value_and_are_unhashable(zain, scope):
    other = scope.enter_context(EmployeeRecord("Zain Malik", 105, 58000.0, "IT"))

    assert other == zain
    other.update_salary(1.0)
    assert other != zain
    with pytest.raises(TypeError):
        hash(zain)


def test_repr_marks_destroyed_records():
    record = EmployeeRecord("Hassan Ahmed", 107, 56000.0, "QA")
    assert "destroyed" not in repr(record)

    record.destroy()
    assert repr(record).endswith(", destroyed)")


# Input checking tests


def test_negative_salary_warns_but_is_stored(scope):
    """Negative salaries are accepted unchanged with a warning."""
    with pytest.warns(UserWarning, match="negative salary"):
        record = scope.enter_context(EmployeeRecord("Ahmed Khan", 101, -5.0, "Engineering"))
    assert record.salary == -5.0

    with pytest.warns(UserWarning, match="negative salary"):
        record.update_salary(-10.0)
    assert record.salary == -10.0


def test_regular_salary_does_not_warn(zain):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        zain.update_salary(70000.0)
