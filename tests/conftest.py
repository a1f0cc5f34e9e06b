"""Shared test fixtures."""

import sys
from contextlib import ExitStack

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from emprecord import EmployeeRecord, InMemoryLifecycleLog


@pytest.fixture
def scope():
    """ExitStack that destroys every record entered into it at teardown.

    Keeps live-count assertions isolated between tests.
    """
    with ExitStack() as stack:
        yield stack


@pytest.fixture
def zain(scope):
    """The deep copy demonstration record."""
    return scope.enter_context(EmployeeRecord("Zain Malik", 105, 58000.0, "IT"))


@pytest.fixture
def lifecycle_log():
    """In-memory lifecycle log registered for the duration of one test."""
    log = InMemoryLifecycleLog()
    EmployeeRecord.add_observer(log)
    yield log
    EmployeeRecord.remove_observer(log)
