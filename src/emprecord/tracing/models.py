"""Data models for record lifecycle tracing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class LifecycleKind(Enum):
    """Transition a record went through."""

    CREATED = "created"
    COPIED = "copied"
    DESTROYED = "destroyed"


@dataclass(frozen=True, slots=True)
class LifecycleEvent:
    """One lifecycle transition of an EmployeeRecord.

    Attributes:
        kind: Which transition happened.
        name: Record name at the time of the event. For COPIED this is the
            name of the source record.
        employee_id: Record employee ID at the time of the event.
        live_count: Live-count immediately after the transition.
        timestamp: Unix timestamp when the transition happened.

    Example:
        event = LifecycleEvent(
            kind=LifecycleKind.CREATED,
            name="Ahmed Khan",
            employee_id=101,
            live_count=1,
            timestamp=1704067200.0,
        )
    """

    kind: LifecycleKind
    name: str
    employee_id: int
    live_count: int
    timestamp: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "kind": self.kind.value,
            "name": self.name,
            "employee_id": self.employee_id,
            "live_count": self.live_count,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LifecycleEvent:
        """Create from dictionary (for deserialization)."""
        return cls(
            kind=LifecycleKind(data["kind"]),
            name=data["name"],
            employee_id=data["employee_id"],
            live_count=data["live_count"],
            timestamp=data["timestamp"],
        )
