from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class StatusCounts:
    present: int = 0
    absent: int = 0
    late: int = 0

    @property
    def total(self) -> int:
        return self.present + self.absent + self.late

    def as_dict(self) -> dict:
        return {"present": self.present, "absent": self.absent, "late": self.late}


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model for the dashboard cards."""

    as_of: date
    today: StatusCounts
    month: StatusCounts
    total_employees: int = 0
    employees_by_status: dict = field(default_factory=dict)
