from __future__ import annotations

from collections import Counter
from dataclasses import replace
from datetime import date
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..attendance.service import AttendanceService
from ..common.datetime_utils import same_month, today_local
from ..core.enums import AttendanceStatus, EmployeeStatus
from ..employees.service import EmployeeService
from .model import AttendanceSummary, StatusCounts


def count_statuses(records: Iterable[AttendanceRecord]) -> StatusCounts:
    counts = Counter(r.status for r in records)
    return StatusCounts(
        present=counts[AttendanceStatus.PRESENT],
        absent=counts[AttendanceStatus.ABSENT],
        late=counts[AttendanceStatus.LATE],
    )


def summarize_attendance(records: Iterable[AttendanceRecord], *, today: date) -> AttendanceSummary:
    """Partition the full attendance set into today / this month and count by status.

    Pure: no store access, recomputed from a Get-all on every request.
    """

    records = list(records)
    return AttendanceSummary(
        as_of=today,
        today=count_statuses(r for r in records if r.work_date == today),
        month=count_statuses(r for r in records if same_month(r.work_date, today)),
    )


class DashboardService:
    def __init__(self, attendance: AttendanceService, employees: EmployeeService):
        self._attendance = attendance
        self._employees = employees

    def summary(self, *, today: Optional[date] = None) -> AttendanceSummary:
        today = today or today_local()
        base = summarize_attendance(self._attendance.get_all(), today=today)

        employees = self._employees.get_all()
        by_status = Counter(e.status for e in employees)
        return replace(
            base,
            total_employees=len(employees),
            employees_by_status={s.value: by_status[s] for s in EmployeeStatus},
        )
