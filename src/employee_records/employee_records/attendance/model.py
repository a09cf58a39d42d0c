from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Tuple

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark per employee per day.

    `employee_id` is not checked against the employee collection; orphans are kept.
    """

    attendance_id: str
    employee_id: str
    work_date: date
    status: AttendanceStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class AttendanceQuery:
    """List filters. None means "no filter"; an empty `employee_ids` matches nothing."""

    employee_ids: Optional[Tuple[str, ...]] = None
    status: Optional[AttendanceStatus] = None
    work_date: Optional[date] = None
