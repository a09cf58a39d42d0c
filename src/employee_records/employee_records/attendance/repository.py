from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceQuery, AttendanceRecord


class AttendanceRepository(Protocol):
    """Store contract for the `attendance` collection.

    Listings are sorted by work date descending, then creation order descending.
    """

    def find_page(self, query: AttendanceQuery, *, skip: int, limit: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def count(self, query: AttendanceQuery) -> int:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def upsert(
        self,
        *,
        attendance_id: str,
        employee_id: str,
        work_date: date,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        """Atomically insert, or overwrite the status of the (employee_id, work_date) record.

        `attendance_id` is only used when a new record is inserted.
        """

        raise NotImplementedError
