from __future__ import annotations

import threading
from dataclasses import replace
from datetime import date
from typing import Sequence

from ..common.datetime_utils import now_local
from ..core.enums import AttendanceStatus
from ..database.errors import DuplicateKeyError
from .model import AttendanceQuery, AttendanceRecord
from .repository import AttendanceRepository


def matches(record: AttendanceRecord, query: AttendanceQuery) -> bool:
    if query.employee_ids is not None and record.employee_id not in query.employee_ids:
        return False
    if query.status is not None and record.status != query.status:
        return False
    if query.work_date is not None and record.work_date != query.work_date:
        return False
    return True


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self) -> None:
        self._by_key: dict[tuple[str, date], AttendanceRecord] = {}
        self._seq: dict[str, int] = {}
        self._next_seq = 0
        self._lock = threading.Lock()

    def _sorted(self) -> list[AttendanceRecord]:
        return sorted(
            self._by_key.values(),
            key=lambda r: (r.work_date, self._seq[r.attendance_id]),
            reverse=True,
        )

    def find_page(self, query: AttendanceQuery, *, skip: int, limit: int) -> Sequence[AttendanceRecord]:
        with self._lock:
            rows = [r for r in self._sorted() if matches(r, query)]
        return rows[skip : skip + limit]

    def count(self, query: AttendanceQuery) -> int:
        with self._lock:
            return sum(1 for r in self._by_key.values() if matches(r, query))

    def list_all(self) -> Sequence[AttendanceRecord]:
        with self._lock:
            return self._sorted()

    def upsert(
        self,
        *,
        attendance_id: str,
        employee_id: str,
        work_date: date,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        key = (employee_id, work_date)
        with self._lock:
            existing = self._by_key.get(key)
            if existing is not None:
                updated = replace(existing, status=status, updated_at=now_local())
                self._by_key[key] = updated
                return updated

            if attendance_id in self._seq:
                raise DuplicateKeyError(
                    f"Duplicate entry '{attendance_id}' for key 'attendance_id'", key="attendance_id"
                )

            now = now_local()
            record = AttendanceRecord(
                attendance_id=attendance_id,
                employee_id=employee_id,
                work_date=work_date,
                status=status,
                created_at=now,
                updated_at=now,
            )
            self._next_seq += 1
            self._seq[attendance_id] = self._next_seq
            self._by_key[key] = record
            return record
