from __future__ import annotations

from datetime import date
from typing import Any, Sequence, Tuple

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.errors import DuplicateKeyError
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .model import AttendanceQuery, AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "attendance_id, employee_id, work_date, status, created_at, updated_at"


def build_attendance_where(query: AttendanceQuery) -> Tuple[str, list[Any]]:
    clauses: list[str] = []
    params: list[Any] = []
    if query.employee_ids is not None:
        if query.employee_ids:
            clause, ids = in_clause("employee_id", list(query.employee_ids))
            clauses.append(clause)
            params.extend(ids)
        else:
            clauses.append("1=0")
    if query.status is not None:
        clauses.append("status=%s")
        params.append(query.status.value)
    if query.work_date is not None:
        clauses.append("work_date=%s")
        params.append(query.work_date)

    where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
    return where, params


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=r["attendance_id"],
        employee_id=r["employee_id"],
        work_date=r["work_date"],
        status=AttendanceStatus(r["status"]),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_page(self, query: AttendanceQuery, *, skip: int, limit: int) -> Sequence[AttendanceRecord]:
        where, params = build_attendance_where(query)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                {where}
                ORDER BY work_date DESC, created_at DESC, row_id DESC
                LIMIT %s OFFSET %s
                """,
                tuple(params + [int(limit), int(skip)]),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def count(self, query: AttendanceQuery) -> int:
        where, params = build_attendance_where(query)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM attendance_records {where}", tuple(params))
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                ORDER BY work_date DESC, created_at DESC, row_id DESC
                """
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def upsert(
        self,
        *,
        attendance_id: str,
        employee_id: str,
        work_date: date,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            # Only the (employee_id, work_date) key may turn the insert into an update;
            # a clash on attendance_id leaves the other row untouched and is reported below.
            cur.execute(
                """
                INSERT INTO attendance_records(attendance_id, employee_id, work_date, status)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status = IF(
                    employee_id = VALUES(employee_id) AND work_date = VALUES(work_date),
                    VALUES(status),
                    status
                )
                """,
                (attendance_id, employee_id, work_date, status.value),
            )
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records WHERE employee_id=%s AND work_date=%s",
                (employee_id, work_date),
            )
            r = fetchone(cur)
            if not r:
                raise DuplicateKeyError(
                    f"Duplicate entry '{attendance_id}' for key 'attendance_id'", key="attendance_id"
                )
            return _row_to_record(r)
