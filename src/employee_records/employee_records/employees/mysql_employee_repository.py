from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, escape_like, fetchall, fetchone, to_decimal
from .model import Employee, EmployeeDraft, EmployeeQuery
from .repository import EmployeeRepository

_COLUMNS = """
    employee_id, name, email, position, department, hire_date, salary, status, created_at, updated_at
"""


def build_employee_where(query: EmployeeQuery) -> Tuple[str, list[Any]]:
    clauses: list[str] = []
    params: list[Any] = []
    if query.name_filter:
        clauses.append("LOWER(name) LIKE %s")
        params.append(f"%{escape_like(query.name_filter.lower())}%")
    if query.status is not None:
        clauses.append("status=%s")
        params.append(query.status.value)

    where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
    return where, params


def _row_to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=r["employee_id"],
        name=r["name"],
        email=r["email"],
        position=r["position"],
        department=r["department"],
        hire_date=r["hire_date"],
        salary=to_decimal(r["salary"]),
        status=EmployeeStatus(r["status"]),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_page(self, query: EmployeeQuery, *, skip: int, limit: int) -> Sequence[Employee]:
        where, params = build_employee_where(query)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                {where}
                ORDER BY created_at DESC, row_id DESC
                LIMIT %s OFFSET %s
                """,
                tuple(params + [int(limit), int(skip)]),
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

    def count(self, query: EmployeeQuery) -> int:
        where, params = build_employee_where(query)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM employees {where}", tuple(params))
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY created_at DESC, row_id DESC")
            return [_row_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def find_ids_by_name(self, name_fragment: str) -> Sequence[str]:
        where, params = build_employee_where(EmployeeQuery(name_filter=name_fragment))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT employee_id FROM employees {where}", tuple(params))
            return [r["employee_id"] for r in fetchall(cur)]

    def insert(self, draft: EmployeeDraft, *, employee_id: str) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(employee_id, name, email, position, department, hire_date, salary, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    employee_id,
                    draft.name,
                    draft.email,
                    draft.position,
                    draft.department,
                    draft.hire_date,
                    draft.salary,
                    draft.status.value,
                ),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            return _row_to_employee(fetchone(cur))

    def update(self, employee: Employee) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET name=%s, email=%s, position=%s, department=%s, hire_date=%s, salary=%s, status=%s
                WHERE employee_id=%s
                """,
                (
                    employee.name,
                    employee.email,
                    employee.position,
                    employee.department,
                    employee.hire_date,
                    employee.salary,
                    employee.status.value,
                    employee.employee_id,
                ),
            )
            # rowcount is 0 for an unchanged row, so re-read to tell "missing" apart.
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee.employee_id,))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def delete_by_id(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0
