from __future__ import annotations

import threading
from dataclasses import replace
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..database.errors import DuplicateKeyError
from .model import Employee, EmployeeDraft, EmployeeQuery
from .repository import EmployeeRepository


def matches(employee: Employee, query: EmployeeQuery) -> bool:
    if query.name_filter and query.name_filter.lower() not in employee.name.lower():
        return False
    if query.status is not None and employee.status != query.status:
        return False
    return True


class InMemoryEmployeeRepository(EmployeeRepository):
    """Process-local store used for tests and the offline demo mode."""

    def __init__(self) -> None:
        self._by_id: dict[str, Employee] = {}
        self._seq: dict[str, int] = {}
        self._next_seq = 0
        self._lock = threading.Lock()

    def _newest_first(self) -> list[Employee]:
        return sorted(self._by_id.values(), key=lambda e: self._seq[e.employee_id], reverse=True)

    def _check_email(self, email: str, *, owner: Optional[str] = None) -> None:
        for other in self._by_id.values():
            if other.email == email and other.employee_id != owner:
                raise DuplicateKeyError(f"Duplicate entry '{email}' for key 'email'", key="email")

    def find_page(self, query: EmployeeQuery, *, skip: int, limit: int) -> Sequence[Employee]:
        with self._lock:
            rows = [e for e in self._newest_first() if matches(e, query)]
        return rows[skip : skip + limit]

    def count(self, query: EmployeeQuery) -> int:
        with self._lock:
            return sum(1 for e in self._by_id.values() if matches(e, query))

    def list_all(self) -> Sequence[Employee]:
        with self._lock:
            return self._newest_first()

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            return self._by_id.get(employee_id)

    def find_ids_by_name(self, name_fragment: str) -> Sequence[str]:
        query = EmployeeQuery(name_filter=name_fragment)
        with self._lock:
            return [e.employee_id for e in self._by_id.values() if matches(e, query)]

    def insert(self, draft: EmployeeDraft, *, employee_id: str) -> Employee:
        with self._lock:
            if employee_id in self._by_id:
                raise DuplicateKeyError(
                    f"Duplicate entry '{employee_id}' for key 'employee_id'", key="employee_id"
                )
            self._check_email(draft.email)

            now = now_local()
            employee = Employee.from_draft(employee_id, draft, created_at=now, updated_at=now)
            self._next_seq += 1
            self._seq[employee_id] = self._next_seq
            self._by_id[employee_id] = employee
            return employee

    def update(self, employee: Employee) -> Optional[Employee]:
        with self._lock:
            current = self._by_id.get(employee.employee_id)
            if current is None:
                return None
            self._check_email(employee.email, owner=employee.employee_id)

            updated = replace(employee, created_at=current.created_at, updated_at=now_local())
            self._by_id[employee.employee_id] = updated
            return updated

    def delete_by_id(self, employee_id: str) -> bool:
        with self._lock:
            if self._by_id.pop(employee_id, None) is None:
                return False
            self._seq.pop(employee_id, None)
            return True
