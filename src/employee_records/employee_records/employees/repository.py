from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeDraft, EmployeeQuery


class EmployeeRepository(Protocol):
    """Store contract for the `employees` collection.

    Note: services depend on this interface, never on a concrete database.
    Listing methods return employees newest-first (descending creation order).
    """

    def find_page(self, query: EmployeeQuery, *, skip: int, limit: int) -> Sequence[Employee]:
        raise NotImplementedError

    def count(self, query: EmployeeQuery) -> int:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def find_ids_by_name(self, name_fragment: str) -> Sequence[str]:
        raise NotImplementedError

    def insert(self, draft: EmployeeDraft, *, employee_id: str) -> Employee:
        raise NotImplementedError

    def update(self, employee: Employee) -> Optional[Employee]:
        """Replace every mutable field; None when no row has that ID."""

        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> bool:
        raise NotImplementedError
