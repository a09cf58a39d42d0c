from __future__ import annotations

from dataclasses import replace
from typing import Optional, Union

from ..common.logging import get_logger
from ..common.pagination import Page, PageRequest
from ..common.validators import (
    normalize_filter,
    optional_enum,
    require_email,
    require_non_empty,
    require_positive_amount,
)
from ..core.constants import TEXT_MAX_LENGTH
from ..core.enums import EmployeeStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..database.guard import store_operation
from ..identifiers.generator import IdentifierGenerator
from .model import Employee, EmployeeDraft, EmployeeQuery
from .repository import EmployeeRepository

logger = get_logger(__name__)


def _clean(draft):
    """Trim and check the caller-supplied fields shared by drafts and employees."""

    if draft.hire_date is None:
        raise ValidationError("Hire date is required")
    if not isinstance(draft.status, EmployeeStatus):
        raise ValidationError("Status is not valid")
    return replace(
        draft,
        name=require_non_empty(draft.name, "Name", max_length=TEXT_MAX_LENGTH),
        email=require_email(draft.email),
        position=require_non_empty(draft.position, "Position", max_length=TEXT_MAX_LENGTH),
        department=require_non_empty(draft.department, "Department", max_length=TEXT_MAX_LENGTH),
        salary=require_positive_amount(draft.salary, "Salary"),
    )


class EmployeeService:
    """Use cases over the employee collection: list, get-all, create, update, delete."""

    def __init__(self, employees: EmployeeRepository, ids: IdentifierGenerator):
        self._employees = employees
        self._ids = ids

    def list_page(
        self,
        *,
        page: int,
        limit: int,
        name_filter: Optional[str] = "",
        status_filter: Union[EmployeeStatus, str, None] = None,
    ) -> Page[Employee]:
        request = PageRequest(page=page, limit=limit)
        query = EmployeeQuery(
            name_filter=normalize_filter(name_filter),
            status=optional_enum(EmployeeStatus, status_filter, "Status"),
        )
        logger.debug("Listing employees page=%s limit=%s query=%s", request.page, request.limit, query)

        with store_operation("fetch", "employees", logger=logger):
            total_count = self._employees.count(query)
            if request.skip >= total_count:
                return Page(data=[], total_count=total_count, page=request.page, limit=request.limit)
            remaining = min(request.limit, total_count - request.skip)
            data = list(self._employees.find_page(query, skip=request.skip, limit=remaining))

        return Page(data=data, total_count=total_count, page=request.page, limit=request.limit)

    def get_all(self) -> list[Employee]:
        with store_operation("fetch all", "employees", logger=logger):
            return list(self._employees.list_all())

    def get(self, employee_id: str) -> Employee:
        with store_operation("fetch", "employee", logger=logger):
            employee = self._employees.get_by_id(employee_id)
        if employee is None:
            raise NotFoundError("Employee not found")
        return employee

    def name_lookup(self) -> dict[str, str]:
        """employeeId -> name, for presenting attendance rows."""
        return {e.employee_id: e.name for e in self.get_all()}

    def create(self, draft: EmployeeDraft) -> Employee:
        draft = _clean(draft)
        with store_operation("create", "employee", logger=logger):
            employee_id = self._ids.next_employee_id()
            employee = self._employees.insert(draft, employee_id=employee_id)

        logger.info("Created employee %s", employee.employee_id)
        return employee

    def update(self, employee: Employee) -> Employee:
        employee = _clean(employee)
        with store_operation("update", "employee", logger=logger):
            updated = self._employees.update(employee)

        if updated is None:
            raise NotFoundError("Employee not found")
        logger.info("Updated employee %s", updated.employee_id)
        return updated

    def delete(self, employee_id: str) -> None:
        with store_operation("delete", "employee", logger=logger):
            removed = self._employees.delete_by_id(employee_id)

        if not removed:
            raise NotFoundError("Employee not found")
        logger.info("Deleted employee %s", employee_id)
