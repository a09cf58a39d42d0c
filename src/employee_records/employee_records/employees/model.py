from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class EmployeeDraft:
    """Fields supplied by the caller when creating an employee (no ID yet)."""

    name: str
    email: str
    position: str
    department: str
    hire_date: date
    salary: Decimal
    status: EmployeeStatus = EmployeeStatus.ACTIVE


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    `employee_id` is immutable; everything else is replaced by an update.
    """

    employee_id: str
    name: str
    email: str
    position: str
    department: str
    hire_date: date
    salary: Decimal
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_draft(cls, employee_id: str, draft: EmployeeDraft, **timestamps) -> "Employee":
        return cls(
            employee_id=employee_id,
            name=draft.name,
            email=draft.email,
            position=draft.position,
            department=draft.department,
            hire_date=draft.hire_date,
            salary=draft.salary,
            status=draft.status,
            **timestamps,
        )


@dataclass(frozen=True)
class EmployeeQuery:
    """List filters. An empty name or a None status means "no filter"."""

    name_filter: str = ""
    status: Optional[EmployeeStatus] = None
