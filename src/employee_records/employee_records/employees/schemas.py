from __future__ import annotations

from decimal import Decimal
from typing import Any

from ..common.datetime_utils import parse_iso_date, to_iso
from ..common.validators import require_enum, require_positive_amount
from ..core.enums import EmployeeStatus
from ..core.exceptions import ValidationError
from .model import Employee, EmployeeDraft


def _number(value: Decimal):
    return int(value) if value == value.to_integral_value() else float(value)


def employee_to_json(employee: Employee) -> dict:
    return {
        "id": employee.employee_id,
        "name": employee.name,
        "email": employee.email,
        "position": employee.position,
        "department": employee.department,
        "hireDate": to_iso(employee.hire_date),
        "salary": _number(employee.salary),
        "status": employee.status.value,
    }


def parse_employee_draft(payload: Any) -> EmployeeDraft:
    """Build a draft from the JSON body of a create/update request."""

    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    hire_date = payload.get("hireDate")
    if not hire_date:
        raise ValidationError("Hire date is required")

    return EmployeeDraft(
        name=payload.get("name") or "",
        email=payload.get("email") or "",
        position=payload.get("position") or "",
        department=payload.get("department") or "",
        hire_date=parse_iso_date(str(hire_date)),
        salary=require_positive_amount(payload.get("salary"), "Salary"),
        status=require_enum(EmployeeStatus, payload.get("status") or EmployeeStatus.ACTIVE.value, "Status"),
    )


def parse_employee(employee_id: str, payload: Any) -> Employee:
    draft = parse_employee_draft(payload)
    body_id = payload.get("id")
    if body_id and body_id != employee_id:
        raise ValidationError("Employee id cannot be changed")
    return Employee.from_draft(employee_id, draft)
