from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

import pytest

from employee_records.container import build_memory_container
from employee_records.core.enums import EmployeeStatus
from employee_records.employees.model import EmployeeDraft


def build_draft(name: str = "Alice Smith", *, email: Optional[str] = None, **overrides) -> EmployeeDraft:
    fields = dict(
        name=name,
        email=email or f"{name.lower().replace(' ', '.')}@corp.com",
        position="Software Engineer",
        department="Engineering",
        hire_date=date(2023, 3, 1),
        salary=Decimal("85000"),
        status=EmployeeStatus.ACTIVE,
    )
    fields.update(overrides)
    return EmployeeDraft(**fields)


@pytest.fixture
def make_draft():
    return build_draft


@pytest.fixture
def container():
    return build_memory_container()


@pytest.fixture
def employee_service(container):
    return container.employee_service


@pytest.fixture
def attendance_service(container):
    return container.attendance_service


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 1, 15)


@pytest.fixture
def fixed_now(monkeypatch):
    """Pin the clock used for timestamps and the dashboard's default 'today'."""
    from employee_records.common import datetime_utils

    now = datetime(2024, 1, 15, 9, 0, 0)
    monkeypatch.setattr(datetime_utils, "now_local", lambda: now)
    return now
