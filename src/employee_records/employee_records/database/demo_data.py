"""Demo dataset for offline use and local development.

Everything goes through the services, so generated IDs, counters and the
one-record-per-day rule behave exactly as they do for real requests.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import today_local
from ..common.logging import get_logger
from ..core.constants import DEFAULT_SEED_DAYS, DEFAULT_SEED_EMPLOYEES
from ..core.enums import AttendanceStatus, EmployeeStatus
from ..employees.model import EmployeeDraft

logger = get_logger(__name__)

FIRST_NAMES = ["Alice", "Bob", "Charlie", "Diana", "Ethan", "Fiona", "George", "Hannah", "Ian", "Julia"]
LAST_NAMES = ["Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Rodriguez", "Martinez"]
POSITIONS = [
    "Software Engineer",
    "Product Manager",
    "UX Designer",
    "Data Scientist",
    "Marketing Specialist",
    "HR Manager",
]
DEPARTMENTS = ["Engineering", "Product", "Design", "Data", "Marketing", "Human Resources"]


@dataclass(frozen=True)
class SeedResult:
    employees: int
    attendance: int
    skipped: bool = False


def demo_employee(i: int, *, today: date, rng: random.Random) -> EmployeeDraft:
    first = FIRST_NAMES[i % len(FIRST_NAMES)]
    last = LAST_NAMES[i % len(LAST_NAMES)]
    # Names repeat every ten employees; the suffix keeps emails unique.
    suffix = str(i // len(FIRST_NAMES)) if i >= len(FIRST_NAMES) else ""
    statuses = list(EmployeeStatus)

    return EmployeeDraft(
        name=f"{first} {last}",
        email=f"{first.lower()}.{last.lower()}{suffix}@corp.com",
        position=POSITIONS[i % len(POSITIONS)],
        department=DEPARTMENTS[i % len(DEPARTMENTS)],
        hire_date=today - timedelta(days=rng.randrange(1825)),
        salary=Decimal(50000 + rng.randrange(100000)),
        status=statuses[i % len(statuses)],
    )


def demo_attendance_status(rng: random.Random) -> Optional[AttendanceStatus]:
    """~80% present or late (90/10), ~10% absent, ~10% no record."""
    if rng.random() < 0.8:
        return AttendanceStatus.PRESENT if rng.random() < 0.9 else AttendanceStatus.LATE
    if rng.random() < 0.5:
        return AttendanceStatus.ABSENT
    return None


def seed_demo_data(
    container,
    *,
    employees: int = DEFAULT_SEED_EMPLOYEES,
    days: int = DEFAULT_SEED_DAYS,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> SeedResult:
    """Populate an empty store; a store that already holds employees is left alone."""

    if container.employee_service.get_all():
        logger.info("Store already has employees, skipping demo seed")
        return SeedResult(employees=0, attendance=0, skipped=True)

    rng = rng or random.Random()
    today = today or today_local()

    employee_ids = []
    for i in range(employees):
        created = container.employee_service.create(demo_employee(i, today=today, rng=rng))
        employee_ids.append(created.employee_id)

    attendance = 0
    for offset in range(days - 1, -1, -1):
        work_date = today - timedelta(days=offset)
        for employee_id in employee_ids:
            status = demo_attendance_status(rng)
            if status is None:
                continue
            container.attendance_service.record(employee_id=employee_id, work_date=work_date, status=status)
            attendance += 1

    logger.info("Seeded %d employees and %d attendance records", len(employee_ids), attendance)
    return SeedResult(employees=len(employee_ids), attendance=attendance)
