from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.enums import StoreBackend
from .dashboard.service import DashboardService
from .database.connection import DatabaseConnection, DBConfig
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .identifiers.generator import IdentifierGenerator
from .identifiers.memory_counter_repository import InMemoryCounterRepository
from .identifiers.mysql_counter_repository import MySQLCounterRepository
from .identifiers.repository import CounterRepository


@dataclass(frozen=True)
class Container:
    backend: StoreBackend

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    counters_repo: CounterRepository

    ids: IdentifierGenerator
    employee_service: EmployeeService
    attendance_service: AttendanceService
    dashboard_service: DashboardService

    conn: Optional[DatabaseConnection] = None


def _wire(
    backend: StoreBackend,
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    counters_repo: CounterRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    ids = IdentifierGenerator(counters_repo)
    employee_service = EmployeeService(employees_repo, ids)
    attendance_service = AttendanceService(attendance_repo, employees_repo, ids)
    dashboard_service = DashboardService(attendance_service, employee_service)

    return Container(
        backend=backend,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        counters_repo=counters_repo,
        ids=ids,
        employee_service=employee_service,
        attendance_service=attendance_service,
        dashboard_service=dashboard_service,
        conn=conn,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return _wire(
        StoreBackend.MYSQL,
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        counters_repo=MySQLCounterRepository(conn),
        conn=conn,
    )


def build_memory_container() -> Container:
    """Fresh, empty in-memory stores; nothing is shared between containers."""
    return _wire(
        StoreBackend.MEMORY,
        employees_repo=InMemoryEmployeeRepository(),
        attendance_repo=InMemoryAttendanceRepository(),
        counters_repo=InMemoryCounterRepository(),
    )
