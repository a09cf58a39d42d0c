from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    """Employment status stored with each employee."""

    ACTIVE = "Active"
    ON_LEAVE = "On Leave"
    TERMINATED = "Terminated"


class AttendanceStatus(str, Enum):
    """Daily attendance mark."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"


class StoreBackend(str, Enum):
    MYSQL = "mysql"
    MEMORY = "memory"
