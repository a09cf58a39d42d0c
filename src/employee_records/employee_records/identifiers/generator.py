from __future__ import annotations

from ..core.constants import (
    ATTENDANCE_COUNTER,
    ATTENDANCE_ID_BASE,
    ATTENDANCE_ID_PREFIX,
    EMPLOYEE_COUNTER,
    EMPLOYEE_ID_BASE,
    EMPLOYEE_ID_PREFIX,
)
from .repository import CounterRepository


def format_id(prefix: str, base: int, sequence: int) -> str:
    """`sequence` is 1-based, so the first ID is `<prefix>-<base>`."""
    return f"{prefix}-{base + sequence - 1}"


class IdentifierGenerator:
    """Human-readable sequential IDs (EMP-1001, ATT-1) backed by atomic counters.

    IDs are never handed out twice, even after the record that held one is deleted.
    """

    def __init__(self, counters: CounterRepository):
        self._counters = counters

    def next_employee_id(self) -> str:
        return format_id(EMPLOYEE_ID_PREFIX, EMPLOYEE_ID_BASE, self._counters.next_value(EMPLOYEE_COUNTER))

    def next_attendance_id(self) -> str:
        return format_id(ATTENDANCE_ID_PREFIX, ATTENDANCE_ID_BASE, self._counters.next_value(ATTENDANCE_COUNTER))
