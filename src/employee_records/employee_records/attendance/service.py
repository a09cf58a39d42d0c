from __future__ import annotations

from datetime import date
from typing import Optional, Union

from ..common.datetime_utils import parse_iso_date
from ..common.logging import get_logger
from ..common.pagination import Page, PageRequest
from ..common.validators import normalize_filter, optional_enum, require_enum, require_non_empty
from ..core.constants import ID_MAX_LENGTH
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..database.guard import store_operation
from ..employees.repository import EmployeeRepository
from ..identifiers.generator import IdentifierGenerator
from .model import AttendanceQuery, AttendanceRecord
from .repository import AttendanceRepository

logger = get_logger(__name__)


def _optional_date(value: Union[date, str, None]) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValidationError("Date must be a YYYY-MM-DD string")
    if not value.strip():
        return None
    return parse_iso_date(value)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        ids: IdentifierGenerator,
    ):
        self._attendance = attendance
        self._employees = employees
        self._ids = ids

    def list_page(
        self,
        *,
        page: int,
        limit: int,
        name_filter: Optional[str] = "",
        status_filter: Union[AttendanceStatus, str, None] = None,
        date_filter: Union[date, str, None] = None,
    ) -> Page[AttendanceRecord]:
        """One page of attendance records.

        The name filter matches the *employee's* name: matching employee IDs are
        resolved first, and when none match the result is empty without querying
        the attendance collection at all.
        """

        request = PageRequest(page=page, limit=limit)
        name = normalize_filter(name_filter)
        status = optional_enum(AttendanceStatus, status_filter, "Status")
        work_date = _optional_date(date_filter)

        with store_operation("fetch", "attendance page", logger=logger):
            employee_ids = None
            if name:
                employee_ids = tuple(self._employees.find_ids_by_name(name))
                if not employee_ids:
                    logger.debug("No employee matches name filter %r", name)
                    return Page.empty(request)

            query = AttendanceQuery(employee_ids=employee_ids, status=status, work_date=work_date)
            total_count = self._attendance.count(query)
            if request.skip >= total_count:
                return Page(data=[], total_count=total_count, page=request.page, limit=request.limit)
            remaining = min(request.limit, total_count - request.skip)
            data = list(self._attendance.find_page(query, skip=request.skip, limit=remaining))

        return Page(data=data, total_count=total_count, page=request.page, limit=request.limit)

    def get_all(self) -> list[AttendanceRecord]:
        with store_operation("fetch all", "attendance", logger=logger):
            return list(self._attendance.list_all())

    def record(
        self,
        *,
        employee_id: str,
        work_date: Union[date, str],
        status: Union[AttendanceStatus, str],
    ) -> AttendanceRecord:
        """Create the day's record, or overwrite its status when one already exists."""

        employee_id = require_non_empty(employee_id, "Employee", max_length=ID_MAX_LENGTH)
        work_date = _optional_date(work_date)
        if work_date is None:
            raise ValidationError("Date is required")
        status = require_enum(AttendanceStatus, status, "Status")

        with store_operation("add", "attendance", logger=logger):
            new_id = self._ids.next_attendance_id()
            record = self._attendance.upsert(
                attendance_id=new_id,
                employee_id=employee_id,
                work_date=work_date,
                status=status,
            )

        if record.attendance_id == new_id:
            logger.info("Recorded %s for %s on %s", status.value, employee_id, work_date)
        else:
            logger.info("Updated %s for %s on %s to %s", record.attendance_id, employee_id, work_date, status.value)
        return record
