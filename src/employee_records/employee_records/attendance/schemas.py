from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.datetime_utils import to_iso
from ..core.exceptions import ValidationError
from .model import AttendanceRecord


def attendance_to_json(record: AttendanceRecord, names: Optional[Mapping[str, str]] = None) -> dict:
    out = {
        "id": record.attendance_id,
        "employeeId": record.employee_id,
        "date": to_iso(record.work_date),
        "status": record.status.value,
    }
    if names is not None:
        # Orphaned references (deleted employees) have no name.
        out["employeeName"] = names.get(record.employee_id)
    return out


def parse_attendance_payload(payload: Any) -> dict:
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return {
        "employee_id": payload.get("employeeId") or "",
        "work_date": payload.get("date") or "",
        "status": payload.get("status") or "",
    }
