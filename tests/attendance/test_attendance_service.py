from __future__ import annotations

from datetime import date

import pytest

from employee_records.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from employee_records.attendance.service import AttendanceService
from employee_records.core.enums import AttendanceStatus
from employee_records.core.exceptions import StoreUnavailable, ValidationError
from employee_records.database.errors import StoreConnectionError
from employee_records.employees.memory_employee_repository import InMemoryEmployeeRepository
from employee_records.identifiers.generator import IdentifierGenerator
from employee_records.identifiers.memory_counter_repository import InMemoryCounterRepository


class RecordingAttendanceRepository(InMemoryAttendanceRepository):
    def __init__(self) -> None:
        super().__init__()
        self.queries = []

    def find_page(self, query, *, skip, limit):
        self.queries.append(("find_page", query))
        return super().find_page(query, skip=skip, limit=limit)

    def count(self, query):
        self.queries.append(("count", query))
        return super().count(query)


class BrokenAttendanceRepository(InMemoryAttendanceRepository):
    def list_all(self):
        raise StoreConnectionError("connection refused")


@pytest.fixture
def alice(employee_service, make_draft):
    return employee_service.create(make_draft("Alice Smith"))


@pytest.fixture
def bob(employee_service, make_draft):
    return employee_service.create(make_draft("Bob Johnson"))


def test_first_record_gets_att_1(attendance_service, alice):
    record = attendance_service.record(employee_id=alice.employee_id, work_date="2024-01-15", status="Present")

    assert record.attendance_id == "ATT-1"
    assert record.work_date == date(2024, 1, 15)
    assert record.status == AttendanceStatus.PRESENT


def test_recording_same_day_twice_overwrites_status(attendance_service, alice):
    first = attendance_service.record(employee_id=alice.employee_id, work_date="2024-01-15", status="Present")
    second = attendance_service.record(employee_id=alice.employee_id, work_date="2024-01-15", status="Late")

    assert second.attendance_id == first.attendance_id
    assert second.status == AttendanceStatus.LATE

    all_records = attendance_service.get_all()
    assert len(all_records) == 1
    assert all_records[0].status == AttendanceStatus.LATE


def test_other_day_or_employee_creates_new_record(attendance_service, alice, bob):
    attendance_service.record(employee_id=alice.employee_id, work_date="2024-01-15", status="Present")
    attendance_service.record(employee_id=alice.employee_id, work_date="2024-01-16", status="Present")
    attendance_service.record(employee_id=bob.employee_id, work_date="2024-01-15", status="Absent")

    assert len(attendance_service.get_all()) == 3


def test_list_sorted_by_date_then_newest_first(attendance_service, alice, bob):
    attendance_service.record(employee_id=alice.employee_id, work_date="2024-01-14", status="Present")
    attendance_service.record(employee_id=alice.employee_id, work_date="2024-01-15", status="Present")
    attendance_service.record(employee_id=bob.employee_id, work_date="2024-01-15", status="Late")

    page = attendance_service.list_page(page=1, limit=10)

    assert [(r.employee_id, r.work_date.day) for r in page.data] == [
        (bob.employee_id, 15),
        (alice.employee_id, 15),
        (alice.employee_id, 14),
    ]
    assert page.total_count == 3


def test_name_filter_goes_through_employee_names(attendance_service, alice, bob):
    attendance_service.record(employee_id=alice.employee_id, work_date="2024-01-15", status="Present")
    attendance_service.record(employee_id=bob.employee_id, work_date="2024-01-15", status="Absent")

    page = attendance_service.list_page(page=1, limit=10, name_filter="alice")

    assert [r.employee_id for r in page.data] == [alice.employee_id]
    assert page.total_count == 1


def test_name_filter_does_not_match_raw_employee_id(attendance_service, alice):
    attendance_service.record(employee_id=alice.employee_id, work_date="2024-01-15", status="Present")

    page = attendance_service.list_page(page=1, limit=10, name_filter="EMP-1001")

    assert page.data == []
    assert page.total_count == 0


def test_empty_name_match_skips_attendance_query(make_draft):
    employees = InMemoryEmployeeRepository()
    attendance = RecordingAttendanceRepository()
    service = AttendanceService(attendance, employees, IdentifierGenerator(InMemoryCounterRepository()))
    employees.insert(make_draft("Alice Smith"), employee_id="EMP-1001")

    page = service.list_page(page=2, limit=5, name_filter="zzz")

    assert page.data == []
    assert page.total_count == 0
    assert (page.page, page.limit) == (2, 5)
    assert attendance.queries == []


def test_status_and_date_filters(attendance_service, alice, bob):
    attendance_service.record(employee_id=alice.employee_id, work_date="2024-01-14", status="Late")
    attendance_service.record(employee_id=alice.employee_id, work_date="2024-01-15", status="Present")
    attendance_service.record(employee_id=bob.employee_id, work_date="2024-01-15", status="Late")

    late = attendance_service.list_page(page=1, limit=10, status_filter=AttendanceStatus.LATE)
    on_day = attendance_service.list_page(page=1, limit=10, date_filter="2024-01-15")
    both = attendance_service.list_page(page=1, limit=10, status_filter="Late", date_filter=date(2024, 1, 15))

    assert late.total_count == 2
    assert on_day.total_count == 2
    assert [r.employee_id for r in both.data] == [bob.employee_id]


def test_blank_filters_mean_no_filter(attendance_service, alice):
    attendance_service.record(employee_id=alice.employee_id, work_date="2024-01-15", status="Present")

    page = attendance_service.list_page(page=1, limit=10, name_filter="  ", status_filter="", date_filter="")

    assert page.total_count == 1


def test_orphaned_records_survive_employee_delete(attendance_service, employee_service, alice):
    attendance_service.record(employee_id=alice.employee_id, work_date="2024-01-15", status="Present")
    employee_service.delete(alice.employee_id)

    page = attendance_service.list_page(page=1, limit=10)

    assert [r.employee_id for r in page.data] == [alice.employee_id]
    assert alice.employee_id not in employee_service.name_lookup()


@pytest.mark.parametrize(
    "employee_id,work_date,status",
    [
        ("", "2024-01-15", "Present"),
        ("EMP-1001", "", "Present"),
        ("EMP-1001", "15/01/2024", "Present"),
        ("EMP-1001", "2024-02-30", "Present"),
        ("EMP-1001", "2024-1-5", "Present"),
        ("EMP-1001", "2024-01-15", "Sick"),
    ],
)
def test_record_rejects_bad_input(attendance_service, employee_id, work_date, status):
    with pytest.raises(ValidationError):
        attendance_service.record(employee_id=employee_id, work_date=work_date, status=status)


def test_bad_date_filter_is_rejected(attendance_service):
    with pytest.raises(ValidationError):
        attendance_service.list_page(page=1, limit=10, date_filter="yesterday")


def test_store_outage_surfaces_as_store_unavailable():
    service = AttendanceService(
        BrokenAttendanceRepository(),
        InMemoryEmployeeRepository(),
        IdentifierGenerator(InMemoryCounterRepository()),
    )

    with pytest.raises(StoreUnavailable) as exc:
        service.get_all()
    assert str(exc.value) == "Failed to fetch all attendance"


def test_page_past_the_end_only_counts():
    attendance = RecordingAttendanceRepository()
    service = AttendanceService(
        attendance,
        InMemoryEmployeeRepository(),
        IdentifierGenerator(InMemoryCounterRepository()),
    )
    service.record(employee_id="EMP-1001", work_date="2024-01-15", status="Present")

    page = service.list_page(page=10**20, limit=10)

    assert page.data == []
    assert page.total_count == 1
    assert [name for name, _ in attendance.queries] == ["count"]


def test_record_rejects_overlong_employee_id(attendance_service):
    with pytest.raises(ValidationError):
        attendance_service.record(employee_id="EMP-" + "9" * 40, work_date="2024-01-15", status="Present")
