from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

import pytest

from employee_records.core.enums import EmployeeStatus
from employee_records.core.exceptions import ConflictError, NotFoundError, ValidationError


@pytest.fixture
def seed(employee_service, make_draft):
    def _seed(names):
        return [employee_service.create(make_draft(n)) for n in names]

    return _seed


def test_create_assigns_sequential_ids_from_1001(employee_service, seed):
    a, b = seed(["Alice Smith", "Bob Johnson"])

    assert a.employee_id == "EMP-1001"
    assert b.employee_id == "EMP-1002"
    assert a.created_at is not None


def test_ids_are_not_reused_after_delete(employee_service, seed, make_draft):
    a, _ = seed(["Alice Smith", "Bob Johnson"])
    employee_service.delete(a.employee_id)

    c = employee_service.create(make_draft("Charlie Williams"))

    assert c.employee_id == "EMP-1003"


def test_list_is_newest_first_and_windowed(employee_service, seed):
    names = [f"Person {i}" for i in range(7)]
    seed(names)

    first = employee_service.list_page(page=1, limit=3)
    third = employee_service.list_page(page=3, limit=3)

    assert [e.name for e in first.data] == ["Person 6", "Person 5", "Person 4"]
    assert [e.name for e in third.data] == ["Person 0"]
    assert first.total_count == third.total_count == 7


def test_page_beyond_data_is_empty_with_total(employee_service, seed):
    seed(["Alice Smith", "Bob Johnson"])

    page = employee_service.list_page(page=5, limit=10)

    assert page.data == []
    assert page.total_count == 2


def test_name_filter_is_case_insensitive_substring(employee_service, seed):
    seed(["Alice Smith", "Bob Johnson", "Malika Jones"])

    page = employee_service.list_page(page=1, limit=10, name_filter="ALI")

    assert sorted(e.name for e in page.data) == ["Alice Smith", "Malika Jones"]
    assert page.total_count == 2


def test_name_filter_treats_wildcards_literally(employee_service, seed):
    seed(["Alice Smith", "Bob_Johnson"])

    page = employee_service.list_page(page=1, limit=10, name_filter="_")

    assert [e.name for e in page.data] == ["Bob_Johnson"]


def test_status_filter_accepts_enum_or_value(employee_service, make_draft):
    employee_service.create(make_draft("Alice Smith"))
    employee_service.create(make_draft("Bob Johnson", status=EmployeeStatus.ON_LEAVE))

    by_enum = employee_service.list_page(page=1, limit=10, status_filter=EmployeeStatus.ON_LEAVE)
    by_value = employee_service.list_page(page=1, limit=10, status_filter="On Leave")
    no_filter = employee_service.list_page(page=1, limit=10, status_filter="")

    assert [e.name for e in by_enum.data] == ["Bob Johnson"]
    assert by_value == by_enum
    assert no_filter.total_count == 2


def test_unknown_status_filter_is_rejected(employee_service):
    with pytest.raises(ValidationError):
        employee_service.list_page(page=1, limit=10, status_filter="Retired")


@pytest.mark.parametrize("page,limit", [(0, 10), (1, 0), (-1, 5)])
def test_invalid_page_window_is_rejected(employee_service, page, limit):
    with pytest.raises(ValidationError):
        employee_service.list_page(page=page, limit=limit)


def test_same_query_twice_returns_identical_result(employee_service, seed):
    seed(["Alice Smith", "Bob Johnson", "Charlie Williams"])

    first = employee_service.list_page(page=1, limit=2, name_filter="i")
    second = employee_service.list_page(page=1, limit=2, name_filter="i")

    assert first == second


def test_create_rejects_bad_input(employee_service, make_draft):
    with pytest.raises(ValidationError):
        employee_service.create(make_draft("Alice Smith", salary=Decimal("0")))
    with pytest.raises(ValidationError):
        employee_service.create(make_draft("Alice Smith", email="not-an-email"))
    with pytest.raises(ValidationError):
        employee_service.create(make_draft("   "))


def test_duplicate_email_is_a_conflict(employee_service, make_draft):
    employee_service.create(make_draft("Alice Smith", email="a@corp.com"))

    with pytest.raises(ConflictError) as exc:
        employee_service.create(make_draft("Alice Twin", email="a@corp.com"))
    assert "email" in str(exc.value)


def test_update_replaces_mutable_fields(employee_service, make_draft):
    alice = employee_service.create(make_draft("Alice Smith"))

    updated = employee_service.update(
        replace(alice, position="Staff Engineer", salary=Decimal("99000"), status=EmployeeStatus.TERMINATED)
    )

    assert updated.employee_id == alice.employee_id
    assert updated.position == "Staff Engineer"
    assert updated.status == EmployeeStatus.TERMINATED
    assert employee_service.get(alice.employee_id) == updated


def test_terminated_employee_can_be_reactivated(employee_service, make_draft):
    alice = employee_service.create(make_draft("Alice Smith", status=EmployeeStatus.TERMINATED))

    updated = employee_service.update(replace(alice, status=EmployeeStatus.ACTIVE))

    assert updated.status == EmployeeStatus.ACTIVE


def test_update_missing_employee_raises_not_found(employee_service, make_draft):
    alice = employee_service.create(make_draft("Alice Smith"))

    with pytest.raises(NotFoundError):
        employee_service.update(replace(alice, employee_id="EMP-9999"))


def test_delete_removes_from_get_all(employee_service, seed):
    alice, bob = seed(["Alice Smith", "Bob Johnson"])

    employee_service.delete(alice.employee_id)

    assert [e.employee_id for e in employee_service.get_all()] == [bob.employee_id]


def test_delete_missing_employee_raises_not_found(employee_service):
    with pytest.raises(NotFoundError):
        employee_service.delete("EMP-4242")


def test_name_lookup_maps_ids_to_names(employee_service, seed):
    alice, bob = seed(["Alice Smith", "Bob Johnson"])

    assert employee_service.name_lookup() == {alice.employee_id: "Alice Smith", bob.employee_id: "Bob Johnson"}


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": "A" * 201},
        {"position": "P" * 201},
        {"department": "D" * 201},
        {"email": "a" * 250 + "@corp.com"},
        {"salary": Decimal("1000000000000")},
        {"salary": Decimal("0.004")},
    ],
)
def test_create_rejects_values_beyond_column_limits(employee_service, make_draft, overrides):
    with pytest.raises(ValidationError):
        employee_service.create(make_draft("Alice Smith", **overrides))
    assert employee_service.get_all() == []


def test_values_at_column_limits_are_accepted(employee_service, make_draft):
    employee = employee_service.create(
        make_draft("N" * 200, email="n@corp.com", salary=Decimal("999999999999.99"))
    )

    assert len(employee.name) == 200
    assert employee.salary == Decimal("999999999999.99")


def test_salary_is_rounded_to_cents(employee_service, make_draft):
    employee = employee_service.create(make_draft("Alice Smith", salary=Decimal("1234.565")))

    assert employee.salary == Decimal("1234.57")
    assert employee_service.get(employee.employee_id).salary == Decimal("1234.57")


def test_page_past_the_end_does_not_query_the_window(container, seed, monkeypatch):
    calls = []
    find_page = container.employees_repo.find_page

    def recording_find_page(query, *, skip, limit):
        calls.append((skip, limit))
        return find_page(query, skip=skip, limit=limit)

    monkeypatch.setattr(container.employees_repo, "find_page", recording_find_page)
    seed(["Alice Smith", "Bob Johnson", "Charlie Williams"])

    beyond = container.employee_service.list_page(page=10**20, limit=10)
    last = container.employee_service.list_page(page=2, limit=2)

    assert beyond.data == []
    assert beyond.total_count == 3
    assert beyond.page == 10**20
    assert [e.name for e in last.data] == ["Alice Smith"]
    assert calls == [(2, 1)]
