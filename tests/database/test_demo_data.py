from __future__ import annotations

import random
from datetime import date

from employee_records.database.demo_data import demo_employee, seed_demo_data


def test_demo_emails_stay_unique_when_names_repeat():
    rng = random.Random(7)
    drafts = [demo_employee(i, today=date(2024, 1, 15), rng=rng) for i in range(25)]

    assert drafts[0].name == drafts[10].name
    assert len({d.email for d in drafts}) == 25


def test_seed_populates_empty_store(container):
    result = seed_demo_data(container, employees=12, days=3, today=date(2024, 1, 15), rng=random.Random(1))

    assert result.employees == 12
    assert not result.skipped
    assert len(container.employee_service.get_all()) == 12

    records = container.attendance_service.get_all()
    assert len(records) == result.attendance
    assert {r.work_date for r in records} <= {date(2024, 1, 13), date(2024, 1, 14), date(2024, 1, 15)}
    assert len({(r.employee_id, r.work_date) for r in records}) == len(records)


def test_seed_leaves_populated_store_alone(container, employee_service, make_draft):
    employee_service.create(make_draft("Alice Smith"))

    result = seed_demo_data(container, employees=5, days=2, today=date(2024, 1, 15))

    assert result.skipped
    assert len(employee_service.get_all()) == 1
