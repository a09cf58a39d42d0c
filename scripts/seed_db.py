from __future__ import annotations

import argparse
import importlib
import random
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "employee_records"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from employee_records.common.logging import configure_logging
from employee_records.core.constants import DEFAULT_SEED_DAYS, DEFAULT_SEED_EMPLOYEES
from employee_records.database.demo_data import seed_demo_data
from employee_records.main import build_container_from_settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed demo employees and attendance")
    parser.add_argument("--employees", type=int, default=DEFAULT_SEED_EMPLOYEES)
    parser.add_argument("--days", type=int, default=DEFAULT_SEED_DAYS)
    parser.add_argument("--seed", type=int, default=None, help="random seed for a reproducible dataset")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container_from_settings(settings)
    result = seed_demo_data(container, employees=args.employees, days=args.days, rng=random.Random(args.seed))

    if result.skipped:
        print("SKIP: store already contains employees")
    else:
        print(f"OK: Seeded {result.employees} employees, {result.attendance} attendance records ({container.backend.value})")


if __name__ == "__main__":
    main()
