"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

EMPLOYEE_ID_PREFIX = "EMP"
EMPLOYEE_ID_BASE = 1001
ATTENDANCE_ID_PREFIX = "ATT"
ATTENDANCE_ID_BASE = 1

EMPLOYEE_COUNTER = "employee"
ATTENDANCE_COUNTER = "attendance"

DEFAULT_PAGE_SIZE = 10
DEFAULT_SEED_EMPLOYEES = 128
DEFAULT_SEED_DAYS = 30

# Column sizes in database/schema.sql; both stores enforce them.
TEXT_MAX_LENGTH = 200
EMAIL_MAX_LENGTH = 255
ID_MAX_LENGTH = 32
SALARY_PLACES = 2
SALARY_MAX = Decimal("999999999999.99")  # DECIMAL(14, 2)
