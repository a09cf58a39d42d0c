from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from ..core.constants import EMAIL_MAX_LENGTH, SALARY_MAX, SALARY_PLACES
from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def require_non_empty(value: Optional[str], field_name: str, *, max_length: Optional[int] = None) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    value = value.strip()
    if max_length is not None and len(value) > max_length:
        raise ValidationError(f"{field_name} must be at most {max_length} characters")
    return value


def require_email(value: Optional[str], field_name: str = "Email") -> str:
    value = require_non_empty(value, field_name, max_length=EMAIL_MAX_LENGTH)
    if not EMAIL_PATTERN.match(value):
        raise ValidationError(f"{field_name} is not valid")
    return value


def require_positive_amount(
    value: Any,
    field_name: str,
    *,
    places: int = SALARY_PLACES,
    maximum: Decimal = SALARY_MAX,
) -> Decimal:
    """Positive decimal rounded half-up to `places`, no larger than `maximum`."""
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a positive number")
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a positive number")
    if not amount.is_finite() or amount <= 0:
        raise ValidationError(f"{field_name} must be a positive number")
    if amount > maximum:
        raise ValidationError(f"{field_name} must be at most {maximum}")

    amount = amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    if amount <= 0:
        raise ValidationError(f"{field_name} must be a positive number")
    return amount


def require_enum(enum_cls: Type[E], value: Any, field_name: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")


def optional_enum(enum_cls: Type[E], value: Any, field_name: str) -> Optional[E]:
    """Empty string and None mean "no filter"."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, str):
        value = value.strip()
    return require_enum(enum_cls, value, field_name)


def normalize_filter(value: Optional[str]) -> str:
    return value.strip() if value else ""
