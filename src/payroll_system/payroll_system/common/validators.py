from __future__ import annotations

from ..core.constants import MAX_PAYROLL_YEAR, MIN_PAYROLL_YEAR
from ..core.exceptions import ValidationError


def require_month(value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or not 1 <= value <= 12:
        raise ValidationError("Month must be between 1 and 12")
    return value


def require_year(value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError("Year must be an integer")
    if not MIN_PAYROLL_YEAR <= value <= MAX_PAYROLL_YEAR:
        raise ValidationError(f"Year must be between {MIN_PAYROLL_YEAR} and {MAX_PAYROLL_YEAR}")
    return value
