from __future__ import annotations

import calendar
from typing import Iterable

from ..common.datetime_utils import as_date, month_bounds
from ..core.constants import STANDARD_HOURS_PER_DAY
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord, AttendanceSummary


def working_days_in_month(month: int, year: int) -> int:
    """Count Monday-Friday days in the calendar month.

    Public holidays are not excluded; there is no holiday calendar.
    """
    if not 1 <= month <= 12:
        raise ValidationError("Month must be between 1 and 12")
    first_weekday, days_in_month = calendar.monthrange(year, month)
    return sum(1 for offset in range(days_in_month) if (first_weekday + offset) % 7 < 5)


def worked_hours(record: AttendanceRecord) -> float:
    if not record.check_in or not record.check_out:
        return 0.0
    return (record.check_out - record.check_in).total_seconds() / 3600


def aggregate_attendance(
    records: Iterable[AttendanceRecord],
    month: int,
    year: int,
    *,
    standard_hours: float = STANDARD_HOURS_PER_DAY,
) -> AttendanceSummary:
    """Reduce a month of attendance to present days, leave days and overtime hours.

    Records dated outside the month are skipped. LATE, HOLIDAY and other
    statuses count towards neither present nor leave days.
    """
    start, end = month_bounds(month, year)

    present_days = 0.0
    leave_days = 0.0
    overtime_hours = 0.0

    for record in records:
        if record.work_date is None or not start <= as_date(record.work_date) <= end:
            continue

        if record.status == AttendanceStatus.PRESENT:
            present_days += 1
            hours = worked_hours(record)
            if hours > standard_hours:
                overtime_hours += hours - standard_hours
        elif record.status == AttendanceStatus.ABSENT:
            leave_days += 1
        elif record.status == AttendanceStatus.HALF_DAY:
            present_days += 0.5
            leave_days += 0.5

    return AttendanceSummary(present_days=present_days, leave_days=leave_days, overtime_hours=overtime_hours)


def count_by_status(
    records: Iterable[AttendanceRecord],
    status: AttendanceStatus,
    month: int,
    year: int,
) -> int:
    """Number of in-month records with exactly this status."""
    start, end = month_bounds(month, year)
    return sum(
        1
        for r in records
        if r.work_date is not None and start <= as_date(r.work_date) <= end and r.status == status
    )
