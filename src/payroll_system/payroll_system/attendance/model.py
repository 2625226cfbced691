from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one day of attendance for an employee."""

    work_date: date
    status: AttendanceStatus
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    employee_id: Optional[str] = None


@dataclass(frozen=True)
class AttendanceSummary:
    """Attendance reduced to the three figures payroll needs."""

    present_days: float
    leave_days: float
    overtime_hours: float
