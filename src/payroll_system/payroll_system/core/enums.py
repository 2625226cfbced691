from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance status as stored by the attendance module."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"
    HALF_DAY = "HALF_DAY"
    HOLIDAY = "HOLIDAY"


class VariablePayStatus(str, Enum):
    """Approval workflow state of a variable-pay entry."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class VariablePayType(str, Enum):
    PERFORMANCE_BONUS = "PERFORMANCE_BONUS"
    COMMISSION = "COMMISSION"
    OVERTIME = "OVERTIME"
    INCENTIVE = "INCENTIVE"
    ARREARS = "ARREARS"
    RETROACTIVE = "RETROACTIVE"
    OTHER = "OTHER"


class PayrollStatus(str, Enum):
    PENDING = "PENDING"
    PROCESSED = "PROCESSED"
    PAID = "PAID"
    FINALIZED = "FINALIZED"


class AuditAction(str, Enum):
    PAYROLL_PROCESSED = "PAYROLL_PROCESSED"
    PAYROLL_CALCULATED = "PAYROLL_CALCULATED"
