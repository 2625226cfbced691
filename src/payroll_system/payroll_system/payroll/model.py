from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional, Sequence, Union

from ..attendance.model import AttendanceRecord
from ..core.enums import PayrollStatus, VariablePayStatus, VariablePayType


@dataclass(frozen=True)
class VariablePayEntry:
    """Bonus/commission/incentive line submitted for one payroll month."""

    amount: Union[int, float, Decimal]
    status: VariablePayStatus
    type: VariablePayType = VariablePayType.OTHER
    description: str = ""
    employee_id: Optional[str] = None
    month: Optional[int] = None
    year: Optional[int] = None


@dataclass(frozen=True)
class EmployeePayrollInput:
    employee_id: str
    month: int
    year: int
    basic_salary: Union[int, float, Decimal]
    attendance: Optional[Sequence[AttendanceRecord]] = None
    variable_pay_entries: Optional[Sequence[VariablePayEntry]] = None
    hire_date: Optional[date] = None
    exit_date: Optional[date] = None


@dataclass(frozen=True)
class PayrollCalculationOptions:
    include_variable_pay: bool = True
    include_attendance: bool = True
    include_statutory_deductions: bool = True
    pro_rate_for_mid_month_exit: bool = True


@dataclass(frozen=True)
class PayrollCalculationResult:
    """Full earnings/deductions breakdown for one employee and month."""

    basic_salary: float
    hra: float
    variable_pay: float
    overtime: float
    bonus: float
    allowances: float
    total_earnings: float

    pf: float
    esi: float
    tax: float
    insurance: float
    leave_deduction: float
    other_deductions: float
    total_deductions: float

    net_salary: float

    working_days: int
    present_days: float
    leave_days: float

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ValidationOutcome:
    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class PayrollSummary:
    total_employees: int
    total_basic_salary: float
    total_earnings: float
    total_deductions: float
    total_net_salary: float
    total_pf: float
    total_esi: float
    total_tax: float
    average_salary: float


@dataclass(frozen=True)
class PayrollProcessRequest:
    month: int
    year: int
    employee_ids: Optional[Sequence[str]] = None
    include_variable_pay: bool = True
    include_attendance: bool = True
    include_statutory_deductions: bool = True
    pro_rate_for_mid_month_exit: bool = True

    def options(self) -> PayrollCalculationOptions:
        return PayrollCalculationOptions(
            include_variable_pay=self.include_variable_pay,
            include_attendance=self.include_attendance,
            include_statutory_deductions=self.include_statutory_deductions,
            pro_rate_for_mid_month_exit=self.pro_rate_for_mid_month_exit,
        )


@dataclass(frozen=True)
class PayrollRecord:
    """Headline payroll row persisted per (employee, month, year)."""

    employee_id: str
    month: int
    year: int
    basic_salary: float
    allowances: float
    deductions: float
    net_salary: float
    status: PayrollStatus = PayrollStatus.PROCESSED
    payroll_id: Optional[str] = None


@dataclass(frozen=True)
class PayrollInputRecord:
    """Detailed breakdown persisted next to the payroll record."""

    payroll_id: str
    employee_id: str
    month: int
    year: int
    result: PayrollCalculationResult
    processed_by: str
    processed_at: datetime
    status: PayrollStatus = PayrollStatus.PROCESSED


@dataclass(frozen=True)
class ProcessedEmployee:
    employee_id: str
    employee_name: str
    payroll_id: str
    result: PayrollCalculationResult
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProcessingError:
    employee_id: str
    employee_name: str
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class PayrollProcessingReport:
    month: int
    year: int
    total: int
    results: list[ProcessedEmployee] = field(default_factory=list)
    errors: list[ProcessingError] = field(default_factory=list)
    summary: Optional[PayrollSummary] = None

    @property
    def processed(self) -> int:
        return len(self.results)

    @property
    def message(self) -> str:
        return f"Payroll processed for {self.processed} employees. {len(self.errors)} errors encountered."


@dataclass(frozen=True)
class PayrollEstimate:
    """On-demand calculation returned without being persisted."""

    employee_id: str
    employee_name: str
    month: int
    year: int
    result: PayrollCalculationResult
    variable_pay_entries: tuple[VariablePayEntry, ...] = ()
    attendance: Optional[tuple[AttendanceRecord, ...]] = None
