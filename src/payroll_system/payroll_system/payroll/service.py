from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Union

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds, now_local
from ..common.validators import require_month, require_year
from ..core.enums import AuditAction, PayrollStatus
from ..core.exceptions import DomainError, NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.estimator import OnDemandPayrollEstimator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import (
    EmployeePayrollInput,
    PayrollEstimate,
    PayrollInputRecord,
    PayrollProcessingReport,
    PayrollProcessRequest,
    PayrollRecord,
    ProcessedEmployee,
    ProcessingError,
)
from .repository import AuditLogRepository, PayrollRepository, VariablePayRepository
from .summary import generate_payroll_summary

logger = logging.getLogger(__name__)


class PayrollProcessingService:
    """Batch payroll run: calculate, validate and persist one month for many employees."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        variable_pay: VariablePayRepository,
        payrolls: PayrollRepository,
        audit_log: AuditLogRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._variable_pay = variable_pay
        self._payrolls = payrolls
        self._audit_log = audit_log
        self._calculator = calculator or StandardPayrollCalculator()
        self._clock = clock or now_local

    def process(self, request: PayrollProcessRequest, *, performed_by: str) -> PayrollProcessingReport:
        month = require_month(request.month)
        year = require_year(request.year)

        employee_ids = list(request.employee_ids) if request.employee_ids else None
        employees = list(self._employees.list_active(employee_ids))
        if not employees:
            raise NotFoundError("No active employees found")

        logger.info("Processing payroll %02d/%d for %d employees", month, year, len(employees))

        results: list[ProcessedEmployee] = []
        errors: list[ProcessingError] = []
        for employee in employees:
            try:
                outcome = self._process_employee(employee, request, performed_by=performed_by)
            except (DomainError, ValueError, ArithmeticError) as exc:
                logger.exception("Error processing payroll for employee %s", employee.employee_id)
                errors.append(
                    ProcessingError(
                        employee_id=employee.employee_id,
                        employee_name=employee.full_name,
                        errors=(str(exc) or type(exc).__name__,),
                    )
                )
                continue

            if isinstance(outcome, ProcessingError):
                errors.append(outcome)
            else:
                results.append(outcome)

        report = PayrollProcessingReport(
            month=month,
            year=year,
            total=len(employees),
            results=results,
            errors=errors,
            summary=generate_payroll_summary(r.result for r in results),
        )
        logger.info(report.message)
        return report

    def _process_employee(
        self,
        employee: Employee,
        request: PayrollProcessRequest,
        *,
        performed_by: str,
    ) -> Union[ProcessedEmployee, ProcessingError]:
        data = load_payroll_input(
            employee,
            request.month,
            request.year,
            attendance=self._attendance if request.include_attendance else None,
            variable_pay=self._variable_pay if request.include_variable_pay else None,
        )

        result = self._calculator.calculate(data, request.options())
        validation = self._calculator.validate(result)
        if not validation.is_valid:
            logger.warning(
                "Payroll for employee %s failed validation: %s",
                employee.employee_id,
                "; ".join(validation.errors),
            )
            return ProcessingError(
                employee_id=employee.employee_id,
                employee_name=employee.full_name,
                errors=validation.errors,
                warnings=validation.warnings,
            )

        payroll_id = self._payrolls.upsert_payroll(
            PayrollRecord(
                employee_id=employee.employee_id,
                month=request.month,
                year=request.year,
                basic_salary=result.basic_salary,
                allowances=result.allowances,
                deductions=result.total_deductions,
                net_salary=result.net_salary,
                status=PayrollStatus.PROCESSED,
            )
        )
        self._payrolls.upsert_payroll_input(
            PayrollInputRecord(
                payroll_id=payroll_id,
                employee_id=employee.employee_id,
                month=request.month,
                year=request.year,
                result=result,
                processed_by=performed_by,
                processed_at=self._clock(),
            )
        )

        self._audit_log.record(
            action=AuditAction.PAYROLL_PROCESSED,
            employee_id=employee.employee_id,
            payroll_id=payroll_id,
            performed_by=performed_by,
            details={
                "month": request.month,
                "year": request.year,
                "calculation_result": result.as_dict(),
                "warnings": list(validation.warnings),
            },
        )
        return ProcessedEmployee(
            employee_id=employee.employee_id,
            employee_name=employee.full_name,
            payroll_id=payroll_id,
            result=result,
            warnings=validation.warnings,
        )


class PayrollCalculationService:
    """On-demand estimate for a single employee; only the audit log is written."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        variable_pay: VariablePayRepository,
        audit_log: AuditLogRepository,
        *,
        estimator: Optional[OnDemandPayrollEstimator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._variable_pay = variable_pay
        self._audit_log = audit_log
        self._estimator = estimator or OnDemandPayrollEstimator()

    def calculate(
        self,
        *,
        employee_id: str,
        month: int,
        year: int,
        performed_by: str,
        include_variable_pay: bool = True,
        include_attendance: bool = True,
    ) -> PayrollEstimate:
        require_month(month)
        require_year(year)

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")

        data = load_payroll_input(
            employee,
            month,
            year,
            attendance=self._attendance if include_attendance else None,
            variable_pay=self._variable_pay if include_variable_pay else None,
        )
        result = self._estimator.estimate(
            data,
            include_variable_pay=include_variable_pay,
            include_attendance=include_attendance,
        )

        estimate = PayrollEstimate(
            employee_id=employee.employee_id,
            employee_name=employee.full_name,
            month=month,
            year=year,
            result=result,
            variable_pay_entries=tuple(data.variable_pay_entries or ()),
            attendance=tuple(data.attendance) if include_attendance else None,
        )

        self._audit_log.record(
            action=AuditAction.PAYROLL_CALCULATED,
            employee_id=employee.employee_id,
            performed_by=performed_by,
            details={"month": month, "year": year, "calculation_result": result.as_dict()},
        )
        logger.debug("Calculated payroll estimate for employee %s (%02d/%d)", employee_id, month, year)
        return estimate


def load_payroll_input(
    employee: Employee,
    month: int,
    year: int,
    *,
    attendance: Optional[AttendanceRepository],
    variable_pay: Optional[VariablePayRepository],
) -> EmployeePayrollInput:
    """Fetch the month's attendance and approved variable pay for one employee.

    Passing ``None`` for a repository skips that source entirely.
    """
    records = None
    if attendance is not None:
        start, end = month_bounds(month, year)
        records = tuple(
            attendance.get_for_employee_between(employee_id=employee.employee_id, start_date=start, end_date=end)
        )

    entries = None
    if variable_pay is not None:
        entries = tuple(variable_pay.get_approved_for_period(employee_id=employee.employee_id, month=month, year=year))

    return EmployeePayrollInput(
        employee_id=employee.employee_id,
        month=month,
        year=year,
        basic_salary=employee.salary,
        attendance=records,
        variable_pay_entries=entries,
        hire_date=employee.hire_date,
        exit_date=employee.exit_date,
    )
