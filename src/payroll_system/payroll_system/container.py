from __future__ import annotations

from dataclasses import dataclass

from .attendance.repository import AttendanceRepository
from .core.constants import DEFAULT_RATES, PayrollRates
from .employees.repository import EmployeeRepository
from .payroll.calculator.estimator import OnDemandPayrollEstimator
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.repository import AuditLogRepository, PayrollRepository, VariablePayRepository
from .payroll.service import PayrollCalculationService, PayrollProcessingService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    variable_pay_repo: VariablePayRepository
    payrolls_repo: PayrollRepository
    audit_log_repo: AuditLogRepository

    rates: PayrollRates
    calculator: StandardPayrollCalculator
    estimator: OnDemandPayrollEstimator

    processing_service: PayrollProcessingService
    calculation_service: PayrollCalculationService


def build_container(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    variable_pay_repo: VariablePayRepository,
    payrolls_repo: PayrollRepository,
    audit_log_repo: AuditLogRepository,
    rates: PayrollRates = DEFAULT_RATES,
) -> Container:
    calculator = StandardPayrollCalculator(rates)
    estimator = OnDemandPayrollEstimator(rates)

    processing_service = PayrollProcessingService(
        employees_repo,
        attendance_repo,
        variable_pay_repo,
        payrolls_repo,
        audit_log_repo,
        calculator=calculator,
    )
    calculation_service = PayrollCalculationService(
        employees_repo,
        attendance_repo,
        variable_pay_repo,
        audit_log_repo,
        estimator=estimator,
    )

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        variable_pay_repo=variable_pay_repo,
        payrolls_repo=payrolls_repo,
        audit_log_repo=audit_log_repo,
        rates=rates,
        calculator=calculator,
        estimator=estimator,
        processing_service=processing_service,
        calculation_service=calculation_service,
    )
