from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from ...attendance.aggregator import aggregate_attendance, working_days_in_month
from ...common.datetime_utils import now_local
from ...common.money import to_amount
from ...core.constants import DEFAULT_RATES, PayrollRates
from ..model import EmployeePayrollInput, PayrollCalculationOptions, PayrollCalculationResult
from . import formulas
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Batch payroll rule set.

    Pipeline: working days -> attendance -> pro-rated basic -> earnings ->
    statutory deductions (tax on annualized gross) -> leave deduction -> net.
    Stateless apart from the rates, so one instance can serve many threads.
    """

    def __init__(
        self,
        rates: PayrollRates = DEFAULT_RATES,
        *,
        today: Optional[Callable[[], date]] = None,
    ):
        super().__init__(rates)
        self._today = today or (lambda: now_local().date())

    def calculate(
        self,
        data: EmployeePayrollInput,
        options: PayrollCalculationOptions = PayrollCalculationOptions(),
    ) -> PayrollCalculationResult:
        working_days = working_days_in_month(data.month, data.year)

        present_days: float = working_days
        leave_days: float = 0
        overtime_hours: float = 0

        if options.include_attendance and data.attendance is not None:
            summary = aggregate_attendance(
                data.attendance,
                data.month,
                data.year,
                standard_hours=self.rates.standard_hours_per_day,
            )
            present_days = summary.present_days
            leave_days = summary.leave_days
            overtime_hours = summary.overtime_hours

        if options.pro_rate_for_mid_month_exit:
            basic_salary = formulas.prorate_basic_salary(
                data.basic_salary,
                present_days,
                working_days,
                today=self._today(),
                hire_date=data.hire_date,
                exit_date=data.exit_date,
            )
        else:
            basic_salary = to_amount(data.basic_salary)

        hra = formulas.calculate_hra(basic_salary, self.rates)
        variable_pay = (
            formulas.calculate_variable_pay(data.variable_pay_entries)
            if options.include_variable_pay and data.variable_pay_entries is not None
            else 0
        )
        overtime = formulas.calculate_overtime_pay(overtime_hours, basic_salary, working_days, self.rates)
        allowances = self.calculate_allowances(data)
        bonus = 0

        total_earnings = basic_salary + hra + variable_pay + overtime + allowances

        pf = esi = tax = insurance = 0
        if options.include_statutory_deductions:
            pf = formulas.calculate_pf(basic_salary, self.rates)
            esi = formulas.calculate_esi(basic_salary, self.rates)
            tax = formulas.calculate_tax(total_earnings, self.rates)
            insurance = self.calculate_insurance(basic_salary)

        leave_deduction = formulas.calculate_leave_deduction(leave_days, basic_salary, working_days)
        other_deductions = 0

        total_deductions = pf + esi + tax + insurance + leave_deduction + other_deductions

        return PayrollCalculationResult(
            basic_salary=basic_salary,
            hra=hra,
            variable_pay=variable_pay,
            overtime=overtime,
            bonus=bonus,
            allowances=allowances,
            total_earnings=total_earnings,
            pf=pf,
            esi=esi,
            tax=tax,
            insurance=insurance,
            leave_deduction=leave_deduction,
            other_deductions=other_deductions,
            total_deductions=total_deductions,
            net_salary=total_earnings - total_deductions,
            working_days=working_days,
            present_days=present_days,
            leave_days=leave_days,
        )

    def calculate_allowances(self, data: EmployeePayrollInput) -> float:
        """Per-employee allowances; none are configured yet."""
        return 0

    def calculate_insurance(self, basic_salary: float) -> float:
        """Per-employee insurance premium; none is configured yet."""
        return 0
