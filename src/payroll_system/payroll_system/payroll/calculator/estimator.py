from __future__ import annotations

from ...attendance.aggregator import count_by_status, working_days_in_month
from ...common.money import round_half_up, to_amount
from ...core.constants import DEFAULT_RATES, PayrollRates
from ...core.enums import AttendanceStatus
from ..model import EmployeePayrollInput, PayrollCalculationResult
from . import formulas


class OnDemandPayrollEstimator:
    """Quick single-employee estimate behind the "calculate" action.

    This rule set differs from :class:`StandardPayrollCalculator`:

    * only PRESENT/ABSENT records are counted (no half days, no overtime);
    * PF has no cap and ESI has no salary threshold;
    * tax brackets apply to the monthly gross (:func:`formulas.calculate_monthly_tax`);
    * the leave deduction is taken from the nominal, not pro-rated, salary.
    """

    def __init__(self, rates: PayrollRates = DEFAULT_RATES):
        self.rates = rates

    def estimate(
        self,
        data: EmployeePayrollInput,
        *,
        include_variable_pay: bool = True,
        include_attendance: bool = True,
    ) -> PayrollCalculationResult:
        working_days = working_days_in_month(data.month, data.year)

        present_days = 0
        leave_days = 0
        if include_attendance:
            records = tuple(data.attendance or ())
            present_days = count_by_status(records, AttendanceStatus.PRESENT, data.month, data.year)
            leave_days = count_by_status(records, AttendanceStatus.ABSENT, data.month, data.year)

        variable_pay = 0
        if include_variable_pay:
            variable_pay = formulas.calculate_variable_pay(data.variable_pay_entries or ())

        nominal = to_amount(data.basic_salary)
        basic_salary = round_half_up(nominal / working_days * present_days) if working_days else 0

        hra = round_half_up(basic_salary * self.rates.hra_rate)
        pf = round_half_up(basic_salary * self.rates.pf_rate)
        esi = round_half_up(basic_salary * self.rates.esi_rate)

        total_earnings = basic_salary + hra + variable_pay
        tax = formulas.calculate_monthly_tax(total_earnings, self.rates)
        leave_deduction = formulas.calculate_leave_deduction(leave_days, nominal, working_days)

        total_deductions = pf + esi + tax + leave_deduction

        return PayrollCalculationResult(
            basic_salary=basic_salary,
            hra=hra,
            variable_pay=variable_pay,
            overtime=0,
            bonus=0,
            allowances=0,
            total_earnings=total_earnings,
            pf=pf,
            esi=esi,
            tax=tax,
            insurance=0,
            leave_deduction=leave_deduction,
            other_deductions=0,
            total_deductions=total_deductions,
            net_salary=total_earnings - total_deductions,
            working_days=working_days,
            present_days=present_days,
            leave_days=leave_days,
        )
