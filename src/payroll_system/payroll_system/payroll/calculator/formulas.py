"""Statutory and earnings formulas.

Every monetary formula rounds to a whole currency unit on its own, before the
figures are summed into totals. Totals computed from rounded parts are what
the historical payroll records hold, so the rounding points must not move.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ...common.money import Number, round_half_up, to_amount
from ...core.constants import DEFAULT_RATES, PayrollRates
from ...core.enums import VariablePayStatus
from ..model import VariablePayEntry


def prorate_basic_salary(
    basic_salary: Number,
    present_days: float,
    working_days: int,
    *,
    today: date,
    hire_date: Optional[date] = None,
    exit_date: Optional[date] = None,
) -> int:
    """Effective basic salary for the month.

    First matching rule wins: joined this month, left this month, otherwise
    attendance. "This month" is the month of ``today``, not the payroll month.
    """
    if working_days == 0:
        return 0

    daily = to_amount(basic_salary) / working_days

    if hire_date and (hire_date.month, hire_date.year) == (today.month, today.year):
        days_from_hire = max(0, working_days - hire_date.day + 1)
        return round_half_up(daily * days_from_hire)

    if exit_date and (exit_date.month, exit_date.year) == (today.month, today.year):
        return round_half_up(daily * exit_date.day)

    return round_half_up(daily * present_days)


def calculate_hra(basic_salary: Number, rates: PayrollRates = DEFAULT_RATES) -> int:
    return round_half_up(to_amount(basic_salary) * rates.hra_rate)


def calculate_pf(basic_salary: Number, rates: PayrollRates = DEFAULT_RATES) -> int:
    return min(round_half_up(to_amount(basic_salary) * rates.pf_rate), rates.max_pf_amount)


def calculate_esi(basic_salary: Number, rates: PayrollRates = DEFAULT_RATES) -> int:
    """Employee State Insurance; exempt above the salary threshold."""
    basic = to_amount(basic_salary)
    if basic > rates.esi_salary_threshold:
        return 0
    return round_half_up(basic * rates.esi_rate)


def calculate_overtime_pay(
    overtime_hours: float,
    basic_salary: Number,
    working_days: int,
    rates: PayrollRates = DEFAULT_RATES,
) -> int:
    if overtime_hours <= 0 or working_days == 0:
        return 0
    hourly_rate = to_amount(basic_salary) / (working_days * rates.standard_hours_per_day)
    return round_half_up(overtime_hours * hourly_rate * rates.overtime_multiplier)


def calculate_variable_pay(entries: Iterable[VariablePayEntry]) -> float:
    """Sum of approved entries; pending and rejected ones are ignored."""
    total = 0
    for entry in entries:
        if entry.status == VariablePayStatus.APPROVED:
            total += to_amount(entry.amount)
    return total


def calculate_leave_deduction(leave_days: float, basic_salary: Number, working_days: int) -> int:
    if leave_days <= 0 or working_days == 0:
        return 0
    return round_half_up(to_amount(basic_salary) / working_days * leave_days)


def _bracket_tax(income: float, rates: PayrollRates) -> float:
    lower = 0.0
    for upper, base, rate in rates.tax_brackets:
        if income <= upper:
            if rate == 0:
                return 0
            return base + (income - lower) * rate
        lower = upper
    return 0


def calculate_tax(gross_salary: Number, rates: PayrollRates = DEFAULT_RATES) -> int:
    """Monthly income tax from the annualized gross (batch processing)."""
    annual = to_amount(gross_salary) * 12
    return round_half_up(_bracket_tax(annual, rates) / 12)


def calculate_monthly_tax(gross_salary: Number, rates: PayrollRates = DEFAULT_RATES) -> int:
    """Income tax with the annual brackets applied to the monthly gross as is.

    Used by on-demand estimates. It disagrees with :func:`calculate_tax` for
    the same gross; both are kept until the business settles on one.
    """
    return round_half_up(_bracket_tax(to_amount(gross_salary), rates))
