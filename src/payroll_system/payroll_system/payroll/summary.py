from __future__ import annotations

from typing import Iterable

from .model import PayrollCalculationResult, PayrollSummary


def generate_payroll_summary(results: Iterable[PayrollCalculationResult]) -> PayrollSummary:
    """Organization-level totals for a payroll period (reporting only)."""
    rows = list(results)
    total_employees = len(rows)
    total_net_salary = sum(r.net_salary for r in rows)

    return PayrollSummary(
        total_employees=total_employees,
        total_basic_salary=sum(r.basic_salary for r in rows),
        total_earnings=sum(r.total_earnings for r in rows),
        total_deductions=sum(r.total_deductions for r in rows),
        total_net_salary=total_net_salary,
        total_pf=sum(r.pf for r in rows),
        total_esi=sum(r.esi for r in rows),
        total_tax=sum(r.tax for r in rows),
        average_salary=total_net_salary / total_employees if total_employees else 0,
    )
