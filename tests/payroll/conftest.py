from dataclasses import replace

import pytest

from src.payroll_system.payroll_system.payroll.model import PayrollCalculationResult


@pytest.fixture
def make_result():
    """Factory for a consistent result, with selected fields overridden."""

    def _make(**overrides) -> PayrollCalculationResult:
        base = PayrollCalculationResult(
            basic_salary=20000,
            hra=8000,
            variable_pay=0,
            overtime=0,
            bonus=0,
            allowances=0,
            total_earnings=28000,
            pf=1800,
            esi=150,
            tax=0,
            insurance=0,
            leave_deduction=0,
            other_deductions=0,
            total_deductions=1950,
            net_salary=26050,
            working_days=20,
            present_days=20,
            leave_days=0,
        )
        return replace(base, **overrides)

    return _make
