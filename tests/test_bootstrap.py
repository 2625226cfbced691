from __future__ import annotations

from dataclasses import replace
from datetime import date
from types import SimpleNamespace

import pytest

from config import get_settings_module
from src.payroll_system.payroll_system.core.constants import DEFAULT_RATES
from src.payroll_system.payroll_system.main import bootstrap, rates_from_settings
from src.payroll_system.payroll_system.payroll.calculator import formulas
from src.payroll_system.payroll_system.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.payroll_system.payroll_system.payroll.model import EmployeePayrollInput
from src.payroll_system.payroll_system.payroll.service import PayrollProcessingService
from src.payroll_system.payroll_system.payroll.validator import validate_payroll_result


class Unused:
    """Repository stand-in; bootstrap only wires, it never queries storage."""


def full_month_result():
    data = EmployeePayrollInput(employee_id="emp-1", month=9, year=2025, basic_salary=50000)
    return StandardPayrollCalculator(today=lambda: date(2026, 10, 19)).calculate(data)


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("prod", "config.production"),
        ("testing", "config.testing"),
        ("anything-else", "config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_rates_from_settings_overrides_only_set_values():
    settings = SimpleNamespace(PAYROLL_MAX_PF_AMOUNT="2500", PAYROLL_HRA_RATE=None, PAYROLL_ESI_RATE="")

    rates = rates_from_settings(settings)

    assert rates.max_pf_amount == 2500
    assert rates.hra_rate == DEFAULT_RATES.hra_rate
    assert rates.esi_rate == DEFAULT_RATES.esi_rate


def test_whole_number_amount_settings_stay_integers():
    settings = SimpleNamespace(PAYROLL_MAX_PF_AMOUNT="2500", PAYROLL_ESI_SALARY_THRESHOLD="25000.0")

    rates = rates_from_settings(settings)
    pf = formulas.calculate_pf(50000, rates)
    warnings = validate_payroll_result(replace(full_month_result(), pf=3000), rates).warnings

    assert isinstance(rates.max_pf_amount, int)
    assert isinstance(rates.esi_salary_threshold, int)
    assert pf == 2500 and isinstance(pf, int)
    assert warnings == ("PF contribution (3000) exceeds maximum limit (2500)",)


def test_fractional_amount_settings_are_kept():
    rates = rates_from_settings(SimpleNamespace(PAYROLL_MAX_PF_AMOUNT="1800.5"))

    assert rates.max_pf_amount == 1800.5


def test_bootstrap_with_testing_settings():
    container = bootstrap(
        employees_repo=Unused(),
        attendance_repo=Unused(),
        variable_pay_repo=Unused(),
        payrolls_repo=Unused(),
        audit_log_repo=Unused(),
        settings_module="config.testing",
    )

    assert container.rates == DEFAULT_RATES
    assert container.calculator.rates is container.rates
    assert isinstance(container.processing_service, PayrollProcessingService)
