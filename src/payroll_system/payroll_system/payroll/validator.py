from __future__ import annotations

from ..common.money import round_half_up
from ..core.constants import DEFAULT_RATES, PayrollRates
from .model import PayrollCalculationResult, ValidationOutcome


def validate_payroll_result(
    result: PayrollCalculationResult,
    rates: PayrollRates = DEFAULT_RATES,
) -> ValidationOutcome:
    """Check a calculated payroll for internal consistency.

    Errors make the result unusable; warnings are informational. All checks
    run, so a result can carry several errors at once.
    """
    errors: list[str] = []
    warnings: list[str] = []

    if result.basic_salary < 0:
        errors.append("Basic salary cannot be negative")
    if result.total_earnings < 0:
        errors.append("Total earnings cannot be negative")
    if result.total_deductions < 0:
        errors.append("Total deductions cannot be negative")
    if result.net_salary < 0:
        errors.append("Net salary cannot be negative")

    if result.pf > rates.max_pf_amount:
        warnings.append(f"PF contribution ({result.pf}) exceeds maximum limit ({rates.max_pf_amount})")

    if result.present_days > result.working_days:
        errors.append("Present days cannot exceed working days")
    if result.leave_days > result.working_days:
        errors.append("Leave days cannot exceed working days")

    # Upstream manual overrides show up as HRA drift.
    expected_hra = round_half_up(result.basic_salary * rates.hra_rate)
    if abs(result.hra - expected_hra) > 1:
        warnings.append(f"HRA calculation may be incorrect. Expected: {expected_hra}, Actual: {result.hra}")

    return ValidationOutcome(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))
