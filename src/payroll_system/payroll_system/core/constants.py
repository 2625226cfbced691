"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from __future__ import annotations

from dataclasses import dataclass

PF_RATE = 0.12
ESI_RATE = 0.0075
HRA_RATE = 0.4
MAX_PF_AMOUNT = 1800
ESI_SALARY_THRESHOLD = 21000

STANDARD_HOURS_PER_DAY = 8
OVERTIME_MULTIPLIER = 1.5

# (upper bound of annual income, base tax at the previous bound, marginal rate)
TAX_BRACKETS: tuple[tuple[float, float, float], ...] = (
    (250_000, 0, 0.0),
    (500_000, 0, 0.05),
    (1_000_000, 12_500, 0.20),
    (float("inf"), 112_500, 0.30),
)

MIN_PAYROLL_YEAR = 2020
MAX_PAYROLL_YEAR = 2030


@dataclass(frozen=True)
class PayrollRates:
    """Statutory rates and caps used by the calculators."""

    pf_rate: float = PF_RATE
    esi_rate: float = ESI_RATE
    hra_rate: float = HRA_RATE
    max_pf_amount: float = MAX_PF_AMOUNT
    esi_salary_threshold: float = ESI_SALARY_THRESHOLD
    standard_hours_per_day: float = STANDARD_HOURS_PER_DAY
    overtime_multiplier: float = OVERTIME_MULTIPLIER
    tax_brackets: tuple[tuple[float, float, float], ...] = TAX_BRACKETS


DEFAULT_RATES = PayrollRates()
