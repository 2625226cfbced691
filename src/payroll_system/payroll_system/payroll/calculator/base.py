from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.constants import DEFAULT_RATES, PayrollRates
from ..model import (
    EmployeePayrollInput,
    PayrollCalculationOptions,
    PayrollCalculationResult,
    ValidationOutcome,
)
from ..validator import validate_payroll_result


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    def __init__(self, rates: PayrollRates = DEFAULT_RATES):
        self.rates = rates

    @abstractmethod
    def calculate(
        self,
        data: EmployeePayrollInput,
        options: PayrollCalculationOptions = PayrollCalculationOptions(),
    ) -> PayrollCalculationResult:
        raise NotImplementedError

    def validate(self, result: PayrollCalculationResult) -> ValidationOutcome:
        return validate_payroll_result(result, self.rates)
