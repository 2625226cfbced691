from __future__ import annotations

import importlib
import logging
from dataclasses import replace
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .attendance.repository import AttendanceRepository
from .container import Container, build_container
from .core.constants import DEFAULT_RATES, PayrollRates
from .employees.repository import EmployeeRepository
from .payroll.repository import AuditLogRepository, PayrollRepository, VariablePayRepository

logger = logging.getLogger(__name__)

_RATE_SETTINGS = {
    "PAYROLL_PF_RATE": "pf_rate",
    "PAYROLL_ESI_RATE": "esi_rate",
    "PAYROLL_HRA_RATE": "hra_rate",
    "PAYROLL_MAX_PF_AMOUNT": "max_pf_amount",
    "PAYROLL_ESI_SALARY_THRESHOLD": "esi_salary_threshold",
}

# Whole currency amounts; results and messages show these without a decimal part.
_AMOUNT_FIELDS = {"max_pf_amount", "esi_salary_threshold"}


def rates_from_settings(settings: ModuleType) -> PayrollRates:
    overrides = {}
    for setting, field_name in _RATE_SETTINGS.items():
        value = getattr(settings, setting, None)
        if value in (None, ""):
            continue
        number = float(value)
        if field_name in _AMOUNT_FIELDS and number.is_integer():
            number = int(number)
        overrides[field_name] = number
    return replace(DEFAULT_RATES, **overrides)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def bootstrap(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    variable_pay_repo: VariablePayRepository,
    payrolls_repo: PayrollRepository,
    audit_log_repo: AuditLogRepository,
    settings_module: Optional[str] = None,
) -> Container:
    """Load settings (.env first), configure logging and wire the services.

    Storage is supplied by the caller; any object satisfying the repository
    protocols will do.
    """
    load_dotenv(override=False)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    rates = rates_from_settings(settings)
    if rates != DEFAULT_RATES:
        logger.info("Using payroll rate overrides from %s: %s", settings_module, rates)

    return build_container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        variable_pay_repo=variable_pay_repo,
        payrolls_repo=payrolls_repo,
        audit_log_repo=audit_log_repo,
        rates=rates,
    )
