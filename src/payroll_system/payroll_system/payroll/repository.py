from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from ..core.enums import AuditAction
from .model import PayrollInputRecord, PayrollRecord, VariablePayEntry


class VariablePayRepository(Protocol):
    def get_approved_for_period(self, *, employee_id: str, month: int, year: int) -> Sequence[VariablePayEntry]:
        raise NotImplementedError


class PayrollRepository(Protocol):
    def upsert_payroll(self, record: PayrollRecord) -> str:
        """Create or replace the row keyed by (employee, month, year); returns its id."""

        raise NotImplementedError

    def upsert_payroll_input(self, record: PayrollInputRecord) -> None:
        raise NotImplementedError


class AuditLogRepository(Protocol):
    def record(
        self,
        *,
        action: AuditAction,
        employee_id: str,
        details: Mapping[str, Any],
        performed_by: str,
        payroll_id: Optional[str] = None,
    ) -> None:
        raise NotImplementedError
