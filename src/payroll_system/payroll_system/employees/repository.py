from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_active(self, employee_ids: Optional[Sequence[str]] = None) -> Sequence[Employee]:
        """Active employees, restricted to ``employee_ids`` when given."""

        raise NotImplementedError
