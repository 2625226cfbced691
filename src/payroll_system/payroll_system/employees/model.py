from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Union


@dataclass(frozen=True)
class Employee:
    employee_id: str
    employee_code: str
    first_name: str
    last_name: str
    salary: Union[int, float, Decimal]
    department: Optional[str] = None
    position: Optional[str] = None
    hire_date: Optional[date] = None
    exit_date: Optional[date] = None
    is_active: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
