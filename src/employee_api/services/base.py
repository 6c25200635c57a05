# src/employee_api/services/base.py
from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from employee_api.models.employee import Employee
from employee_api.schemas.employee import EmployeeCreate, EmployeeUpdate


# What the routes depend on; business rules plug in behind it.
@runtime_checkable
class EmployeeServiceProtocol(Protocol):
    async def list(self) -> List[Employee]: ...

    async def get_by_id(self, employee_id: int) -> Optional[Employee]: ...

    async def add(self, data: EmployeeCreate) -> Employee: ...

    async def update(self, data: EmployeeUpdate) -> Employee: ...

    async def delete(self, employee_id: int) -> None: ...
