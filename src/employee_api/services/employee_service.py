# src/employee_api/services/employee_service.py
from __future__ import annotations

from typing import List, Optional

from employee_api.crud.base import EmployeeRepositoryProtocol
from employee_api.models.employee import Employee
from employee_api.schemas.employee import EmployeeCreate, EmployeeUpdate


class EmployeeService:
    """
    Business-logic layer for employees.

    There are no rules yet: every call goes straight to the repository.
    Validation or side effects belong here, not in the routes.
    """

    def __init__(self, repository: EmployeeRepositoryProtocol):
        self.repository = repository

    async def list(self) -> List[Employee]:
        return await self.repository.list()

    async def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return await self.repository.get_by_id(employee_id)

    async def add(self, data: EmployeeCreate) -> Employee:
        return await self.repository.add(data)

    async def update(self, data: EmployeeUpdate) -> Employee:
        return await self.repository.update(data)

    async def delete(self, employee_id: int) -> None:
        await self.repository.delete(employee_id)
