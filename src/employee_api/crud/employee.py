# src/employee_api/crud/employee.py
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.models.employee import Employee
from employee_api.schemas.employee import EmployeeCreate, EmployeeUpdate
from employee_api.utils.exceptions import EmployeeNotFoundError, StorageError
from employee_api.utils.timezone import utcnow_naive

logger = logging.getLogger(__name__)


class EmployeeRepository:
    """
    Single-table CRUD for ``employees``.

    The session is handed in by the caller (one per request); every write
    commits before returning and rolls back on failure.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    # -------------------------
    # Reads
    # -------------------------
    async def list(self) -> List[Employee]:
        res = await self.db.execute(select(Employee).order_by(Employee.id))
        return list(res.scalars().all())

    async def get_by_id(self, employee_id: int) -> Optional[Employee]:
        res = await self.db.execute(select(Employee).where(Employee.id == employee_id))
        return res.scalar_one_or_none()

    # -------------------------
    # Create / Update / Delete
    # -------------------------
    async def add(self, data: EmployeeCreate) -> Employee:
        row = Employee(
            full_name=data.full_name,
            email=data.email,
            department=data.department,
            hire_date=data.hire_date or utcnow_naive(),
        )
        self.db.add(row)
        await self._commit("add")
        await self.db.refresh(row)
        logger.info("Employee created: id=%s", row.id)
        return row

    async def update(self, data: EmployeeUpdate) -> Employee:
        row = await self.get_by_id(data.id)
        if row is None:
            raise EmployeeNotFoundError(data.id)

        row.full_name = data.full_name
        row.email = data.email
        row.department = data.department
        # omitted HireDate keeps the stored one
        if data.hire_date is not None:
            row.hire_date = data.hire_date

        await self._commit("update")
        await self.db.refresh(row)
        logger.info("Employee updated: id=%s", row.id)
        return row

    async def delete(self, employee_id: int) -> None:
        res = await self.db.execute(delete(Employee).where(Employee.id == employee_id))
        await self._commit("delete")
        if res.rowcount:
            logger.info("Employee deleted: id=%s", employee_id)
        else:
            logger.debug("Delete of missing employee id=%s ignored", employee_id)

    # -------------------------
    # helpers
    # -------------------------
    async def _commit(self, op: str) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Employee %s failed: %s", op, e)
            raise StorageError(f"Employee {op} failed") from e
