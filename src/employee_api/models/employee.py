# src/employee_api/models/employee.py
from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from employee_api.utils.database import Base
from employee_api.utils.timezone import utcnow_naive

# Column limits, shared with the request schemas
FULL_NAME_MAX = 100
EMAIL_MAX = 254
DEPARTMENT_MAX = 50
# INTEGER primary key range (32-bit on PostgreSQL)
ID_MAX = 2**31 - 1


class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(FULL_NAME_MAX), nullable=False)
    email: Mapped[str] = mapped_column(String(EMAIL_MAX), nullable=False)
    department: Mapped[str] = mapped_column(String(DEPARTMENT_MAX), nullable=False)
    # naive UTC
    hire_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=False), nullable=False, default=utcnow_naive
    )

    def __repr__(self) -> str:
        return f"<Employee {self.id} {self.full_name}>"
