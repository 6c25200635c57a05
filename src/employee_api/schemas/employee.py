# src/employee_api/schemas/employee.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_pascal

from employee_api.models.employee import DEPARTMENT_MAX, EMAIL_MAX, FULL_NAME_MAX, ID_MAX
from employee_api.utils.timezone import UTC, to_utc_naive

# JSON uses PascalCase (FullName, HireDate, ...); python code uses snake_case
_CONFIG = ConfigDict(
    alias_generator=to_pascal,
    populate_by_name=True,
    from_attributes=True,
    extra="ignore",
)


# -------------------------------------------------------------------
# Shared base: the mutable fields of an employee record
# -------------------------------------------------------------------
class EmployeeBase(BaseModel):
    model_config = _CONFIG

    full_name: str = Field(min_length=1, max_length=FULL_NAME_MAX)
    email: str = Field(min_length=1, max_length=EMAIL_MAX)
    department: str = Field(min_length=1, max_length=DEPARTMENT_MAX)
    hire_date: Optional[datetime] = None  # None -> creation time (UTC)

    @field_validator("full_name", "department", "email", mode="before")
    @classmethod
    def _trim(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email")
    @classmethod
    def _email_syntax(cls, v: str) -> str:
        # validate only: the address is stored exactly as sent (no normalization)
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"value is not a valid email address: {e}") from e
        return v

    @field_validator("hire_date")
    @classmethod
    def _utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_utc_naive(v)


# -------------------------------------------------------------------
# Requests
# -------------------------------------------------------------------
class EmployeeCreate(EmployeeBase):
    """Body of POST. Any ``Id`` sent by the client is dropped."""


class EmployeeUpdate(EmployeeBase):
    # Id is the match key; it must agree with the path id
    id: int = Field(ge=1, le=ID_MAX)


# -------------------------------------------------------------------
# Responses
# -------------------------------------------------------------------
class EmployeeRead(BaseModel):
    model_config = _CONFIG

    id: int
    full_name: str
    email: str
    department: str
    hire_date: datetime

    @field_serializer("hire_date", when_used="json")
    def _hire_date_utc(self, v: datetime) -> str:
        # stored naive UTC; say so on the wire
        if v.tzinfo is None:
            v = UTC.localize(v)
        return v.astimezone(UTC).isoformat()


__all__ = [
    "EmployeeBase",
    "EmployeeCreate",
    "EmployeeUpdate",
    "EmployeeRead",
]
