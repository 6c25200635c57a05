# src/employee_api/models/__init__.py
from employee_api.models.employee import Employee

__all__ = ["Employee"]
