# src/employee_api/utils/exceptions.py
"""
Custom exceptions for the data-access layer.
"""


class StorageError(Exception):
    """The backing store could not complete a write (unreachable, constraint violated)."""


class EmployeeNotFoundError(LookupError):
    """An update targeted an Id that has no stored record."""

    def __init__(self, employee_id: int):
        super().__init__(f"Employee {employee_id} not found")
        self.employee_id = employee_id
