from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from employee_api.models.employee import ID_MAX, Employee
from employee_api.schemas.employee import EmployeeCreate, EmployeeRead, EmployeeUpdate


def test_create_accepts_pascal_case_and_trims():
    data = EmployeeCreate.model_validate(
        {"FullName": "  Ann Lee ", "Email": " ann@x.com ", "Department": " Eng"}
    )
    assert data.full_name == "Ann Lee"
    assert data.email == "ann@x.com"
    assert data.department == "Eng"
    assert data.hire_date is None


def test_email_kept_exactly_as_sent():
    data = EmployeeCreate.model_validate(
        {"FullName": "Ann", "Email": "Ann@X.COM", "Department": "Eng"}
    )
    assert data.email == "Ann@X.COM"


@pytest.mark.parametrize("email", ["ann", "ann@", "@x.com", "ann@@x.com", ""])
def test_invalid_email_rejected(email: str):
    with pytest.raises(ValidationError) as exc_info:
        EmployeeCreate.model_validate({"FullName": "Ann", "Email": email, "Department": "Eng"})
    assert exc_info.value.errors()[0]["loc"] == ("Email",)


def test_create_drops_client_id():
    data = EmployeeCreate.model_validate(
        {"Id": 5, "FullName": "Ann Lee", "Email": "ann@x.com", "Department": "Eng"}
    )
    assert not hasattr(data, "id")


def test_aware_hire_date_normalized_to_naive_utc():
    plus_six = timezone(timedelta(hours=6))
    data = EmployeeCreate(
        full_name="Ann",
        email="ann@x.com",
        department="Eng",
        hire_date=datetime(2024, 1, 15, 15, 30, tzinfo=plus_six),
    )
    assert data.hire_date == datetime(2024, 1, 15, 9, 30)


def test_length_limits_are_inclusive():
    EmployeeCreate(full_name="x" * 100, email="a@x.com", department="d" * 50)

    with pytest.raises(ValidationError) as exc_info:
        EmployeeCreate.model_validate(
            {"FullName": "x" * 101, "Email": "a@x.com", "Department": "d" * 51}
        )

    fields = {err["loc"][0] for err in exc_info.value.errors()}
    assert fields == {"FullName", "Department"}


def test_update_requires_id():
    with pytest.raises(ValidationError) as exc_info:
        EmployeeUpdate.model_validate(
            {"FullName": "Ann", "Email": "ann@x.com", "Department": "Eng"}
        )
    assert exc_info.value.errors()[0]["loc"] == ("Id",)


@pytest.mark.parametrize("employee_id", [0, ID_MAX + 1])
def test_update_id_bounds(employee_id: int):
    with pytest.raises(ValidationError):
        EmployeeUpdate.model_validate(
            {"Id": employee_id, "FullName": "Ann", "Email": "ann@x.com", "Department": "Eng"}
        )


def test_read_dumps_pascal_case_from_orm_row():
    row = Employee(
        id=3,
        full_name="Ann Lee",
        email="ann@x.com",
        department="Eng",
        hire_date=datetime(2024, 1, 15, 9, 30),
    )
    dumped = EmployeeRead.model_validate(row).model_dump(by_alias=True, mode="json")
    assert dumped == {
        "Id": 3,
        "FullName": "Ann Lee",
        "Email": "ann@x.com",
        "Department": "Eng",
        "HireDate": "2024-01-15T09:30:00+00:00",
    }
