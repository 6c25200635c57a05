# src/employee_api/routes/employees_api.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.crud.employee import EmployeeRepository
from employee_api.models.employee import ID_MAX
from employee_api.schemas.employee import EmployeeCreate, EmployeeRead, EmployeeUpdate
from employee_api.services.base import EmployeeServiceProtocol
from employee_api.services.employee_service import EmployeeService
from employee_api.utils.database import get_db
from employee_api.utils.exceptions import EmployeeNotFoundError

router = APIRouter(prefix="/employees", tags=["Employees"])


# ----------------------------------------------------------
# DEPENDENCIES (session -> repository -> service)
# ----------------------------------------------------------
def get_employee_repository(db: AsyncSession = Depends(get_db)) -> EmployeeRepository:
    return EmployeeRepository(db)


def get_employee_service(
    repository: EmployeeRepository = Depends(get_employee_repository),
) -> EmployeeServiceProtocol:
    return EmployeeService(repository)


# ----------------------------------------------------------
# ENDPOINTS
# ----------------------------------------------------------
@router.get("", response_model=List[EmployeeRead])
async def list_employees(service: EmployeeServiceProtocol = Depends(get_employee_service)):
    return await service.list()


@router.get("/{employee_id}", response_model=EmployeeRead)
async def get_employee(
    employee_id: int = Path(ge=1, le=ID_MAX),
    service: EmployeeServiceProtocol = Depends(get_employee_service),
):
    row = await service.get_by_id(employee_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Employee not found")
    return row


@router.post("", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: EmployeeCreate,
    request: Request,
    response: Response,
    service: EmployeeServiceProtocol = Depends(get_employee_service),
):
    row = await service.add(payload)
    response.headers["Location"] = str(request.url_for("get_employee", employee_id=row.id))
    return row


@router.put("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_employee(
    payload: EmployeeUpdate,
    employee_id: int = Path(ge=1, le=ID_MAX),
    service: EmployeeServiceProtocol = Depends(get_employee_service),
):
    if employee_id != payload.id:
        raise HTTPException(status_code=400, detail="Path id does not match body Id")
    try:
        await service.update(payload)
    except EmployeeNotFoundError:
        raise HTTPException(status_code=404, detail="Employee not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: int = Path(ge=1, le=ID_MAX),
    service: EmployeeServiceProtocol = Depends(get_employee_service),
):
    await service.delete(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
