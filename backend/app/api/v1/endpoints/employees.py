from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from app.core.config import settings
from app.core.dependencies import get_current_user, get_employee_service
from app.models.auth import UserInfo
from app.models.employee import Employee, EmployeeInput, EmployeeListQuery, EmployeeListResult
from app.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=EmployeeListResult)
async def list_employees(
    search_term: str | None = Query(None, alias="searchTerm"),
    page: int = Query(1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, alias="pageSize", ge=1),
    user: UserInfo = Depends(get_current_user),  # noqa: B008
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    query = EmployeeListQuery(search_term=search_term, page=page, page_size=page_size)
    return await service.list_employees(query)


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: int,
    user: UserInfo = Depends(get_current_user),  # noqa: B008
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    return await service.get_employee(employee_id)


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    data: EmployeeInput,
    user: UserInfo = Depends(get_current_user),  # noqa: B008
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    logger.info("Create employee request from user=%s", user.id)
    return await service.create_employee(data)


@router.put("/{employee_id}", response_model=Employee)
async def replace_employee(
    employee_id: int,
    data: EmployeeInput,
    user: UserInfo = Depends(get_current_user),  # noqa: B008
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    return await service.replace_employee(employee_id, data)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: int,
    user: UserInfo = Depends(get_current_user),  # noqa: B008
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    await service.delete_employee(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
