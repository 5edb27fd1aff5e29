from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_optional_session
from app.models.employee import DashboardStats
from app.repositories.employee_repo import EmployeeRepository
from app.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardStats)
async def dashboard(session: AsyncSession | None = Depends(get_optional_session)):  # noqa: B008
    if session is None:
        logger.warning("Database not initialized, returning empty dashboard")
        return DashboardStats()
    return await EmployeeService(EmployeeRepository(session)).dashboard()
