from fastapi import APIRouter

from app.api.v1.endpoints import account, dashboard, employees, health

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router)
api_router.include_router(account.router)
api_router.include_router(employees.router)
api_router.include_router(dashboard.router)
