from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.core.database import database
from app.core.dependencies import get_current_user
from app.models.auth import UserInfo

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    services: dict[str, str] = {}

    if database.initialized:
        ok = await database.check_connection()
        services["database"] = "ok" if ok else "error"
    else:
        services["database"] = "error"

    all_ok = all(v == "ok" for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/protected")
async def health_protected(user: UserInfo = Depends(get_current_user)):
    return {"status": "ok", "user": user.model_dump(by_alias=True)}


@router.get("/ready")
async def readiness_probe():
    return {"ready": database.initialized}
