from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.database import database
from app.core.exceptions import AuthenticationError, EmployeeDirectoryError, StoreError, ValidationError
from app.services.seed import seed_sample_employees

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    try:
        await database.initialize(settings)
        if settings.SEED_SAMPLE_DATA:
            async with database.session() as session:
                await seed_sample_employees(session)
    except Exception:
        logger.exception("Failed to initialize database, continuing without DB")
    yield
    await database.close()


async def employee_directory_error_handler(request: Request, exc: EmployeeDirectoryError) -> JSONResponse:
    body: dict[str, object] = {"detail": exc.detail}
    headers: dict[str, str] = {}

    if isinstance(exc, ValidationError):
        body["errors"] = [{"field": e.field, "message": e.message} for e in exc.errors]
    elif isinstance(exc, AuthenticationError):
        headers["WWW-Authenticate"] = "Bearer"
    elif isinstance(exc, StoreError):
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc.__cause__ or exc)

    return JSONResponse(status_code=exc.status_code, content=body, headers=headers or None)


configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="Employee Directory API",
    description="Employee records with search, pagination and account management",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(EmployeeDirectoryError, employee_directory_error_handler)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Employee Directory API"}
