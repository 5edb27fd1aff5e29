from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from fastapi import Cookie, Depends, Header, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import decode_session_token, needs_refresh
from app.core.config import settings
from app.core.database import database
from app.core.exceptions import AuthenticationError, StoreError
from app.models.auth import UserInfo
from app.repositories.employee_repo import EmployeeRepository
from app.repositories.user_repo import UserRepository
from app.services.auth_service import Authenticator, PasswordAuthenticator
from app.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)


async def get_session() -> AsyncIterator[AsyncSession]:
    if not database.initialized:
        raise StoreError("The record store is unavailable. Please try again.")
    async with database.session() as session:
        yield session


async def get_optional_session() -> AsyncIterator[AsyncSession | None]:
    """Like ``get_session`` but yields ``None`` when the store never started."""
    if not database.initialized:
        yield None
        return
    async with database.session() as session:
        yield session


def get_employee_service(session: AsyncSession = Depends(get_session)) -> EmployeeService:  # noqa: B008
    return EmployeeService(EmployeeRepository(session))


def get_authenticator(session: AsyncSession = Depends(get_session)) -> Authenticator:  # noqa: B008
    return PasswordAuthenticator(UserRepository(session), settings)


def set_session_cookie(response: Response, token: str, persistent: bool = False) -> None:
    # without max_age the browser drops the cookie when it closes
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_EXPIRE_MINUTES * 60 if persistent else None,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )


def _extract_token(authorization: str | None, cookie_token: str | None) -> str | None:
    if authorization and authorization.startswith("Bearer "):
        return authorization.split(" ", 1)[1]
    return cookie_token


async def get_current_user(
    response: Response,
    authorization: str | None = Header(None),
    session_cookie: str | None = Cookie(None, alias=settings.SESSION_COOKIE_NAME),
    authenticator: Authenticator = Depends(get_authenticator),  # noqa: B008
) -> UserInfo:
    token = _extract_token(authorization, session_cookie)
    if not token:
        raise AuthenticationError("Not authenticated")

    user = await authenticator.current_user(token)

    if session_cookie and token == session_cookie:
        payload = decode_session_token(token, settings)
        if needs_refresh(payload, settings):
            renewed = authenticator.refresh(user, payload.stamp, payload.persistent)
            set_session_cookie(response, renewed.access_token, payload.persistent)
            logger.debug("Session for user %s renewed", user.id)

    return user
