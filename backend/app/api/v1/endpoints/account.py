from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response, status

from app.core.dependencies import (
    clear_session_cookie,
    get_authenticator,
    get_current_user,
    set_session_cookie,
)
from app.core.exceptions import FieldError, ValidationError
from app.models.auth import LoginRequest, RegisterRequest, SessionToken, UserInfo
from app.services.auth_service import Authenticator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/account", tags=["account"])


@router.post("/register", response_model=SessionToken, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    response: Response,
    authenticator: Authenticator = Depends(get_authenticator),  # noqa: B008
):
    if request.password != request.confirm_password:
        raise ValidationError(
            [FieldError("confirmPassword", "The password and confirmation password do not match.")],
            detail="Registration failed",
        )

    session = await authenticator.register(
        request.email,
        request.password,
        request.first_name,
        request.last_name,
    )
    set_session_cookie(response, session.access_token)
    return session


@router.post("/login", response_model=SessionToken)
async def login(
    request: LoginRequest,
    response: Response,
    authenticator: Authenticator = Depends(get_authenticator),  # noqa: B008
):
    session = await authenticator.sign_in(request.email, request.password, request.remember_me)
    set_session_cookie(response, session.access_token, persistent=request.remember_me)
    return session


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    user: UserInfo = Depends(get_current_user),  # noqa: B008
    authenticator: Authenticator = Depends(get_authenticator),  # noqa: B008
):
    await authenticator.sign_out(user)
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    clear_session_cookie(response)
    return response


@router.get("/me", response_model=UserInfo)
async def me(user: UserInfo = Depends(get_current_user)):  # noqa: B008
    return user
