"""Account registration, sign-in and session resolution."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Protocol

from sqlalchemy.exc import IntegrityError

from app.core.auth import (
    create_session_token,
    decode_session_token,
    hash_password,
    new_security_stamp,
    verify_password,
)
from app.core.config import Settings
from app.core.database import UserRecord
from app.core.exceptions import AuthenticationError, FieldError, ValidationError
from app.models.auth import SessionToken, UserInfo
from app.repositories.user_repo import UserRepository
from app.services.validation import is_valid_email, validate_password

logger = logging.getLogger(__name__)

INVALID_LOGIN = "Invalid login attempt"


class Authenticator(Protocol):
    async def register(self, email: str, password: str, first_name: str, last_name: str) -> SessionToken: ...

    async def sign_in(self, email: str, password: str, remember_me: bool = False) -> SessionToken: ...

    async def sign_out(self, user: UserInfo) -> None: ...

    async def current_user(self, token: str) -> UserInfo: ...

    def refresh(self, user: UserInfo, security_stamp: str, persistent: bool = False) -> SessionToken: ...


class PasswordAuthenticator:
    """Authenticator backed by the local identity store.

    Passwords are hashed with passlib's bcrypt scheme and sessions are signed
    JWTs that embed the user's security stamp. Rotating the stamp on sign-out
    invalidates every token issued before it.
    """

    def __init__(self, users: UserRepository, settings: Settings) -> None:
        self.users = users
        self.settings = settings

    def _issue(self, user: UserRecord, persistent: bool = False) -> SessionToken:
        return self.refresh(UserInfo.model_validate(user), user.security_stamp, persistent)

    async def register(self, email: str, password: str, first_name: str = "", last_name: str = "") -> SessionToken:
        errors: list[FieldError] = []
        if not email or not is_valid_email(email):
            errors.append(FieldError("email", "Please enter a valid email address"))
        errors.extend(
            validate_password(
                password,
                min_length=self.settings.PASSWORD_MIN_LENGTH,
                require_digit=self.settings.PASSWORD_REQUIRE_DIGIT,
            )
        )
        if not errors and await self.users.get_by_email(email):
            errors.append(FieldError("email", f"Email '{email}' is already taken."))
        if errors:
            logger.warning("Registration rejected for %s (%d errors)", email, len(errors))
            raise ValidationError(errors, detail="Registration failed")

        user = UserRecord(
            email=email,
            first_name=first_name,
            last_name=last_name,
            password_hash=hash_password(password, self.settings),
            security_stamp=new_security_stamp(),
        )
        try:
            await self.users.add(user)
        except IntegrityError as e:
            raise ValidationError(
                [FieldError("email", f"Email '{email}' is already taken.")],
                detail="Registration failed",
            ) from e

        logger.info("User %s created a new account", user.id)
        return self._issue(user)

    async def sign_in(self, email: str, password: str, remember_me: bool = False) -> SessionToken:
        user = await self.users.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash, self.settings):
            logger.warning("Login failed")
            raise AuthenticationError(INVALID_LOGIN)

        logger.info("User %s logged in", user.id)
        return self._issue(user, persistent=remember_me)

    async def sign_out(self, user: UserInfo) -> None:
        record = await self.users.get(user.id)
        if record is None:
            return
        record.security_stamp = new_security_stamp()
        await self.users.commit()
        logger.info("User %s logged out", user.id)

    async def current_user(self, token: str) -> UserInfo:
        payload = decode_session_token(token, self.settings)
        try:
            user_id = int(payload.sub)
        except ValueError as e:
            raise AuthenticationError("Invalid authentication credentials") from e

        user = await self.users.get(user_id)
        if user is None or user.security_stamp != payload.stamp:
            raise AuthenticationError("Invalid authentication credentials")
        return UserInfo.model_validate(user)

    def refresh(self, user: UserInfo, security_stamp: str, persistent: bool = False) -> SessionToken:
        token, expires_at = create_session_token(user.id, security_stamp, self.settings, persistent)
        return SessionToken(
            access_token=token,
            expires_at=datetime.fromtimestamp(expires_at, tz=timezone.utc),
            user=user,
        )
