"""Password hashing and signed session tokens."""

from __future__ import annotations

import logging
import secrets
import time
from functools import lru_cache

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError
from passlib.context import CryptContext

from app.core.config import Settings
from app.core.exceptions import AuthenticationError
from app.models.auth import TokenPayload

logger = logging.getLogger(__name__)


@lru_cache(maxsize=4)
def _password_context(rounds: int) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(password: str, settings: Settings) -> str:
    return _password_context(settings.BCRYPT_ROUNDS).hash(password)


def verify_password(password: str, password_hash: str, settings: Settings) -> bool:
    try:
        return _password_context(settings.BCRYPT_ROUNDS).verify(password, password_hash)
    except (ValueError, TypeError):
        logger.warning("Stored password hash could not be verified")
        return False


def new_security_stamp() -> str:
    return secrets.token_hex(16)


def create_session_token(
    user_id: int,
    security_stamp: str,
    settings: Settings,
    persistent: bool = False,
) -> tuple[str, int]:
    """Return ``(token, expires_at)`` with ``expires_at`` as a unix timestamp.

    ``persistent`` records whether the session cookie should outlive the
    browser session, so renewals keep the choice made at sign-in.
    """
    now = int(time.time())
    expires_at = now + settings.SESSION_EXPIRE_MINUTES * 60
    claims = {
        "sub": str(user_id),
        "stamp": security_stamp,
        "iat": now,
        "exp": expires_at,
        "persistent": persistent,
    }
    token = jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return token, expires_at


def decode_session_token(token: str, settings: Settings) -> TokenPayload:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError as e:
        raise AuthenticationError("Session has expired") from e
    except JWTError as e:
        raise AuthenticationError("Invalid authentication credentials") from e

    if "sub" not in payload or "stamp" not in payload or "exp" not in payload:
        raise AuthenticationError("Invalid authentication credentials")
    return TokenPayload(**payload)


def needs_refresh(payload: TokenPayload, settings: Settings) -> bool:
    """Sliding expiry: renew once less than half of the lifetime remains."""
    remaining = payload.exp - int(time.time())
    return remaining < settings.SESSION_EXPIRE_MINUTES * 30
