"""Authentication models for account registration and session tokens."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field

from app.models.employee import CamelModel


class TokenPayload(BaseModel):
    sub: str
    stamp: str
    exp: int
    iat: int | None = None
    persistent: bool = False


class UserInfo(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str = ""
    last_name: str = ""

    @computed_field(alias="displayName")  # type: ignore[prop-decorator]
    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    remember_me: bool = False


class RegisterRequest(CamelModel):
    email: str
    password: str
    confirm_password: str
    first_name: str = ""
    last_name: str = ""


class SessionToken(CamelModel):
    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: UserInfo
