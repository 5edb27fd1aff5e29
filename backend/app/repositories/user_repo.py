"""Identity store access for application users."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import UserRecord, store_errors


def normalize_email(email: str) -> str:
    return email.strip().upper()


class UserRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, user_id: int) -> UserRecord | None:
        with store_errors("get user"):
            return await self.session.get(UserRecord, user_id)

    async def get_by_email(self, email: str) -> UserRecord | None:
        stmt = select(UserRecord).where(UserRecord.normalized_email == normalize_email(email))
        with store_errors("get user by email"):
            result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def add(self, user: UserRecord) -> UserRecord:
        user.normalized_email = normalize_email(user.email)
        self.session.add(user)
        await self.commit()
        return user

    async def commit(self) -> None:
        try:
            with store_errors("commit"):
                await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
