"""Employee record access over an async SQLAlchemy session."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import ColumnElement, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import EmployeeRecord, store_errors


class EmployeeRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def count(self, predicate: ColumnElement[bool] | None = None) -> int:
        stmt = select(func.count()).select_from(EmployeeRecord)
        if predicate is not None:
            stmt = stmt.where(predicate)
        with store_errors("count employees"):
            result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def query(
        self,
        predicate: ColumnElement[bool] | None = None,
        order_by: Sequence[Any] = (EmployeeRecord.full_name, EmployeeRecord.id),
        offset: int = 0,
        limit: int | None = None,
    ) -> list[EmployeeRecord]:
        stmt = select(EmployeeRecord)
        if predicate is not None:
            stmt = stmt.where(predicate)
        stmt = stmt.order_by(*order_by).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        with store_errors("query employees"):
            result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get(self, employee_id: int) -> EmployeeRecord | None:
        with store_errors("get employee"):
            return await self.session.get(EmployeeRecord, employee_id)

    async def get_by_email(self, email: str) -> EmployeeRecord | None:
        stmt = select(EmployeeRecord).where(EmployeeRecord.email == email)
        with store_errors("get employee by email"):
            result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def department_counts(self) -> list[tuple[str, int]]:
        stmt = (
            select(EmployeeRecord.department, func.count(EmployeeRecord.id))
            .group_by(EmployeeRecord.department)
            .order_by(EmployeeRecord.department)
        )
        with store_errors("count departments"):
            result = await self.session.execute(stmt)
        return [(department, int(count)) for department, count in result.all()]

    async def add(self, record: EmployeeRecord) -> EmployeeRecord:
        self.session.add(record)
        await self.commit()
        return record

    async def remove(self, employee_id: int) -> bool:
        with store_errors("delete employee"):
            result = await self.session.execute(delete(EmployeeRecord).where(EmployeeRecord.id == employee_id))
        await self.commit()
        return bool(result.rowcount)

    async def commit(self) -> None:
        try:
            with store_errors("commit"):
                await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
