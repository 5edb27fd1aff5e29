"""Async SQLAlchemy engine, session factory and ORM tables."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager, contextmanager
from datetime import date, datetime, timezone
from typing import Any

from sqlalchemy import Date, DateTime, Integer, String, event, text
from sqlalchemy.engine.url import make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.orm.exc import StaleDataError
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.core.exceptions import StoreError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class EmployeeRecord(Base):
    __tablename__ = "employees"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    position: Mapped[str] = mapped_column(String(50), nullable=False)
    department: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    hire_date: Mapped[date] = mapped_column(Date, nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}


class UserRecord(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(256), nullable=False)
    normalized_email: Mapped[str] = mapped_column(String(256), nullable=False, unique=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    security_stamp: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


def _is_sqlite(url: str) -> bool:
    return make_url(url).get_backend_name() == "sqlite"


def _is_in_memory(url: str) -> bool:
    database = make_url(url).database
    return not database or database == ":memory:"


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Wrap driver and connection failures in ``StoreError``.

    Integrity and stale-data errors pass through untouched; callers turn them
    into validation or conflict outcomes.
    """
    try:
        yield
    except (IntegrityError, StaleDataError):
        raise
    except SQLAlchemyError as err:
        logger.exception("Record store failure during %s", operation)
        raise StoreError("The record store is unavailable. Please try again.") from err


def _enable_case_sensitive_like(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA case_sensitive_like = ON")
    cursor.close()


class Database:
    def __init__(self) -> None:
        self.engine: AsyncEngine | None = None
        self.session_factory: async_sessionmaker[AsyncSession] | None = None
        self.initialized: bool = False

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        url = settings.DATABASE_URL
        kwargs: dict[str, Any] = {"echo": settings.DATABASE_ECHO}
        if _is_sqlite(url) and _is_in_memory(url):
            # every session must see the same in-memory database
            kwargs["poolclass"] = StaticPool
            kwargs["connect_args"] = {"check_same_thread": False}

        self.engine = create_async_engine(url, **kwargs)
        if _is_sqlite(url):
            event.listen(self.engine.sync_engine, "connect", _enable_case_sensitive_like)

        self.session_factory = async_sessionmaker(self.engine, expire_on_commit=False)
        await self.create_schema()
        self.initialized = True
        logger.info("Database initialized (backend=%s)", make_url(url).get_backend_name())

    async def create_schema(self) -> None:
        if self.engine is None:
            raise RuntimeError("Database engine not created")
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        if self.engine:
            await self.engine.dispose()
            logger.info("Database connections closed")
        self.engine = None
        self.session_factory = None
        self.initialized = False

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        if self.session_factory is None:
            raise RuntimeError("Database not initialized")
        async with self.session_factory() as session:
            yield session

    async def check_connection(self) -> bool:
        if self.engine is None:
            return False
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception:
            logger.exception("Database connection check failed")
            return False


database = Database()
