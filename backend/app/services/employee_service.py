"""Employee listing, lookup and write operations."""

from __future__ import annotations

import logging
import math

from sqlalchemy import ColumnElement, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError

from app.core.database import EmployeeRecord
from app.core.exceptions import ConflictError, FieldError, NotFoundError, StoreError, ValidationError
from app.models.employee import (
    DashboardStats,
    DepartmentCount,
    Employee,
    EmployeeInput,
    EmployeeListQuery,
    EmployeeListResult,
)
from app.repositories.employee_repo import EmployeeRepository
from app.services.validation import parse_hire_date, validate_employee

logger = logging.getLogger(__name__)

RECENT_HIRES_LIMIT = 5


def build_search_predicate(search_term: str | None) -> ColumnElement[bool] | None:
    """Case-sensitive substring match on name or department.

    The term is used as typed (no trimming). ``None`` means "match everything".
    """
    if not search_term:
        return None
    return or_(
        EmployeeRecord.full_name.contains(search_term, autoescape=True),
        EmployeeRecord.department.contains(search_term, autoescape=True),
    )


def paginate(total_count: int, page: int, page_size: int) -> tuple[int, int]:
    """Return ``(current_page, total_pages)`` for a requested page.

    The page is clamped into ``[1, total_pages]``; with no rows there are zero
    pages and the current page is 1.
    """
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    total_pages = math.ceil(total_count / page_size)
    current_page = max(1, min(page, total_pages))
    return current_page, total_pages


def _duplicate_email(email: str | None) -> ValidationError:
    return ValidationError([FieldError("email", f"Email '{email}' is already in use")])


class EmployeeService:
    def __init__(self, employees: EmployeeRepository) -> None:
        self.employees = employees

    async def list_employees(self, query: EmployeeListQuery) -> EmployeeListResult:
        predicate = build_search_predicate(query.search_term)
        total_count = await self.employees.count(predicate)
        current_page, total_pages = paginate(total_count, query.page, query.page_size)

        records = await self.employees.query(
            predicate,
            order_by=(EmployeeRecord.full_name, EmployeeRecord.id),
            offset=(current_page - 1) * query.page_size,
            # never above the row count, so LIMIT fits the driver's integer range
            limit=min(query.page_size, total_count),
        )

        return EmployeeListResult(
            employees=[Employee.model_validate(r) for r in records],
            search_term=query.search_term,
            current_page=current_page,
            page_size=query.page_size,
            total_pages=total_pages,
            total_count=total_count,
        )

    async def get_employee(self, employee_id: int) -> Employee:
        record = await self.employees.get(employee_id)
        if record is None:
            raise NotFoundError(f"Employee {employee_id} not found")
        return Employee.model_validate(record)

    async def _check_email_available(self, email: str, employee_id: int | None = None) -> None:
        existing = await self.employees.get_by_email(email)
        if existing is not None and existing.id != employee_id:
            raise _duplicate_email(email)

    async def create_employee(self, data: EmployeeInput) -> Employee:
        errors = validate_employee(data)
        if errors:
            raise ValidationError(errors)
        await self._check_email_available(data.email)  # type: ignore[arg-type]

        record = EmployeeRecord(
            full_name=data.full_name,
            email=data.email,
            position=data.position,
            department=data.department,
            phone=data.phone,
            hire_date=parse_hire_date(data.hire_date),
        )
        try:
            await self.employees.add(record)
        except IntegrityError as e:
            raise _duplicate_email(data.email) from e

        logger.info("Employee %s created", record.full_name)
        return Employee.model_validate(record)

    async def replace_employee(self, employee_id: int, data: EmployeeInput) -> Employee:
        errors = validate_employee(data)
        if errors:
            raise ValidationError(errors)

        record = await self.employees.get(employee_id)
        if record is None:
            raise NotFoundError(f"Employee {employee_id} not found")
        await self._check_email_available(data.email, employee_id)  # type: ignore[arg-type]
        if data.version is not None and data.version != record.version:
            raise ConflictError(
                f"Employee {employee_id} was modified by someone else; reload it and try again"
            )

        record.full_name = data.full_name  # type: ignore[assignment]
        record.email = data.email  # type: ignore[assignment]
        record.position = data.position  # type: ignore[assignment]
        record.department = data.department  # type: ignore[assignment]
        record.phone = data.phone  # type: ignore[assignment]
        record.hire_date = parse_hire_date(data.hire_date)  # type: ignore[assignment]

        try:
            await self.employees.commit()
        except StaleDataError as e:
            if await self.employees.get(employee_id) is None:
                raise NotFoundError(f"Employee {employee_id} not found") from e
            raise ConflictError(
                f"Employee {employee_id} was modified by someone else; reload it and try again"
            ) from e
        except IntegrityError as e:
            raise _duplicate_email(data.email) from e

        logger.info("Employee %s updated", record.full_name)
        return Employee.model_validate(record)

    async def delete_employee(self, employee_id: int) -> None:
        if not await self.employees.remove(employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")
        logger.info("Employee %s deleted", employee_id)

    async def dashboard(self) -> DashboardStats:
        try:
            total = await self.employees.count()
            recent = await self.employees.query(
                order_by=(EmployeeRecord.hire_date.desc(), EmployeeRecord.id.desc()),
                limit=RECENT_HIRES_LIMIT,
            )
            departments = await self.employees.department_counts()
        except StoreError:
            logger.exception("Error loading dashboard data")
            return DashboardStats()

        logger.info("Dashboard data loaded - total employees: %d", total)
        return DashboardStats(
            total_employees=total,
            total_departments=len(departments),
            recent_employees=[Employee.model_validate(r) for r in recent],
            department_counts=[DepartmentCount(department=d, count=c) for d, c in departments],
        )
