"""Sample employees inserted into an empty directory."""

from __future__ import annotations

import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import EmployeeRecord
from app.repositories.employee_repo import EmployeeRepository

logger = logging.getLogger(__name__)

SAMPLE_EMPLOYEES: list[dict[str, object]] = [
    {
        "full_name": "Dilina Mewan",
        "email": "dilina@gmail.com",
        "position": "Software Developer",
        "department": "IT",
        "phone": "0713336584",
        "hire_date": date(2022, 1, 15),
    },
    {
        "full_name": "Thushara Dulshan",
        "email": "thushara@gmail.com",
        "position": "Project Manager",
        "department": "IT",
        "phone": "0715760142",
        "hire_date": date(2021, 6, 10),
    },
    {
        "full_name": "Malinda Tanuj",
        "email": "malinda@gmail.com",
        "position": "HR Manager",
        "department": "Human Resources",
        "phone": "0719453677",
        "hire_date": date(2020, 3, 5),
    },
]


async def seed_sample_employees(session: AsyncSession, *, force: bool = False) -> int:
    """Insert the sample employees unless the table already has rows.

    Returns the number of employees inserted. With ``force`` the samples whose
    email is not yet taken are inserted regardless of existing rows.
    """
    repo = EmployeeRepository(session)
    if not force and await repo.count() > 0:
        logger.debug("Employees table not empty, skipping sample data")
        return 0

    inserted = 0
    for sample in SAMPLE_EMPLOYEES:
        if await repo.get_by_email(str(sample["email"])) is not None:
            continue
        session.add(EmployeeRecord(**sample))
        inserted += 1

    await repo.commit()
    logger.info("Seeded %d sample employees", inserted)
    return inserted
