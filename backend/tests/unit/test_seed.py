"""Tests for sample data seeding and the seed script."""

from __future__ import annotations

import argparse

import pytest

from app.repositories.employee_repo import EmployeeRepository
from app.services.seed import SAMPLE_EMPLOYEES, seed_sample_employees
from scripts.seed import parse_args, seed


@pytest.mark.anyio
async def test_seed_fills_empty_directory(session):
    inserted = await seed_sample_employees(session)

    assert inserted == len(SAMPLE_EMPLOYEES)
    assert await EmployeeRepository(session).count() == 3


@pytest.mark.anyio
async def test_seed_skips_populated_directory(session):
    await seed_sample_employees(session)

    assert await seed_sample_employees(session) == 0
    assert await EmployeeRepository(session).count() == 3


@pytest.mark.anyio
async def test_forced_seed_only_adds_missing_samples(session):
    await seed_sample_employees(session)
    repo = EmployeeRepository(session)
    dilina = await repo.get_by_email("dilina@gmail.com")
    await repo.remove(dilina.id)

    assert await seed_sample_employees(session, force=True) == 1
    assert await repo.count() == 3


def test_parse_args_defaults():
    args = parse_args([])
    assert args.database_url is None
    assert args.force is False
    assert args.verbose is False


def test_parse_args_all_flags():
    args = parse_args(["--database-url", "sqlite+aiosqlite:///./other.db", "--force", "--verbose"])
    assert args.database_url == "sqlite+aiosqlite:///./other.db"
    assert args.force is True
    assert args.verbose is True


@pytest.mark.anyio
async def test_seed_script_writes_database_file(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'directory.db'}"
    args = argparse.Namespace(database_url=url, force=False, verbose=False)

    assert await seed(args) == 3
    assert await seed(args) == 0
