from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from app.core.config import Settings
from app.core.database import Database
from app.core.dependencies import get_current_user
from app.main import app
from app.models.auth import UserInfo

TEST_DATABASE_URL = "sqlite+aiosqlite://"
TEST_SECRET_KEY = "test-secret-key-not-for-production"


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _test_settings():
    from app.core.config import settings

    overrides = {
        "DATABASE_URL": TEST_DATABASE_URL,
        "SEED_SAMPLE_DATA": False,
        "BCRYPT_ROUNDS": 4,
        "SECRET_KEY": TEST_SECRET_KEY,
    }
    originals = {key: getattr(settings, key) for key in overrides}
    for key, value in overrides.items():
        setattr(settings, key, value)
    yield
    for key, value in originals.items():
        setattr(settings, key, value)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        DATABASE_URL=TEST_DATABASE_URL,
        SEED_SAMPLE_DATA=False,
        BCRYPT_ROUNDS=4,
        SECRET_KEY=TEST_SECRET_KEY,
    )


@pytest.fixture
async def session(test_settings):
    db = Database()
    await db.initialize(test_settings)
    async with db.session() as s:
        yield s
    await db.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def mock_user():
    return UserInfo(id=1, email="admin@company.com", first_name="Admin", last_name="User")


@pytest.fixture
def authenticated_client(mock_user):
    app.dependency_overrides[get_current_user] = lambda: mock_user
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
