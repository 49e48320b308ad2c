import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from hrms.core.security import create_access_token
from hrms.database import Base, get_db
from hrms.main import app


@pytest.fixture
def client(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'hrms.db'}")
    session_factory = async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    async def create_tables():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        c.portal.call(create_tables)
        yield c
        c.portal.call(engine.dispose)
    app.dependency_overrides.clear()


def auth_headers(role: str, user_id: str = "user-1") -> dict:
    token = create_access_token({"sub": user_id, "role": role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def hr():
    return auth_headers("hr")


@pytest.fixture
def staff():
    return auth_headers("staff", "user-2")


@pytest.fixture
def admin():
    return auth_headers("admin", "user-3")


@pytest.fixture
def manager():
    return auth_headers("manager", "user-4")
