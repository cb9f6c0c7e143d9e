import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from todo_app.main import app
from todo_app.database import Base, get_db

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def engine():
    # StaticPool keeps every session on the same in-memory database
    engine_test = create_async_engine(
        TEST_DATABASE_URL,
        future=True,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine_test
    await engine_test.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    """Register a user over HTTP; returns (user_id, auth headers)."""

    async def _make_user(email="alice@example.com", password="secret123"):
        res = await client.post("/api/auth/register", json={"email": email, "password": password})
        assert res.status_code == 201, res.text
        body = res.json()
        return body["user"]["id"], {"Authorization": f"Bearer {body['token']}"}

    return _make_user


@pytest.fixture
def make_todo(client):
    async def _make_todo(headers, title="Test Todo", description=None):
        payload = {"title": title}
        if description is not None:
            payload["description"] = description
        res = await client.post("/api/todos", json=payload, headers=headers)
        assert res.status_code == 201, res.text
        return res.json()

    return _make_todo
