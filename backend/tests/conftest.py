import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app


@pytest_asyncio.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def hospital_signup():
    def _build(name="City General", reg="RC1", email="a@b.com", password="x"):
        return {
            "role": "hospital",
            "hospitalName": name,
            "registrationNumber": reg,
            "administratorEmail": email,
            "adminContact": "9000000000",
            "password": password,
        }
    return _build


@pytest.fixture
def register_hospital(client, hospital_signup):
    """Sign a hospital up, log it in, and return auth headers for it."""
    async def _register(**kwargs):
        body = hospital_signup(**kwargs)
        resp = await client.post("/api/auth/signup", json=body)
        assert resp.status_code == 201, resp.text
        login = await client.post(
            "/api/auth/login",
            json={
                "role": "hospital",
                "registrationNumber": body["registrationNumber"],
                "password": body["password"],
            },
        )
        assert login.status_code == 200, login.text
        return {"Authorization": f"Bearer {login.json()['token']}"}
    return _register


@pytest.fixture
def register_worker_account(client):
    async def _register(mobile="9876543210", password="pw"):
        resp = await client.post(
            "/api/auth/signup",
            json={"role": "worker", "name": "Ravi Kumar", "mobileNumber": mobile, "password": password},
        )
        assert resp.status_code == 201, resp.text
        return {"Authorization": f"Bearer {resp.json()['token']}"}
    return _register
