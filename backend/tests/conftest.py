"""Shared fixtures: fake Redis, in-memory SQLite and the API client."""

from collections.abc import AsyncIterator

import pytest
from fakeredis import FakeAsyncRedis, FakeServer
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

import app.models  # noqa: F401
from app.services.receipts import ReceiptNumberGenerator, RedisCounterStore, RedisLockService
from tests.factories import COUNTER_KEY, LOCK_NAME


@pytest.fixture
def redis_server() -> FakeServer:
    """Isolated fake Redis server per test."""
    return FakeServer()


@pytest.fixture
async def redis(redis_server: FakeServer) -> AsyncIterator[FakeAsyncRedis]:
    client = FakeAsyncRedis(server=redis_server)
    yield client
    await client.aclose()


@pytest.fixture
def generator(redis: FakeAsyncRedis) -> ReceiptNumberGenerator:
    return ReceiptNumberGenerator(
        RedisLockService(redis, poll_interval=0.005),
        RedisCounterStore(redis),
        lock_name=LOCK_NAME,
        counter_key=COUNTER_KEY,
        lease=5.0,
        wait=3.0,
    )


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_maker: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(
    session_maker: async_sessionmaker[AsyncSession],
    generator: ReceiptNumberGenerator,
    redis: FakeAsyncRedis,
) -> AsyncIterator[AsyncClient]:
    """API client with the database and receipt generator swapped for test doubles."""
    from app.api.v1.health import get_redis
    from app.api.v1.repair_requests.dependencies import get_receipt_number_generator
    from app.db import get_session
    from app.main import app

    async def override_session() -> AsyncIterator[AsyncSession]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_receipt_number_generator] = lambda: generator
    app.dependency_overrides[get_redis] = lambda: redis
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
