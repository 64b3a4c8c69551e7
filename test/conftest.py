# test/conftest.py
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# 1. Setup Test DB Engine
# StaticPool keeps the in-memory DB alive across connections in one test.
TEST_DB_URL = "sqlite+aiosqlite:///:memory:"

test_engine = create_async_engine(
    TEST_DB_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = async_sessionmaker(test_engine, expire_on_commit=False)

# Import app modules AFTER defining the engine to avoid early init issues
from zenith_blog import main, store
from zenith_blog.routes import posts, products
from zenith_blog.store import Base


@pytest_asyncio.fixture(scope="function")
async def db_session():
    """
    Creates a fresh in-memory database for each test function.
    """
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestingSessionLocal() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
def patched_sessions(monkeypatch):
    """
    The route modules did `from zenith_blog.store import async_session`,
    so each module's reference has to be pointed at the test session maker.
    """
    for module in (store, posts, products):
        monkeypatch.setattr(module, "async_session", TestingSessionLocal)
    return TestingSessionLocal


@pytest_asyncio.fixture(scope="function")
async def client(db_session, patched_sessions):
    transport = ASGITransport(app=main.app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def broken_storage(monkeypatch, tmp_path):
    """Session maker whose engine can never open its database."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'nowhere.db'}"
    )
    broken = async_sessionmaker(engine, expire_on_commit=False)
    for module in (posts, products):
        monkeypatch.setattr(module, "async_session", broken)
    return broken
