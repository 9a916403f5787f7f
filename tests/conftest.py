"""Shared fixtures: a throwaway SQLite database per test."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.config import Settings
from marketplace.database import Database
from marketplace.main import create_application
from marketplace.services.driver_service import DriverService
from marketplace.services.hotel_service import HotelService
from marketplace.services.ride_service import RideService
from marketplace.store import Store


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        database_url_override=f"sqlite+aiosqlite:///{tmp_path / 'marketplace.db'}",
        environment="development",
        debug=False,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def database(test_settings: Settings) -> AsyncGenerator[Database, None]:
    db = Database(test_settings.database_url)
    db.open()
    await db.create_all()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.session() as session:
        yield session


@pytest.fixture
def store(session: AsyncSession) -> Store:
    return Store(session)


@pytest.fixture
def ride_service(store: Store) -> RideService:
    return RideService(store)


@pytest.fixture
def driver_service(store: Store) -> DriverService:
    return DriverService(store)


@pytest.fixture
def hotel_service(store: Store) -> HotelService:
    return HotelService(store)


@pytest_asyncio.fixture
async def client(test_settings: Settings, database: Database) -> AsyncGenerator[AsyncClient, None]:
    app = create_application(settings=test_settings, database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
