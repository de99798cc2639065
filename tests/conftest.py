import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from vehicle_api.config import DateParsingConfig
from vehicle_api.database import create_tables
from vehicle_api.dependencies import get_vehicle_service
from vehicle_api.main import app
from vehicle_api.services.vehicle_service import VehicleService


@pytest_asyncio.fixture
async def session_factory():
    # One shared connection so every session sees the same in-memory database.
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await create_tables(engine)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
def service(session_factory):
    return VehicleService(session_factory=session_factory, date_config=DateParsingConfig())


@pytest_asyncio.fixture
async def client(service):
    app.dependency_overrides[get_vehicle_service] = lambda: service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
