# pylint: disable=redefined-outer-name
# pylint: disable=unused-argument

from collections.abc import AsyncIterator
from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from employee_api.app import create_app
from employee_api.config import Settings
from employee_api.crud.employee import EmployeeRepository
from employee_api.schemas.employee import EmployeeCreate
from employee_api.utils.database import create_session_factory, init_models


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite+aiosqlite://",
        DB_CREATE_ALL=False,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    # one shared in-memory database for every connection of the test
    _engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_models(_engine)
    yield _engine
    await _engine.dispose()


@pytest.fixture
async def db(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    async with create_session_factory(engine)() as session:
        yield session


@pytest.fixture
def repository(db: AsyncSession) -> EmployeeRepository:
    return EmployeeRepository(db)


@pytest.fixture
def app(settings: Settings, engine: AsyncEngine):
    return create_app(settings, engine=engine)


@pytest.fixture
async def client(app) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
def make_employee():
    def _make(**overrides) -> EmployeeCreate:
        data = {
            "full_name": "Ann Lee",
            "email": "ann@x.com",
            "department": "Eng",
        }
        data.update(overrides)
        return EmployeeCreate(**data)

    return _make


@pytest.fixture
def hire_date() -> datetime:
    return datetime(2024, 1, 15, 9, 30, 0)
