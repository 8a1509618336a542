"""
Pytest fixtures for the test database, repositories and HTTP client.

Tests run against an in-memory SQLite database by default; point
TEST_DATABASE_URL at PostgreSQL to run the same suite there. Tables are
created and dropped around every test for isolation.
"""

import os

os.environ.setdefault("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["DATABASE_URL"] = os.environ["TEST_DATABASE_URL"]
os.environ.setdefault("BOOTSTRAP_ON_STARTUP", "false")

from typing import AsyncGenerator

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession

from app.main import app
from app.db.base import Base
from app.db.session import async_session_maker, engine, get_db, init_models
from app.models import Driver, Passenger
from app.repositories import (
    BookingRepository,
    CourseRepository,
    DriverRepository,
    PassengerRepository,
    PassengerReviewRepository,
    ReviewRepository,
    StudentRepository,
)


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create tables, yield session, then drop tables for isolation."""
    await init_models(engine)

    async with async_session_maker() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    # in-memory SQLite lives on one pooled connection; release it with this test's loop
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the DB dependency with the test session."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def driver_repo(db_session: AsyncSession) -> DriverRepository:
    return DriverRepository(db_session)


@pytest_asyncio.fixture
async def passenger_repo(db_session: AsyncSession) -> PassengerRepository:
    return PassengerRepository(db_session)


@pytest_asyncio.fixture
async def booking_repo(db_session: AsyncSession) -> BookingRepository:
    return BookingRepository(db_session)


@pytest_asyncio.fixture
async def review_repo(db_session: AsyncSession) -> ReviewRepository:
    return ReviewRepository(db_session)


@pytest_asyncio.fixture
async def passenger_review_repo(db_session: AsyncSession) -> PassengerReviewRepository:
    return PassengerReviewRepository(db_session)


@pytest_asyncio.fixture
async def student_repo(db_session: AsyncSession) -> StudentRepository:
    return StudentRepository(db_session)


@pytest_asyncio.fixture
async def course_repo(db_session: AsyncSession) -> CourseRepository:
    return CourseRepository(db_session)


@pytest_asyncio.fixture
async def test_driver(driver_repo: DriverRepository) -> Driver:
    """The sample driver used throughout: ABCD with license 1."""
    return await driver_repo.save(Driver(name="ABCD", license_number="1"))


@pytest_asyncio.fixture
async def test_passenger(passenger_repo: PassengerRepository) -> Passenger:
    return await passenger_repo.save(Passenger())
