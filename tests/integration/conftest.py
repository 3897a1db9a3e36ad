"""Integration test fixtures for database operations.

Each test gets a fresh schema built from SQLModel metadata. In-memory SQLite
is used unless TEST_DATABASE_URL points at another database (e.g. PostgreSQL).
Uses polyfactory for type-safe test data generation.
"""

import os
from collections.abc import AsyncGenerator
from uuid import UUID

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlmodel import SQLModel

import src.pantheon.models  # noqa: F401 - registers every table on the metadata
from src.pantheon.core.db import build_engine, get_session
from src.pantheon.services import (
    JobService,
    MentorService,
    NonprofitClientService,
    ProjectCycleService,
    RelationService,
    TeamRoleService,
    VolunteerService,
)
from tests.factories import ProjectCycleCreateFactory
from tests.helpers import seed_team_roles

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create test database engine with a freshly built schema."""
    test_engine = build_engine(url=TEST_DATABASE_URL)
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session. Services commit through `transaction()`."""
    async with get_session(engine) as session:
        yield session


# --- Services ---


@pytest.fixture
def cycle_service(db_session: AsyncSession) -> ProjectCycleService:
    return ProjectCycleService(db_session)


@pytest.fixture
def volunteer_service(db_session: AsyncSession) -> VolunteerService:
    return VolunteerService(db_session)


@pytest.fixture
def mentor_service(db_session: AsyncSession) -> MentorService:
    return MentorService(db_session)


@pytest.fixture
def client_service(db_session: AsyncSession) -> NonprofitClientService:
    return NonprofitClientService(db_session)


@pytest.fixture
def role_service(db_session: AsyncSession) -> TeamRoleService:
    return TeamRoleService(db_session)


@pytest.fixture
def relation_service(db_session: AsyncSession) -> RelationService:
    return RelationService(db_session)


@pytest.fixture
def job_service(db_session: AsyncSession) -> JobService:
    return JobService(db_session)


# --- Data ---


@pytest.fixture
async def cycle_id(cycle_service: ProjectCycleService) -> UUID:
    """A fresh, unarchived project cycle."""
    cycle = await cycle_service.create_cycle(ProjectCycleCreateFactory.build())
    return cycle.id


@pytest.fixture
async def team_roles(db_session: AsyncSession) -> dict[str, UUID]:
    """The default role catalog, as name -> id."""
    return await seed_team_roles(db_session)
