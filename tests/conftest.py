"""
Pytest configuration and fixtures.
"""

import os

# Settings and the global session factory are built at import time.
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

from typing import AsyncGenerator, Dict  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from skillz.api.app import create_app  # noqa: E402
from skillz.application.interfaces.gateways import CareerGatewayInterface  # noqa: E402
from skillz.application.interfaces.repositories import (  # noqa: E402
    JobExperienceRepositoryInterface,
    ResumeRepositoryInterface,
    ResumeSkillRepositoryInterface,
    SkillCatalogRepositoryInterface,
    SkillUnlockRepositoryInterface,
    UserSkillRepositoryInterface,
)
from skillz.config.database import get_db_session  # noqa: E402
from skillz.domain.entities.skill import Skill  # noqa: E402
from skillz.domain.value_objects.skill_type import SkillType  # noqa: E402
from skillz.infrastructure.database.models import Base  # noqa: E402
from skillz.infrastructure.database.repositories.transaction_repository import (  # noqa: E402
    TransactionService,
)
from skillz.infrastructure.database.seeds import seed_skill_catalog  # noqa: E402

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_USER_ID = 1
OTHER_USER_ID = 2


def create_test_engine():
    return create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


def create_test_session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


async def create_schema(engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed_catalog(session_factory) -> None:
    async with session_factory() as session:
        await seed_skill_catalog(session)


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine with all tables."""
    engine = create_test_engine()
    await create_schema(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session_factory = create_test_session_factory(test_engine)

    async with async_session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def seeded_session(db_session) -> AsyncSession:
    """Database session with the skill catalog loaded."""
    await seed_skill_catalog(db_session)
    return db_session


@pytest.fixture
def client():
    """
    Test client over a fresh seeded in-memory database.

    The schema and the seed run on the client's own event loop, the same
    loop that serves requests, so the single pooled connection is never
    shared across loops.
    """
    engine = create_test_engine()
    session_factory = create_test_session_factory(engine)

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app = create_app()
    app.dependency_overrides[get_db_session] = override_get_db_session

    with TestClient(app, headers={"X-User-ID": str(TEST_USER_ID)}) as test_client:
        test_client.portal.call(create_schema, engine)
        test_client.portal.call(seed_catalog, session_factory)
        yield test_client
        test_client.portal.call(engine.dispose)


@pytest.fixture
def skill_ids(client) -> Dict[str, int]:
    """Catalog skill ids by name."""
    response = client.get("/api/skills")
    assert response.status_code == 200
    return {skill["name"]: skill["id"] for skill in response.json()}


@pytest.fixture
def other_user_headers() -> Dict[str, str]:
    return {"X-User-ID": str(OTHER_USER_ID)}


@pytest.fixture
def sample_skills() -> Dict[int, Skill]:
    """Catalog entries keyed by id, as returned by get_skills_by_ids."""
    return {
        1: Skill(id=1, name="JavaScript", skill_type=SkillType.HARD, max_level=10),
        2: Skill(id=2, name="Python", skill_type=SkillType.HARD, max_level=5),
        3: Skill(
            id=3,
            name="Team Communication",
            skill_type=SkillType.SOFT,
            max_level=10,
            description="Effective team communication",
        ),
    }


@pytest.fixture
def mock_skill_catalog_repository():
    """Mock skill catalog repository."""
    return AsyncMock(spec=SkillCatalogRepositoryInterface)


@pytest.fixture
def mock_user_skill_repository():
    """Mock user skill repository."""
    return AsyncMock(spec=UserSkillRepositoryInterface)


@pytest.fixture
def mock_job_experience_repository():
    """Mock job experience repository."""
    return AsyncMock(spec=JobExperienceRepositoryInterface)


@pytest.fixture
def mock_skill_unlock_repository():
    """Mock skill unlock repository."""
    return AsyncMock(spec=SkillUnlockRepositoryInterface)


@pytest.fixture
def mock_resume_repository():
    """Mock resume repository."""
    return AsyncMock(spec=ResumeRepositoryInterface)


@pytest.fixture
def mock_resume_skill_repository():
    """Mock resume skill repository."""
    return AsyncMock(spec=ResumeSkillRepositoryInterface)


@pytest.fixture
def mock_transaction_service():
    """Transaction service that runs operations without a database."""
    service = AsyncMock(spec=TransactionService)

    async def run(operation):
        return await operation()

    service.execute_in_transaction.side_effect = run
    return service


@pytest.fixture
def mock_career_gateway():
    """Mock career API gateway."""
    return AsyncMock(spec=CareerGatewayInterface)


@pytest_asyncio.fixture
async def file_session_factory(tmp_path):
    """Seeded file-backed database; each session gets its own connection."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'skillz.db'}")
    await create_schema(engine)
    session_factory = create_test_session_factory(engine)
    await seed_catalog(session_factory)

    yield session_factory

    await engine.dispose()
