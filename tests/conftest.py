"""
Test infrastructure for the Blogful API.

Strategy
--------
- SQLite in-memory via aiosqlite, so no Postgres instance is needed.
- StaticPool makes every session share the one in-memory connection;
  a second connection would see an empty database.
- SQLite ignores foreign keys unless asked, so a ``connect`` listener turns
  them on; article deletes then cascade to comments as they do in Postgres.
- The app's get_db dependency is overridden so every request-scoped
  ArticleStore talks to the test database.
- Tables are created before and dropped after each test; ids restart at 1.
"""
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from blogful.database import Base, get_db
from blogful.main import app
from blogful.models import Article, User
from blogful.store import ArticleStore

from articles_fixtures import MALICIOUS_ARTICLE, make_articles, make_users

# ---------------------------------------------------------------------------
# Test database engine — SQLite in-memory with aiosqlite
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@event.listens_for(engine_test.sync_engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ---------------------------------------------------------------------------
# Dependency override — replace production get_db with the test session factory
# ---------------------------------------------------------------------------

async def override_get_db():
    async with async_session_test() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


app.dependency_overrides[get_db] = override_get_db


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after to guarantee isolation."""
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    """A live AsyncSession for seeding rows and asserting database state."""
    async with async_session_test() as session:
        yield session


@pytest_asyncio.fixture
async def store(db_session: AsyncSession) -> ArticleStore:
    """An ArticleStore bound to ``db_session`` for service-level tests."""
    return ArticleStore(db_session)


@pytest_asyncio.fixture
async def seeded_users(db_session: AsyncSession) -> list[dict]:
    users = make_users()
    db_session.add_all([User(**u) for u in users])
    await db_session.commit()
    return users


@pytest_asyncio.fixture
async def seeded_articles(db_session: AsyncSession, seeded_users: list[dict]) -> list[dict]:
    articles = make_articles()
    db_session.add_all([Article(**a) for a in articles])
    await db_session.commit()
    return articles


@pytest_asyncio.fixture
async def malicious_article(db_session: AsyncSession, seeded_users: list[dict]) -> dict:
    """A row written straight to the table, bypassing the service's sanitiser."""
    db_session.add(Article(**MALICIOUS_ARTICLE))
    await db_session.commit()
    return MALICIOUS_ARTICLE


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    """An httpx.AsyncClient wired to the FastAPI app via ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
