import pytest
from httpx import AsyncClient, ASGITransport

from marketmate.db.database import Database
from marketmate.main import create_app


@pytest.fixture
async def database(tmp_path):
    """Fresh SQLite file per test, tables created."""
    db = Database(f"sqlite:///{tmp_path / 'marketmate.db'}")
    await db.connect()
    await db.create_tables()
    yield db
    await db.disconnect()


@pytest.fixture
async def session(database):
    async with database.session() as s:
        yield s


@pytest.fixture
async def client(database):
    """Client over the real app; the lifespan is not run, the database is already up."""
    app = create_app(database)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
