import pytest
from unittest.mock import AsyncMock
from httpx import AsyncClient, ASGITransport

from marketmate.db.database import Database
from marketmate.deps import get_dashboard_service, get_product_repository, get_sale_repository
from marketmate.main import create_app


@pytest.fixture
def mock_product_repository():
    """Product repository stand-in; no database involved."""
    mock = AsyncMock()
    mock.list_all = AsyncMock(return_value=[])
    return mock


@pytest.fixture
def mock_sale_repository():
    mock = AsyncMock()
    mock.list_all = AsyncMock(return_value=[])
    return mock


@pytest.fixture
def mock_dashboard_service():
    return AsyncMock()


@pytest.fixture
async def client(mock_product_repository, mock_sale_repository, mock_dashboard_service):
    """Async test client with every repository replaced by a mock."""
    app = create_app(Database("sqlite://"))
    app.dependency_overrides[get_product_repository] = lambda: mock_product_repository
    app.dependency_overrides[get_sale_repository] = lambda: mock_sale_repository
    app.dependency_overrides[get_dashboard_service] = lambda: mock_dashboard_service

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
