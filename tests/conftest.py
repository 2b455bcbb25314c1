import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from explorer.dependencies import get_catalog_client, get_registry
from explorer.main import app
from explorer.services.catalog_client import CatalogClient
from explorer.services.explorer_service import ExplorerRegistry
from tests.fakes import BASE_URL, FakeCatalog


@pytest.fixture
def fake_catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
async def catalog_client(fake_catalog: FakeCatalog) -> CatalogClient:
    http = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(fake_catalog.handler))
    client = CatalogClient(http, list_limit=151, list_offset=0)
    yield client
    await client.aclose()


@pytest.fixture
def registry() -> ExplorerRegistry:
    return ExplorerRegistry()


@pytest.fixture
async def client(catalog_client: CatalogClient, registry: ExplorerRegistry) -> AsyncClient:
    """HTTP client against the app with the upstream catalog faked."""
    app.dependency_overrides[get_catalog_client] = lambda: catalog_client
    app.dependency_overrides[get_registry] = lambda: registry
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
