from fastapi import HTTPException, Request, status

from explorer.services.catalog_client import CatalogClient
from explorer.services.explorer_service import ExplorerRegistry

registry = ExplorerRegistry()


def get_registry() -> ExplorerRegistry:
    return registry


def get_catalog_client(request: Request) -> CatalogClient:
    client = getattr(request.app.state, "catalog_client", None)
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Catalog client is not initialised",
        )
    return client
