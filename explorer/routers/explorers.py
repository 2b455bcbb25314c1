"""Explorer router: one explorer instance per browser session."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from explorer.dependencies import get_catalog_client, get_registry
from explorer.schemas.explorer import ExplorerView, SelectEntry
from explorer.services.catalog_client import CatalogClient
from explorer.services.explorer_service import (
    CatalogExplorer,
    ExplorerRegistry,
    open_explorer,
)

router = APIRouter(prefix="/explorers", tags=["explorers"])


def _get_explorer_or_404(registry: ExplorerRegistry, explorer_id: str) -> CatalogExplorer:
    explorer = registry.get(explorer_id)
    if explorer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Explorer not found")
    return explorer


@router.post("", response_model=ExplorerView, status_code=status.HTTP_201_CREATED)
async def create_explorer_endpoint(
    registry: ExplorerRegistry = Depends(get_registry),
    client: CatalogClient = Depends(get_catalog_client),
):
    """Mount a new explorer and load its entry list."""
    explorer = await open_explorer(registry, client)
    return explorer.view()


@router.get("/{explorer_id}", response_model=ExplorerView)
async def get_explorer_endpoint(
    explorer_id: str,
    registry: ExplorerRegistry = Depends(get_registry),
):
    return _get_explorer_or_404(registry, explorer_id).view()


@router.post("/{explorer_id}/selection", response_model=ExplorerView)
async def select_entry_endpoint(
    explorer_id: str,
    body: SelectEntry,
    registry: ExplorerRegistry = Depends(get_registry),
):
    """Select an entry; served from the explorer's cache when possible."""
    explorer = _get_explorer_or_404(registry, explorer_id)
    try:
        return await explorer.select(body.name)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.delete("/{explorer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_explorer_endpoint(
    explorer_id: str,
    registry: ExplorerRegistry = Depends(get_registry),
):
    if registry.remove(explorer_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Explorer not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
