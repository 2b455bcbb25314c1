"""HTTP client for the upstream catalog (PokeAPI).

Errors are not handled here: transport failures and non-2xx statuses raise
``httpx.HTTPError``, malformed bodies raise ``ValueError`` (JSON decoding or
pydantic validation). Callers decide what to do with them.
"""

import logging

import httpx

from explorer.config import settings
from explorer.schemas.catalog import DetailRecord, EntryPage, ListEntry

logger = logging.getLogger(__name__)


class CatalogClient:
    def __init__(
        self,
        http: httpx.AsyncClient,
        list_limit: int = settings.list_limit,
        list_offset: int = settings.list_offset,
    ):
        self.http = http
        self.list_limit = list_limit
        self.list_offset = list_offset

    async def fetch_entries(self) -> tuple[ListEntry, ...]:
        """Return the fixed-size first page of entries, in service order."""
        resp = await self.http.get(
            "/pokemon", params={"limit": self.list_limit, "offset": self.list_offset}
        )
        resp.raise_for_status()
        page = EntryPage.model_validate(resp.json())
        logger.info("Fetched %d catalog entries", len(page.results))
        return page.results

    async def fetch_detail(self, name: str) -> DetailRecord:
        resp = await self.http.get(f"/pokemon/{name}")
        resp.raise_for_status()
        record = DetailRecord.model_validate(resp.json())
        logger.info("Fetched detail record for %s (id=%s)", name, record.id)
        return record

    async def aclose(self) -> None:
        await self.http.aclose()


def build_catalog_client() -> CatalogClient:
    """Create a client bound to the configured catalog base URL."""
    http = httpx.AsyncClient(
        base_url=settings.catalog_base_url,
        timeout=settings.request_timeout,
        headers={"Accept": "application/json"},
    )
    return CatalogClient(http)
