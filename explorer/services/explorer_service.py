"""Explorer service: one CatalogExplorer per browser session.

Responsibilities:
  - Load the fixed first page of entries once, when the explorer is mounted
  - Resolve selections through the detail cache, fetching on a miss
  - Keep only the latest selection's result on display when fetches overlap
  - Track explorer instances by id until they are torn down or go idle
"""

import logging
import time
import uuid
from typing import Callable, Mapping, Optional

import httpx

from explorer.config import settings
from explorer.data.type_colors import TYPE_COLORS
from explorer.schemas.catalog import DetailRecord, ListEntry
from explorer.schemas.explorer import ExplorerView
from explorer.services.catalog_client import CatalogClient
from explorer.services.detail_cache import DetailCache
from explorer.services.presenter import present

logger = logging.getLogger(__name__)

# Raised by CatalogClient for transport, status and payload problems.
FETCH_ERRORS = (httpx.HTTPError, ValueError)


class CatalogExplorer:
    def __init__(
        self,
        client: CatalogClient,
        cache: Optional[DetailCache] = None,
        palette: Mapping[str, str] = TYPE_COLORS,
        explorer_id: Optional[str] = None,
    ):
        self.explorer_id = explorer_id or uuid.uuid4().hex
        self.client = client
        self.cache = cache if cache is not None else DetailCache()
        self.palette = palette
        self.entries: tuple[ListEntry, ...] = ()
        self.initial_loading = True
        self.selection = ""
        self.detail_loading = False
        self.detail: Optional[DetailRecord] = None
        self._mounted = False
        self._latest_token = 0
        self.last_access = time.monotonic()

    async def mount(self) -> None:
        """Load the entry list. Only the first call does any work."""
        if self._mounted:
            return
        self._mounted = True
        try:
            self.entries = await self.client.fetch_entries()
        except FETCH_ERRORS as exc:
            logger.error("Failed to fetch catalog entries for explorer %s: %s", self.explorer_id, exc)
        finally:
            self.initial_loading = False

    def is_listed(self, name: str) -> bool:
        return any(entry.name == name for entry in self.entries)

    async def select(self, name: str) -> ExplorerView:
        """Select an entry and resolve its detail record.

        Raises ValueError if the name is not in the loaded list.
        """
        if not self.is_listed(name):
            raise ValueError(f"'{name}' is not in the catalog list")

        self.selection = name
        self._latest_token += 1
        token = self._latest_token

        cached = self.cache.get(name)
        if cached is not None:
            # Supersedes any outstanding fetch, so nothing is loading for the
            # current selection any more.
            self.detail = cached
            self.detail_loading = False
            return self.view()

        self.detail_loading = True
        try:
            record = await self.cache.get_or_fetch(name, self.client.fetch_detail)
        except FETCH_ERRORS as exc:
            logger.error("Failed to fetch details for %s (explorer %s): %s", name, self.explorer_id, exc)
        else:
            if token == self._latest_token:
                self.detail = record
            else:
                logger.debug(
                    "Discarding stale response for %s (token %d, latest %d)",
                    name,
                    token,
                    self._latest_token,
                )
        finally:
            if token == self._latest_token:
                self.detail_loading = False
        return self.view()

    def view(self) -> ExplorerView:
        return present(
            initial_loading=self.initial_loading,
            entries=self.entries,
            selection=self.selection,
            detail_loading=self.detail_loading,
            detail=self.detail,
            cache_size=len(self.cache),
            cached_names=self.cache.names(),
            palette=self.palette,
            explorer_id=self.explorer_id,
        )

    def close(self) -> None:
        """Tear the explorer down, dropping every cached record."""
        self.cache.clear()
        self.detail = None


class ExplorerRegistry:
    """In-memory lookup of live explorers by id.

    Explorers not accessed for `idle_timeout` seconds are torn down on the
    next add or lookup.
    """

    def __init__(
        self,
        idle_timeout: float = settings.explorer_idle_timeout,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.idle_timeout = idle_timeout
        self._clock = clock
        self._explorers: dict[str, CatalogExplorer] = {}

    def __len__(self) -> int:
        return len(self._explorers)

    def add(self, explorer: CatalogExplorer) -> CatalogExplorer:
        self.evict_idle()
        explorer.last_access = self._clock()
        self._explorers[explorer.explorer_id] = explorer
        return explorer

    def get(self, explorer_id: str) -> Optional[CatalogExplorer]:
        self.evict_idle()
        explorer = self._explorers.get(explorer_id)
        if explorer is not None:
            explorer.last_access = self._clock()
        return explorer

    def remove(self, explorer_id: str) -> Optional[CatalogExplorer]:
        explorer = self._explorers.pop(explorer_id, None)
        if explorer is not None:
            explorer.close()
        return explorer

    def evict_idle(self) -> int:
        """Tear down every explorer idle for longer than the timeout."""
        now = self._clock()
        idle = [
            explorer_id
            for explorer_id, explorer in self._explorers.items()
            if now - explorer.last_access > self.idle_timeout
        ]
        for explorer_id in idle:
            self.remove(explorer_id)
        if idle:
            logger.info("Evicted %d idle explorer(s)", len(idle))
        return len(idle)


async def open_explorer(registry: ExplorerRegistry, client: CatalogClient) -> CatalogExplorer:
    """Create, register and mount a new explorer."""
    explorer = registry.add(CatalogExplorer(client))
    await explorer.mount()
    logger.info("Opened explorer %s with %d entries", explorer.explorer_id, len(explorer.entries))
    return explorer
