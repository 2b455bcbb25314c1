"""Memoization of detail records keyed by entry name.

The cache only grows: a name is stored at most once and its record is never
replaced. ``clear`` is called only when the owning explorer is torn down.
"""

import logging
from typing import Awaitable, Callable, Optional

from explorer.schemas.catalog import DetailRecord

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Awaitable[DetailRecord]]


class DetailCache:
    def __init__(self) -> None:
        self._records: dict[str, DetailRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def names(self) -> list[str]:
        """Cached names, in the order they were first stored."""
        return list(self._records)

    def get(self, name: str) -> Optional[DetailRecord]:
        return self._records.get(name)

    def store(self, name: str, record: DetailRecord) -> DetailRecord:
        """Store a record unless one is already cached; return the cached one."""
        return self._records.setdefault(name, record)

    async def get_or_fetch(self, name: str, fetch: Fetcher) -> DetailRecord:
        """Return the cached record for ``name``, fetching and storing it on a miss.

        Fetch errors propagate and leave the cache untouched.
        """
        cached = self._records.get(name)
        if cached is not None:
            logger.debug("Cache hit for %s", name)
            return cached
        record = await fetch(name)
        # An overlapping fetch for the same name may have stored first.
        return self.store(name, record)

    def clear(self) -> None:
        self._records.clear()
