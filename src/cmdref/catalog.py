"""Command catalog retrieval.

Downloads the linux-command index (``dist/data.json``), keeps it in the
store for ``catalog_ttl_days``, and turns each raw record into a
``CatalogEntry`` with its derived detail URL.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from pydantic import TypeAdapter

from cmdref.cache import CATALOG_CACHE_KEY, DAY_MS, cached_fetch, now_ms
from cmdref.errors import FetchError
from cmdref.models.cache import CatalogCacheEntry
from cmdref.models.catalog import CatalogEntry, RawCatalogEntry

if TYPE_CHECKING:
    import httpx

    from cmdref.cache import Clock
    from cmdref.config import CacheSettings, SourceSettings
    from cmdref.protocols import KeyValueStore

log = structlog.get_logger()

_INDEX_ADAPTER = TypeAdapter(dict[str, RawCatalogEntry])


def detail_url(base_url: str, name: str) -> str:
    """Return the reference document URL for ``name``."""
    return f"{base_url.rstrip('/')}/{name}.md"


def to_catalog_entry(raw: RawCatalogEntry, base_url: str) -> CatalogEntry:
    return CatalogEntry(
        name=raw.name,
        description=raw.description,
        path=raw.path,
        detail_url=detail_url(base_url, raw.name),
    )


class CatalogFetcher:
    """Cache-or-network access to the full command catalog."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        store: KeyValueStore,
        source: SourceSettings,
        cache: CacheSettings,
        *,
        clock: Clock = now_ms,
    ) -> None:
        self._client = client
        self._store = store
        self._source = source
        self._ttl_ms = cache.catalog_ttl_days * DAY_MS
        self._clock = clock

    async def fetch_catalog(self) -> list[CatalogEntry]:
        commands = await cached_fetch(
            self._store,
            key=CATALOG_CACHE_KEY,
            ttl_ms=self._ttl_ms,
            model=CatalogCacheEntry,
            fetch=self._download_index,
            clock=self._clock,
        )
        base_url = self._source.detail_url_base
        return [to_catalog_entry(raw, base_url) for raw in commands.values()]

    async def _download_index(self) -> dict[str, RawCatalogEntry]:
        url = self._source.index_url
        response = await self._client.get(url)

        if not response.is_success:
            log.warning("fetch_failed", url=url, status_code=response.status_code)
            raise FetchError(response.status_code, url, what="command list")

        commands = _INDEX_ADAPTER.validate_json(response.content)
        log.info("fetch_complete", url=url, status_code=response.status_code, entries=len(commands))
        return commands
