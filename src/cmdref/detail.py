"""Per-command reference document retrieval.

Each command's markdown is fetched on demand, run through the extractor,
and the resulting ``CommandDetail`` is cached under its own key for
``detail_ttl_days``. Cache hits return the stored record as-is.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

import structlog

from cmdref.cache import DAY_MS, cached_fetch, detail_cache_key, now_ms
from cmdref.catalog import detail_url
from cmdref.errors import FetchError, NotFoundError
from cmdref.extractor import extract
from cmdref.models.cache import DetailCacheEntry

if TYPE_CHECKING:
    import httpx

    from cmdref.cache import Clock
    from cmdref.config import CacheSettings, SourceSettings
    from cmdref.models.detail import CommandDetail
    from cmdref.protocols import KeyValueStore

log = structlog.get_logger()


class DetailFetcher:
    """Cache-or-network access to one command's reference document."""

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
        self._ttl_ms = cache.detail_ttl_days * DAY_MS
        self._clock = clock

    def detail_url(self, name: str) -> str:
        return detail_url(self._source.detail_url_base, name)

    async def fetch_detail(self, name: str) -> CommandDetail:
        return await cached_fetch(
            self._store,
            key=detail_cache_key(name),
            ttl_ms=self._ttl_ms,
            model=DetailCacheEntry,
            fetch=partial(self._download_document, name),
            clock=self._clock,
        )

    async def _download_document(self, name: str) -> CommandDetail:
        url = self.detail_url(name)
        response = await self._client.get(url)

        if response.status_code == 404:
            log.info("command_not_found", name=name, url=url)
            raise NotFoundError(name)
        if not response.is_success:
            log.warning("fetch_failed", url=url, status_code=response.status_code)
            raise FetchError(response.status_code, url, what="command detail")

        markdown = response.text
        log.info(
            "fetch_complete",
            url=url,
            status_code=response.status_code,
            content_length=len(markdown),
        )
        return extract(name, markdown)
