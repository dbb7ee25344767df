"""TTL cache layered over a plain key-value store.

Values are persisted as JSON ``CacheEntry`` documents carrying the write
time in epoch milliseconds. An entry is served only while
``now - timestamp < ttl``. Stored values that fail to parse, fail
validation, or are too old are all treated as a miss; none of these is ever
raised to the caller.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, TypeVar

import structlog
from pydantic import ValidationError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from cmdref.models.cache import CacheEntry
    from cmdref.protocols import KeyValueStore

    Clock = Callable[[], int]

log = structlog.get_logger()

T = TypeVar("T")

CATALOG_CACHE_KEY = "linux-commands-list"
DETAIL_CACHE_PREFIX = "linux-command-detail"

DAY_MS = 24 * 60 * 60 * 1000


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def detail_cache_key(name: str) -> str:
    return f"{DETAIL_CACHE_PREFIX}-{name}"


def is_fresh(timestamp: int, ttl_ms: int, now: int) -> bool:
    return now - timestamp < ttl_ms


async def read_entry(
    store: KeyValueStore,
    key: str,
    model: type[CacheEntry[T]],
    ttl_ms: int,
    clock: Clock = now_ms,
) -> T | None:
    """Return the cached payload under ``key``, or ``None`` if unusable."""
    raw = await store.get(key)
    if raw is None:
        log.debug("cache_miss", key=key, reason="absent")
        return None

    try:
        entry = model.model_validate_json(raw)
    except ValidationError:
        log.info("cache_miss", key=key, reason="invalid")
        return None

    if not is_fresh(entry.timestamp, ttl_ms, clock()):
        log.info("cache_miss", key=key, reason="stale", timestamp=entry.timestamp)
        return None

    log.info("cache_hit", key=key)
    return entry.data


async def write_entry(
    store: KeyValueStore,
    key: str,
    model: type[CacheEntry[T]],
    data: T,
    clock: Clock = now_ms,
) -> None:
    """Persist ``data`` under ``key`` with a fresh timestamp, replacing any old entry."""
    entry = model(data=data, timestamp=clock())
    await store.set(key, entry.model_dump_json(by_alias=True))


async def cached_fetch(
    store: KeyValueStore,
    *,
    key: str,
    ttl_ms: int,
    model: type[CacheEntry[T]],
    fetch: Callable[[], Awaitable[T]],
    clock: Clock = now_ms,
) -> T:
    """Serve ``key`` from the store when fresh, otherwise call ``fetch`` and cache it.

    Exactly one store write happens per successful fetch and none on a hit.
    Errors raised by ``fetch`` propagate unchanged and leave the store as it was.
    Concurrent misses on the same key are not coalesced: each caller fetches
    and the last write wins.
    """
    cached = await read_entry(store, key, model, ttl_ms, clock)
    if cached is not None:
        return cached

    data = await fetch()
    await write_entry(store, key, model, data, clock)
    return data


async def clear_all(store: KeyValueStore) -> None:
    """Remove the catalog entry and every per-command detail entry."""
    await store.remove(CATALOG_CACHE_KEY)

    removed = 0
    for key in await store.keys():
        if key.startswith(DETAIL_CACHE_PREFIX):
            await store.remove(key)
            removed += 1

    log.info("cache_cleared", detail_entries=removed)
