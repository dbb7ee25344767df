"""Protocol interfaces for swappable components.

Fetchers and AppState reference these protocols, not the concrete
implementations, so tests can substitute an in-memory store and future
backends can be swapped in without touching fetcher code.
"""

from __future__ import annotations

from typing import Protocol


class KeyValueStore(Protocol):
    """String-keyed, string-valued store with no expiry of its own.

    Per-key get and set are atomic. TTL handling lives in cmdref.cache.
    """

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def remove(self, key: str) -> None: ...

    async def keys(self) -> list[str]: ...
