"""Key-value store backends.

``SqliteStore`` catches ``aiosqlite.Error`` internally and degrades
gracefully: read failures return ``None`` (treated as a cache miss by
callers), write and remove failures are logged and ignored (fetched content
is still returned). Infrastructure errors never cross the store boundary and
are logged with ``exc_info=True`` so they stay observable on stderr.
"""

from __future__ import annotations

import aiosqlite
import structlog

log = structlog.get_logger()

_CREATE_KV_TABLE = """
CREATE TABLE IF NOT EXISTS kv_store (
    key   TEXT PRIMARY KEY,
    value TEXT NOT NULL
)
"""


class MemoryStore:
    """Dict-backed store implementing KeyValueStore. Never suspends."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    async def keys(self) -> list[str]:
        return list(self._data)


class SqliteStore:
    """SQLite-backed store implementing KeyValueStore."""

    def __init__(self, db: aiosqlite.Connection) -> None:
        self._db = db

    async def init_db(self) -> None:
        """Create the table and set WAL mode. Called once at startup."""
        await self._db.execute("PRAGMA journal_mode = WAL")
        await self._db.execute(_CREATE_KV_TABLE)
        await self._db.commit()

    async def get(self, key: str) -> str | None:
        """Read a value. Returns ``None`` on miss or read failure."""
        try:
            cursor = await self._db.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
            row = await cursor.fetchone()
            return None if row is None else row[0]
        except aiosqlite.Error:
            log.warning("store_read_error", key=key, exc_info=True)
            return None

    async def set(self, key: str, value: str) -> None:
        """Write a value, replacing any previous one. Non-fatal on failure."""
        try:
            await self._db.execute(
                "INSERT OR REPLACE INTO kv_store (key, value) VALUES (?, ?)",
                (key, value),
            )
            await self._db.commit()
        except aiosqlite.Error:
            log.warning("store_write_error", key=key, exc_info=True)

    async def remove(self, key: str) -> None:
        """Delete a key if present. Non-fatal on failure."""
        try:
            await self._db.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            await self._db.commit()
        except aiosqlite.Error:
            log.warning("store_remove_error", key=key, exc_info=True)

    async def keys(self) -> list[str]:
        """List every stored key. Returns an empty list on failure."""
        try:
            cursor = await self._db.execute("SELECT key FROM kv_store")
            return [row[0] for row in await cursor.fetchall()]
        except aiosqlite.Error:
            log.warning("store_keys_error", exc_info=True)
            return []
