"""Unit tests for cmdref.store."""

from __future__ import annotations

from typing import TYPE_CHECKING

import aiosqlite
import pytest

from cmdref.store import MemoryStore, SqliteStore

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


@pytest.fixture()
async def sqlite_store() -> AsyncGenerator[SqliteStore, None]:
    async with aiosqlite.connect(":memory:") as db:
        store = SqliteStore(db)
        await store.init_db()
        yield store


def _break(store: SqliteStore) -> None:
    async def failing_execute(*args, **kwargs):
        raise aiosqlite.OperationalError("disk I/O error")

    store._db.execute = failing_execute  # type: ignore[assignment]


# ---------------------------------------------------------------------------
# MemoryStore
# ---------------------------------------------------------------------------


class TestMemoryStore:
    async def test_set_and_get(self) -> None:
        store = MemoryStore()
        await store.set("a", "1")
        assert await store.get("a") == "1"

    async def test_get_missing_returns_none(self) -> None:
        assert await MemoryStore().get("nope") is None

    async def test_overwrite(self) -> None:
        store = MemoryStore({"a": "1"})
        await store.set("a", "2")
        assert await store.get("a") == "2"

    async def test_remove_and_remove_missing(self) -> None:
        store = MemoryStore({"a": "1"})
        await store.remove("a")
        await store.remove("a")
        assert await store.get("a") is None

    async def test_keys(self) -> None:
        store = MemoryStore({"a": "1", "b": "2"})
        assert sorted(await store.keys()) == ["a", "b"]

    async def test_initial_mapping_is_copied(self) -> None:
        initial = {"a": "1"}
        store = MemoryStore(initial)
        await store.set("b", "2")
        assert initial == {"a": "1"}


# ---------------------------------------------------------------------------
# SqliteStore
# ---------------------------------------------------------------------------


class TestSqliteStore:
    async def test_set_and_get(self, sqlite_store: SqliteStore) -> None:
        await sqlite_store.set("linux-commands-list", '{"data": {}, "timestamp": 1}')
        assert await sqlite_store.get("linux-commands-list") == '{"data": {}, "timestamp": 1}'

    async def test_get_missing_returns_none(self, sqlite_store: SqliteStore) -> None:
        assert await sqlite_store.get("missing") is None

    async def test_upsert_overwrites(self, sqlite_store: SqliteStore) -> None:
        await sqlite_store.set("k", "Version 1")
        await sqlite_store.set("k", "Version 2")
        assert await sqlite_store.get("k") == "Version 2"
        assert await sqlite_store.keys() == ["k"]

    async def test_remove(self, sqlite_store: SqliteStore) -> None:
        await sqlite_store.set("k", "v")
        await sqlite_store.remove("k")
        assert await sqlite_store.get("k") is None
        # Removing a missing key is a no-op
        await sqlite_store.remove("k")

    async def test_keys(self, sqlite_store: SqliteStore) -> None:
        await sqlite_store.set("a", "1")
        await sqlite_store.set("b", "2")
        assert sorted(await sqlite_store.keys()) == ["a", "b"]

    async def test_unicode_round_trip(self, sqlite_store: SqliteStore) -> None:
        await sqlite_store.set("linux-command-detail-ls", "显示目录内容列表")
        assert await sqlite_store.get("linux-command-detail-ls") == "显示目录内容列表"

    async def test_read_failure_returns_none(self, sqlite_store: SqliteStore) -> None:
        await sqlite_store.set("k", "v")
        _break(sqlite_store)
        assert await sqlite_store.get("k") is None

    async def test_write_failure_does_not_raise(self, sqlite_store: SqliteStore) -> None:
        _break(sqlite_store)
        await sqlite_store.set("k", "v")

    async def test_remove_failure_does_not_raise(self, sqlite_store: SqliteStore) -> None:
        _break(sqlite_store)
        await sqlite_store.remove("k")

    async def test_keys_failure_returns_empty(self, sqlite_store: SqliteStore) -> None:
        await sqlite_store.set("k", "v")
        _break(sqlite_store)
        assert await sqlite_store.keys() == []
