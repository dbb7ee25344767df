"""Integration test fixtures.

Provides a fully wired AppState with an in-memory store and a real httpx
client (mocked per test with respx), plus a baseline environment for
subprocess-based MCP tests.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import httpx
import pytest

from cmdref.catalog import CatalogFetcher
from cmdref.config import Settings
from cmdref.detail import DetailFetcher
from cmdref.state import AppState

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator
    from pathlib import Path

    from cmdref.store import MemoryStore
    from tests.conftest import FakeClock


@pytest.fixture()
def subprocess_env(tmp_path: Path) -> dict[str, str]:
    """Baseline env dict for subprocess-based MCP integration tests.

    Overrides any local cmdref.yaml by pointing the cache at an isolated tmp
    directory and routing both remote resources to an unroutable address.
    """
    env = os.environ.copy()
    env["CMDREF__CACHE__BACKEND"] = "sqlite"
    env["CMDREF__CACHE__DB_PATH"] = str(tmp_path / "cache.db")
    env["CMDREF__SOURCE__INDEX_URL"] = "http://127.0.0.1:1/data.json"
    env["CMDREF__SOURCE__DETAIL_URL_BASE"] = "http://127.0.0.1:1/command"
    env["CMDREF__FETCHER__TIMEOUT_SECONDS"] = "2"
    return env


@pytest.fixture()
async def app_state(store: MemoryStore, clock: FakeClock) -> AsyncGenerator[AppState, None]:
    """Full AppState wired with the shared in-memory store and fake clock."""
    settings = Settings(cache={"backend": "memory"})
    async with httpx.AsyncClient() as client:
        yield AppState(
            settings=settings,
            store=store,
            catalog=CatalogFetcher(
                client, store, settings.source, settings.cache, clock=clock
            ),
            details=DetailFetcher(
                client, store, settings.source, settings.cache, clock=clock
            ),
            http_client=client,
        )
