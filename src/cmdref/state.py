"""Application state container.

AppState is created once at server startup (inside the FastMCP lifespan context
manager) and injected into every tool handler via the MCP Context object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from cmdref.catalog import CatalogFetcher
    from cmdref.config import Settings
    from cmdref.detail import DetailFetcher
    from cmdref.protocols import KeyValueStore


@dataclass
class AppState:
    """Holds all shared runtime state. Passed to every tool handler."""

    settings: Settings
    store: KeyValueStore
    catalog: CatalogFetcher
    details: DetailFetcher
    http_client: httpx.AsyncClient | None = None
