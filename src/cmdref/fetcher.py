"""Shared HTTP client for the command reference CDN.

All network I/O goes through a single ``httpx.AsyncClient`` created at
startup and injected into the fetchers. The lifespan owns its lifecycle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from cmdref import __version__

if TYPE_CHECKING:
    from cmdref.config import FetcherSettings


def build_http_client(settings: FetcherSettings) -> httpx.AsyncClient:
    """Create the shared httpx client. Called once at startup."""
    return httpx.AsyncClient(
        # unpkg answers versionless package URLs with a redirect to the pinned version
        follow_redirects=True,
        timeout=httpx.Timeout(settings.timeout_seconds),
        headers={"User-Agent": f"cmdref/{__version__}"},
        limits=httpx.Limits(
            max_connections=10,
            max_keepalive_connections=5,
        ),
    )
