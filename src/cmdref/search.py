"""Keyword filter over an already-fetched catalog.

Pure business logic: no knowledge of AppState, the store, or the network.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cmdref.models.catalog import CatalogEntry


def search_commands(entries: Iterable[CatalogEntry], keyword: str) -> list[CatalogEntry]:
    """Return entries whose name or description contains ``keyword``, ignoring case.

    An empty keyword matches every entry. Callers that want different
    behaviour for an empty query must handle it themselves.
    """
    needle = keyword.lower()
    return [
        entry
        for entry in entries
        if needle in entry.name.lower() or needle in entry.description.lower()
    ]
