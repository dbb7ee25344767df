from __future__ import annotations

from cmdref.models.cache import CacheEntry, CatalogCacheEntry, DetailCacheEntry
from cmdref.models.catalog import CatalogEntry, RawCatalogEntry
from cmdref.models.detail import CommandDetail
from cmdref.models.tools import (
    ClearCacheOutput,
    GetCommandInput,
    GetCommandOutput,
    SearchCommandsInput,
    SearchCommandsOutput,
)

__all__ = [
    # catalog
    "RawCatalogEntry",
    "CatalogEntry",
    # detail
    "CommandDetail",
    # cache
    "CacheEntry",
    "CatalogCacheEntry",
    "DetailCacheEntry",
    # tools
    "SearchCommandsInput",
    "SearchCommandsOutput",
    "GetCommandInput",
    "GetCommandOutput",
    "ClearCacheOutput",
]
