from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

from cmdref.models.catalog import RawCatalogEntry
from cmdref.models.detail import CommandDetail

T = TypeVar("T")


class CacheEntry(BaseModel, Generic[T]):
    """Unit persisted in the key-value store, serialised as JSON."""

    data: T
    timestamp: int  # Epoch milliseconds at write time


CatalogCacheEntry = CacheEntry[dict[str, RawCatalogEntry]]
DetailCacheEntry = CacheEntry[CommandDetail]
