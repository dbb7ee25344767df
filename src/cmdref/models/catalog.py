from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RawCatalogEntry(BaseModel):
    """Single entry of dist/data.json, keyed upstream by command name.

    The index uses one-letter field names; they are kept as aliases so the
    cached copy round-trips in the same shape it was downloaded in.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="n")
    description: str = Field(default="", alias="d")
    path: str = Field(default="", alias="p")


class CatalogEntry(BaseModel):
    """Catalog entry with its derived detail document URL."""

    name: str
    description: str
    path: str
    detail_url: str
