from __future__ import annotations

import re

from pydantic import BaseModel, field_validator

from cmdref.models.catalog import CatalogEntry

_COMMAND_NAME_RE = re.compile(r"^[^\s/\\]+$")


class SearchCommandsInput(BaseModel):
    keyword: str = ""

    @field_validator("keyword")
    @classmethod
    def validate_keyword(cls, v: str) -> str:
        v = v.strip()
        if len(v) > 200:
            raise ValueError("keyword must be at most 200 characters")
        return v


class SearchCommandsOutput(BaseModel):
    keyword: str
    total: int
    matches: list[CatalogEntry]


class GetCommandInput(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
        if len(v) > 100:
            raise ValueError("name must be at most 100 characters")
        if not _COMMAND_NAME_RE.match(v):
            raise ValueError(f"Invalid command name: {v!r}")
        return v


class GetCommandOutput(BaseModel):
    name: str
    description: str
    content: str
    syntax: str | None
    examples: list[str]
    detail_url: str
    markdown: str  # "# <name>\n\n<content>", ready to display
    source: str


class ClearCacheOutput(BaseModel):
    cleared: bool
