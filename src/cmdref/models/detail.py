from __future__ import annotations

from pydantic import BaseModel, Field


class CommandDetail(BaseModel):
    """Structured record extracted from a command's reference markdown."""

    name: str
    description: str
    content: str  # Cleaned markdown, bounded in length
    syntax: str | None = None  # Reserved; extraction never fills it
    examples: list[str] = Field(default_factory=list)  # At most 10, document order
