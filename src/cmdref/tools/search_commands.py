"""Tool handler for search_commands.

Receives AppState, loads the catalog (cache or network), filters it, and
returns a structured dict. No MCP or FastMCP imports; server.py handles
the MCP wiring.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from cmdref.errors import CmdRefError, ErrorCode
from cmdref.models.tools import SearchCommandsInput, SearchCommandsOutput
from cmdref.search import search_commands

if TYPE_CHECKING:
    from cmdref.state import AppState


async def handle(keyword: str, state: AppState) -> dict:
    """Handle a search_commands tool call."""
    log = structlog.get_logger().bind(tool="search_commands", keyword=keyword)
    log.info("handler_called")

    try:
        validated = SearchCommandsInput(keyword=keyword)
    except ValueError as exc:
        raise CmdRefError(
            code=ErrorCode.INVALID_INPUT,
            message=str(exc),
            suggestion="Provide a short keyword (max 200 chars), or omit it to list everything.",
            recoverable=False,
        ) from exc

    entries = await state.catalog.fetch_catalog()

    # An empty keyword lists the whole catalog
    matches = search_commands(entries, validated.keyword) if validated.keyword else entries
    log.info("search_complete", match_count=len(matches), catalog_size=len(entries))

    output = SearchCommandsOutput(keyword=validated.keyword, total=len(matches), matches=matches)
    return output.model_dump(mode="json")
