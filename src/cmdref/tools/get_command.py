"""Tool handler for get_command.

Receives AppState, loads one command's reference document (cache or
network + extraction), and returns it together with a ready-to-display
markdown rendering. No MCP or FastMCP imports; server.py handles the MCP
wiring.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from cmdref.errors import CmdRefError, ErrorCode
from cmdref.models.tools import GetCommandInput, GetCommandOutput

if TYPE_CHECKING:
    from cmdref.models.detail import CommandDetail
    from cmdref.state import AppState

SOURCE_ATTRIBUTION = "linux-command (jaywcjlove)"


def render_markdown(detail: CommandDetail) -> str:
    return f"# {detail.name}\n\n{detail.content}"


async def handle(name: str, state: AppState) -> dict:
    """Handle a get_command tool call."""
    log = structlog.get_logger().bind(tool="get_command", name=name)
    log.info("handler_called")

    try:
        validated = GetCommandInput(name=name)
    except ValueError as exc:
        raise CmdRefError(
            code=ErrorCode.INVALID_INPUT,
            message=str(exc),
            suggestion="Provide a single command name as returned by search_commands.",
            recoverable=False,
        ) from exc

    detail = await state.details.fetch_detail(validated.name)
    log.info("detail_loaded", examples=len(detail.examples), content_length=len(detail.content))

    output = GetCommandOutput(
        name=detail.name,
        description=detail.description,
        content=detail.content,
        syntax=detail.syntax,
        examples=detail.examples,
        detail_url=state.details.detail_url(detail.name),
        markdown=render_markdown(detail),
        source=SOURCE_ATTRIBUTION,
    )
    return output.model_dump(mode="json")
