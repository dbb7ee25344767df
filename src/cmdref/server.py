"""MCP server entrypoint.

Responsibilities (and nothing more):
- Configure structlog
- Create AppState via the FastMCP lifespan context manager
- Register tools
- Start the stdio transport
"""

from __future__ import annotations

import json
import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

import aiosqlite
import httpx
import structlog
from mcp.server.fastmcp import Context, FastMCP
from mcp.types import CallToolResult, TextContent

import cmdref.tools.clear_cache as t_clear
import cmdref.tools.get_command as t_get
import cmdref.tools.search_commands as t_search
from cmdref import __version__
from cmdref.catalog import CatalogFetcher
from cmdref.config import Settings
from cmdref.detail import DetailFetcher
from cmdref.errors import CmdRefError, ErrorCode
from cmdref.fetcher import build_http_client
from cmdref.state import AppState
from cmdref.store import MemoryStore, SqliteStore

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable

log = structlog.get_logger()


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------


def _setup_logging(settings: Settings) -> None:
    """Configure structlog. Called once at startup before any log statements."""
    log_level = logging.getLevelNamesMapping()[settings.logging.level]

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.logging.format == "json":
        processors = [*shared_processors, structlog.processors.JSONRenderer()]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        # Logs go to stderr; stdout is reserved for the MCP JSON-RPC stream
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncGenerator[AppState, None]:
    """Create and tear down all shared resources for the server's lifetime."""
    settings = Settings()
    _setup_logging(settings)

    log.info("server_starting", version=__version__, cache_backend=settings.cache.backend)

    http_client = build_http_client(settings.fetcher)

    db: aiosqlite.Connection | None = None
    if settings.cache.backend == "sqlite":
        db_path = Path(settings.cache.db_path).expanduser()
        db_path.parent.mkdir(parents=True, exist_ok=True)
        db = await aiosqlite.connect(str(db_path))
        sqlite_store = SqliteStore(db)
        await sqlite_store.init_db()
        store = sqlite_store
    else:
        store = MemoryStore()

    state = AppState(
        settings=settings,
        store=store,
        catalog=CatalogFetcher(http_client, store, settings.source, settings.cache),
        details=DetailFetcher(http_client, store, settings.source, settings.cache),
        http_client=http_client,
    )

    log.info("server_started", version=__version__)

    try:
        yield state
    finally:
        await http_client.aclose()
        if db is not None:
            await db.close()
        log.info("server_stopping")


# ---------------------------------------------------------------------------
# FastMCP instance and tool registration
# ---------------------------------------------------------------------------

mcp = FastMCP("cmdref", lifespan=lifespan)
# FastMCP has no version kwarg. Set it on the underlying Server
# so the MCP initialize handshake reports our version, not the SDK's.
mcp._mcp_server.version = __version__  # pyright: ignore[reportPrivateUsage]


def _serialise_tool_error(error: CmdRefError) -> CallToolResult:
    """Convert a CmdRefError to the MCP tool error result envelope."""
    return CallToolResult(
        content=[TextContent(type="text", text=json.dumps(error.to_dict()))],
        isError=True,
    )


async def _run_tool(tool: str, call: Awaitable[dict]) -> object:
    try:
        return await call
    except CmdRefError as exc:
        log.warning(
            "tool_error",
            tool=tool,
            code=exc.code,
            message=exc.message,
            recoverable=exc.recoverable,
        )
        return _serialise_tool_error(exc)
    except httpx.HTTPError as exc:
        log.warning("tool_network_error", tool=tool, error=str(exc))
        return _serialise_tool_error(
            CmdRefError(
                code=ErrorCode.FETCH_FAILED,
                message=f"Network error: {exc}",
                suggestion="Check your internet connection and try again.",
                recoverable=True,
            )
        )
    except Exception:
        log.error("tool_unexpected_error", tool=tool, exc_info=True)
        raise


@mcp.tool()
async def search_commands(ctx: Context, keyword: str = "") -> object:
    """Search Linux commands by name or description.

    Matching is a case-insensitive substring test. Omit the keyword to list
    every known command.
    """
    state: AppState = ctx.request_context.lifespan_context
    return await _run_tool("search_commands", t_search.handle(keyword, state))


@mcp.tool()
async def get_command(name: str, ctx: Context) -> object:
    """Fetch the reference document for one Linux command.

    Returns the description, cleaned markdown content and up to ten shell
    examples extracted from the document.
    """
    state: AppState = ctx.request_context.lifespan_context
    return await _run_tool("get_command", t_get.handle(name, state))


@mcp.tool()
async def clear_cache(ctx: Context) -> object:
    """Drop the cached command list and every cached command document."""
    state: AppState = ctx.request_context.lifespan_context
    return await _run_tool("clear_cache", t_clear.handle(state))


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
