"""Tool handler for clear_cache."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from cmdref.cache import clear_all
from cmdref.models.tools import ClearCacheOutput

if TYPE_CHECKING:
    from cmdref.state import AppState


async def handle(state: AppState) -> dict:
    """Handle a clear_cache tool call."""
    log = structlog.get_logger().bind(tool="clear_cache")
    log.info("handler_called")

    await clear_all(state.store)

    return ClearCacheOutput(cleared=True).model_dump(mode="json")
