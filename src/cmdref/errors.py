from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    COMMAND_NOT_FOUND = "COMMAND_NOT_FOUND"
    FETCH_FAILED = "FETCH_FAILED"
    INVALID_INPUT = "INVALID_INPUT"


class CmdRefError(Exception):
    """Base class for every expected failure surfaced to callers.

    Tool wrappers in server.py catch this and serialise it into the MCP
    error result. Core modules raise it and never catch it themselves.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: str,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.recoverable = recoverable

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "suggestion": self.suggestion,
                "recoverable": self.recoverable,
            }
        }


class FetchError(CmdRefError):
    """A remote resource answered with a non-success status."""

    def __init__(self, status: int, url: str, what: str = "resource") -> None:
        super().__init__(
            code=ErrorCode.FETCH_FAILED,
            message=f"Failed to fetch {what}: {status}",
            suggestion="The command reference CDN may be temporarily unavailable.",
            recoverable=status >= 500 or status in {408, 429},
        )
        self.status = status
        self.url = url


class NotFoundError(CmdRefError):
    """The reference document for a command does not exist upstream."""

    def __init__(self, name: str) -> None:
        super().__init__(
            code=ErrorCode.COMMAND_NOT_FOUND,
            message=f"Command '{name}' not found",
            suggestion="Call search_commands to find the exact command name.",
            recoverable=False,
        )
        self.name = name
