from __future__ import annotations

from typing import Optional

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData


class JenkinsClientError(Exception):
    """Base error for client failures."""


class JenkinsConfigurationError(JenkinsClientError, ValueError):
    """Missing or invalid startup configuration."""


class JenkinsNetworkError(JenkinsClientError):
    """Connection refused, timeout, DNS or TLS failure."""


class JenkinsHTTPError(JenkinsClientError):
    def __init__(
        self,
        *,
        status_code: int,
        method: str,
        url: str,
        message: str,
        response_text: Optional[str] = None,
    ):
        super().__init__(f"{status_code} {method} {url}: {message}")
        self.status_code = status_code
        self.method = method
        self.url = url
        self.response_text = response_text


class JenkinsProtocolError(JenkinsClientError):
    """Jenkins answered in a shape that breaks its documented contract."""


class JenkinsValidationError(JenkinsClientError, ValueError):
    def __init__(self, field: str, reason: str):
        super().__init__(f"{field} {reason}")
        self.field = field
        self.reason = reason


# --- Dispatch errors ------------------------------------------------------- #


class ToolError(McpError):
    """Base for errors surfaced by the tool dispatch layer."""

    def __init__(self, code: int, message: str):
        super().__init__(ErrorData(code=code, message=message))

    @property
    def code(self) -> int:
        return self.error.code


class ToolNotFoundError(ToolError):
    def __init__(self, tool: str):
        super().__init__(METHOD_NOT_FOUND, f"Unknown tool: {tool}")
        self.tool = tool


class InvalidArgumentsError(ToolError):
    def __init__(self, message: str, *, field: Optional[str] = None):
        super().__init__(INVALID_PARAMS, message)
        self.field = field


class ToolExecutionError(ToolError):
    def __init__(self, tool: str, message: str):
        super().__init__(INTERNAL_ERROR, f"Failed to execute tool {tool}: {message}")
        self.tool = tool


__all__ = [
    "JenkinsClientError",
    "JenkinsConfigurationError",
    "JenkinsNetworkError",
    "JenkinsHTTPError",
    "JenkinsProtocolError",
    "JenkinsValidationError",
    "ToolError",
    "ToolNotFoundError",
    "InvalidArgumentsError",
    "ToolExecutionError",
]
