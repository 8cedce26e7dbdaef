from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List

from mcp import types

from .errors import (
    InvalidArgumentsError,
    JenkinsValidationError,
    ToolError,
    ToolExecutionError,
    ToolNotFoundError,
)
from .jenkins import JenkinsClient
from .models import JenkinsModel
from .observability import logged_tool_call
from .tools import ALL_TOOLS, ToolSpec

log = logging.getLogger("jenkins_mcp.core.registry")


def _build_registry(specs: List[ToolSpec]) -> Dict[str, ToolSpec]:
    registry: Dict[str, ToolSpec] = {}
    for spec in specs:
        if spec.name in registry:
            raise ValueError(f"Duplicate tool name detected: {spec.name}")
        registry[spec.name] = spec
    return registry


TOOL_REGISTRY: Dict[str, ToolSpec] = _build_registry(ALL_TOOLS)


def get_tool_registry() -> Dict[str, ToolSpec]:
    """Copy of the name -> ToolSpec table, for inspection."""
    return dict(TOOL_REGISTRY)


def list_tool_definitions() -> List[Dict[str, Any]]:
    return [spec.to_definition() for spec in TOOL_REGISTRY.values()]


# --- Dispatch -------------------------------------------------------------- #


async def execute_tool(client: JenkinsClient, name: str, arguments: Any) -> Any:
    """
    Validate and run one tool call.

    Every failure comes out as a ToolError:
    - ToolNotFoundError for unknown names
    - InvalidArgumentsError for a non-object argument bag or a rejected field
    - ToolExecutionError for anything else (network, HTTP status, protocol)
    """
    spec = TOOL_REGISTRY.get(name)
    if spec is None:
        raise ToolNotFoundError(name)

    # MCP sends no "arguments" key for argument-less calls
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise InvalidArgumentsError("Arguments must be an object")

    try:
        with logged_tool_call(name):
            result = await spec.handler(client, arguments)
    except ToolError:
        raise
    except JenkinsValidationError as exc:
        raise InvalidArgumentsError(str(exc), field=exc.field) from exc
    except Exception as exc:
        raise ToolExecutionError(name, str(exc)) from exc
    return result


def to_jsonable(value: Any) -> Any:
    if isinstance(value, JenkinsModel):
        return value.to_payload()
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    return value


def render_result(result: Any) -> str:
    """Strings (XML, console logs) pass through; everything else becomes JSON."""
    if isinstance(result, str):
        return result
    return json.dumps(to_jsonable(result), indent=2)


# --- MCP server binding ---------------------------------------------------- #


def serve_tools(
    server,
    client_provider: Callable[[], JenkinsClient] | JenkinsClient,
) -> None:
    """
    Serve tools/list and tools/call on a low-level MCP server.

    The handlers go straight into `server.request_handlers` rather than
    through the `call_tool()` decorator, which folds every exception into an
    isError text result. A ToolError raised here reaches the session as a
    JSON-RPC error carrying its code (METHOD_NOT_FOUND, INVALID_PARAMS or
    INTERNAL_ERROR).
    """
    if isinstance(client_provider, JenkinsClient):
        _client = client_provider

        def client_provider():
            return _client

    handlers = getattr(server, "request_handlers", None)
    if not isinstance(handlers, dict):
        raise TypeError("server must expose a request_handlers mapping")

    tools = [types.Tool(**definition) for definition in list_tool_definitions()]

    async def list_tools(request: types.ListToolsRequest) -> types.ServerResult:
        return types.ServerResult(types.ListToolsResult(tools=tools))

    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        result = await execute_tool(
            client_provider(), request.params.name, request.params.arguments
        )
        return types.ServerResult(
            types.CallToolResult(
                content=[types.TextContent(type="text", text=render_result(result))],
                isError=False,
            )
        )

    handlers[types.ListToolsRequest] = list_tools
    handlers[types.CallToolRequest] = call_tool
    log.debug("Serving %d tools", len(tools))


__all__ = [
    "TOOL_REGISTRY",
    "get_tool_registry",
    "list_tool_definitions",
    "execute_tool",
    "render_result",
    "to_jsonable",
    "serve_tools",
]
