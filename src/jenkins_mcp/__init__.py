"""jenkins_mcp package exports."""

from .core import (
    Build,
    InvalidArgumentsError,
    Item,
    JenkinsClient,
    JenkinsClientError,
    JenkinsConfig,
    JenkinsConfigurationError,
    JenkinsHTTPError,
    JenkinsNetworkError,
    JenkinsProtocolError,
    JenkinsValidationError,
    Node,
    QueueItem,
    ToolError,
    ToolExecutionError,
    ToolNotFoundError,
    execute_tool,
    list_tool_definitions,
    load_env_config,
    serve_tools,
)
from .server import run as run_server

__all__ = [
    # Client
    "JenkinsClient",
    "JenkinsConfig",
    "load_env_config",
    # Models
    "Item",
    "Build",
    "Node",
    "QueueItem",
    # Exceptions
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
    # Server utilities
    "execute_tool",
    "list_tool_definitions",
    "serve_tools",
    "run_server",
]
